"""SVG serialization of traced outlines.

Outlines are written as path data and wrapped in an ``<svg>`` document whose
viewBox matches the source image in pixels. Documents are built with svgwrite;
validation is switched off so color strings reach the output verbatim (the
caller is responsible for their validity).
"""

import xml.etree.ElementTree as ET
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import svgwrite

from vectrace.config import TraceSettings
from vectrace.domain import Point


@dataclass(frozen=True)
class PathStyle:
    """Presentation attributes applied to every emitted path."""

    stroke: str
    fill: str
    stroke_width: float

    @classmethod
    def from_settings(cls, settings: TraceSettings) -> "PathStyle":
        return cls(
            stroke=settings.color,
            fill=settings.fill_color,
            stroke_width=settings.stroke_width,
        )

    def attributes(self) -> dict[str, str]:
        """SVG attribute names mapped to their serialized values."""
        return {
            "fill": self.fill,
            "stroke": self.stroke,
            "stroke-width": format_number(self.stroke_width),
        }


def format_number(value: float) -> str:
    """Format a number without a trailing ``.0`` for integral values."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def contour_path_data(points: Sequence[Point]) -> str:
    """Path data for one closed outline: ``M x0 y0 L x1 y1 ... Z``.

    Coordinates are written with one decimal place.
    """
    head, *rest = points
    parts = [f"M {head.x:.1f} {head.y:.1f}"]
    parts.extend(f"L {p.x:.1f} {p.y:.1f}" for p in rest)
    parts.append("Z")
    return " ".join(parts)


def build_document(
    width: int,
    height: int,
    style: PathStyle,
    path_data: Iterable[str],
) -> str:
    """Wrap path data in an SVG document.

    Args:
        width: Image width in pixels
        height: Image height in pixels
        style: Attributes applied to every path
        path_data: One entry per ``<path>`` element

    Returns:
        SVG document string
    """
    drawing = svgwrite.Drawing(
        size=(width, height),
        viewBox=f"0 0 {width} {height}",
        debug=False,
    )
    for d in path_data:
        drawing.add(drawing.path(d=d, **style.attributes()))

    root = drawing.get_xml()
    # svgwrite omits empty attributes; a path without outlines keeps d=""
    for path in root.iter("path"):
        if path.get("d") is None:
            path.set("d", "")
    return ET.tostring(root, encoding="unicode")


def serialize(
    contours: Iterable[Sequence[Point]],
    width: int,
    height: int,
    style: PathStyle,
) -> str:
    """Render outlines as a single-path SVG document.

    Args:
        contours: Simplified outlines; empty outlines are skipped
        width: Image width in pixels
        height: Image height in pixels
        style: Stroke, fill and stroke width of the path

    Returns:
        SVG document with exactly one ``<path>``, whose ``d`` is empty when
        there are no outlines
    """
    d = " ".join(contour_path_data(points) for points in contours if points)
    return build_document(width, height, style, [d])
