"""Post-processing of SVG documents produced by tracing engines.

Engines return complete documents. Before a primary engine's document is handed
to the caller its paths are restyled with the caller's colors and its root is
normalized so the drawing scales with its container.
"""

import re
import xml.etree.ElementTree as ET

from vectrace.exceptions import SvgDocumentError
from vectrace.io.svg_writer import PathStyle, format_number

SVG_NS = "http://www.w3.org/2000/svg"
PATH_TAG = f"{{{SVG_NS}}}path"

SCALE_RE = re.compile(r"scale\(\s*([-+\d.eE]+)(?:[\s,]+([-+\d.eE]+))?\s*\)")

ET.register_namespace("", SVG_NS)


def parse_document(svg: str) -> ET.Element:
    """Parse an SVG string into its root element.

    Raises:
        SvgDocumentError: If the string is not well-formed XML
    """
    try:
        return ET.fromstring(svg)
    except ET.ParseError as e:
        raise SvgDocumentError(str(e)) from e


def find_paths(root: ET.Element) -> list[ET.Element]:
    """All ``<path>`` elements, namespaced or not."""
    return list(root.iter(PATH_TAG)) + list(root.iter("path"))


def count_paths(svg: str) -> int:
    """Number of ``<path>`` elements in an SVG document."""
    return len(find_paths(parse_document(svg)))


def transform_scale(transform: str | None) -> float:
    """Uniform scale factor of a ``transform`` attribute's ``scale()`` terms.

    Non-uniform scales count as the geometric mean of their axes; other
    transform functions are ignored.
    """
    factor = 1.0
    for sx, sy in SCALE_RE.findall(transform or ""):
        x = abs(float(sx))
        y = abs(float(sy)) if sy else x
        factor *= x if x == y else (x * y) ** 0.5
    return factor


def restyle_paths(root: ET.Element, style: PathStyle) -> int:
    """Overwrite the presentation attributes of every path.

    Stroke widths are divided by the scale of enclosing groups so a path
    inside ``<g transform="scale(0.1)">`` renders at the caller's width.

    Returns:
        Number of paths restyled
    """
    attributes = style.attributes()
    count = 0
    pending = [(root, 1.0)]
    while pending:
        element, scale = pending.pop()
        scale *= transform_scale(element.get("transform"))
        if element.tag in (PATH_TAG, "path"):
            for name, value in attributes.items():
                element.set(name, value)
            if scale > 0 and scale != 1.0:
                element.set("stroke-width", format_number(round(style.stroke_width / scale, 6)))
            count += 1
        pending.extend((child, scale) for child in element)
    return count


def normalize_root(root: ET.Element, width: int, height: int) -> None:
    """Make the document fill its container while keeping the image's aspect ratio."""
    root.set("viewBox", f"0 0 {width} {height}")
    root.set("width", "100%")
    root.set("height", "100%")
    root.set("preserveAspectRatio", "xMidYMid meet")


def to_string(root: ET.Element) -> str:
    return ET.tostring(root, encoding="unicode")


def finalize_primary(svg: str, width: int, height: int, style: PathStyle) -> str:
    """Restyle and normalize a primary engine's document.

    Args:
        svg: Document returned by the engine
        width: Source image width in pixels
        height: Source image height in pixels
        style: Caller's path styling

    Returns:
        Re-serialized document
    """
    root = parse_document(svg)
    restyle_paths(root, style)
    normalize_root(root, width, height)
    return to_string(root)
