"""End-to-end tracing tests on small synthetic images."""

import re
import shutil

import numpy as np
import pytest

from vectrace.config import EngineConfig, TraceSettings, VectraceSettings
from vectrace.core import (
    TraceOrchestrator,
    binarize,
    find_contours,
    simplify,
    trace_contours,
    trace_image_to_svg_sync,
)
from vectrace.core.simplify import tolerance_to_epsilon
from vectrace.domain import PixelBuffer
from vectrace.io.svg_document import find_paths, parse_document

NUMBER = re.compile(r"-?\d+(?:\.\d+)?")


def path_coordinates(d: str) -> list[tuple[float, float]]:
    """Coordinate pairs of M/L path data."""
    values = [float(v) for v in NUMBER.findall(d)]
    return list(zip(values[0::2], values[1::2]))


def fallback_only() -> TraceOrchestrator:
    return TraceOrchestrator(config=VectraceSettings(engine=EngineConfig(use_primary=False)))


@pytest.fixture
def square_pixels() -> PixelBuffer:
    """20x20 transparent canvas with an opaque black square over pixels 5..14."""
    rgba = np.zeros((20, 20, 4), dtype=np.uint8)
    rgba[5:15, 5:15] = (0, 0, 0, 255)
    return PixelBuffer.from_array(rgba)


@pytest.fixture
def square_settings() -> TraceSettings:
    return TraceSettings(threshold=128, black_on_white=True, turd_size=1)


class TestSquare:
    """A filled square on a transparent canvas."""

    def test_single_closed_outline(self, square_pixels, square_settings):
        outcome = fallback_only().trace_sync(square_pixels, square_settings)

        root = parse_document(outcome.svg)
        assert root.get("viewBox") == "0 0 20 20"

        (path,) = find_paths(root)
        d = path.get("d")
        assert d.startswith("M ")
        assert d.endswith(" Z")
        assert d.count("M ") == 1

        coords = path_coordinates(d)
        assert len(coords) >= 4
        xs = [x for x, _ in coords]
        ys = [y for _, y in coords]
        assert min(xs) == pytest.approx(5, abs=1)
        assert max(xs) == pytest.approx(15, abs=1)
        assert min(ys) == pytest.approx(5, abs=1)
        assert max(ys) == pytest.approx(15, abs=1)

    def test_exact_fallback_path(self, square_pixels, square_settings):
        svg = trace_contours(square_pixels, square_settings)
        (path,) = find_paths(parse_document(svg))
        assert path.get("d") == "M 4.5 4.5 L 4.5 14.5 L 14.5 14.5 L 14.5 4.5 L 5.5 4.5 Z"

    def test_simplification_never_adds_points(self, square_pixels, square_settings):
        grid = binarize(square_pixels, 128, True)
        (contour,) = find_contours(grid, 1)

        simplified = simplify(contour.points, tolerance_to_epsilon(0.2))

        assert len(simplified) <= len(contour.points)

    def test_retrace_binarized_output(self, square_pixels):
        """Tracing the binarized rendition gives the same contours."""
        grid = binarize(square_pixels, 128, True)
        contours = find_contours(grid, 1)

        retraced_grid = binarize(grid.to_pixel_buffer(), 128, True)
        retraced = find_contours(retraced_grid, 1)

        assert np.array_equal(retraced_grid.cells, grid.cells)
        assert [c.points for c in retraced] == [c.points for c in contours]
        assert [c.winding() for c in retraced] == [c.winding() for c in contours]

    def test_inverted_traces_canvas(self, square_pixels):
        """Light-on-dark mode treats the transparent canvas as ink."""
        settings = TraceSettings(black_on_white=False, turd_size=1)
        grid = binarize(square_pixels, settings.threshold, settings.black_on_white)

        assert grid.foreground_count() == 400 - 100
        assert len(find_contours(grid, 1)) >= 1


class TestBlankImages:
    """Images without foreground."""

    def test_transparent_canvas(self):
        """A fully transparent image yields one path with empty data."""
        pixels = PixelBuffer.solid(5, 5, (0, 0, 0, 0))

        svg = trace_image_to_svg_sync(pixels, TraceSettings(black_on_white=True))

        (path,) = find_paths(parse_document(svg))
        assert path.get("d") == ""
        assert find_contours(binarize(pixels, 128, True), 0) == []

    def test_white_canvas(self):
        pixels = PixelBuffer.solid(30, 30, (255, 255, 255, 255))
        outcome = fallback_only().trace_sync(pixels)

        (path,) = find_paths(parse_document(outcome.svg))
        assert path.get("d") == ""

    def test_zero_sized_image(self):
        pixels = PixelBuffer(width=0, height=0, data=b"")
        outcome = fallback_only().trace_sync(pixels)

        root = parse_document(outcome.svg)
        assert root.get("viewBox") == "0 0 0 0"


class TestManyShapes:
    """Images with many separate blobs."""

    def test_speckles_suppressed(self):
        """Single-pixel noise disappears at the default turd size."""
        rgba = np.full((40, 40, 4), 255, dtype=np.uint8)
        rgba[1::4, 1::4] = (0, 0, 0, 255)
        pixels = PixelBuffer.from_array(rgba)

        outcome = fallback_only().trace_sync(pixels, TraceSettings(turd_size=2))

        (path,) = find_paths(parse_document(outcome.svg))
        assert path.get("d") == ""

    def test_separate_blobs(self):
        rgba = np.full((30, 30, 4), 255, dtype=np.uint8)
        rgba[3:8, 3:8] = (0, 0, 0, 255)
        rgba[15:25, 12:20] = (0, 0, 0, 255)
        pixels = PixelBuffer.from_array(rgba)

        outcome = fallback_only().trace_sync(pixels, TraceSettings(turd_size=1))

        (path,) = find_paths(parse_document(outcome.svg))
        assert path.get("d").count("M ") == 2


@pytest.mark.skipif(shutil.which("potrace") is None, reason="potrace not installed")
class TestPotrace:
    """Tracing with a real Potrace installation."""

    def test_square_traced_by_potrace(self, square_pixels, square_settings):
        outcome = TraceOrchestrator().trace_sync(square_pixels, square_settings)

        assert outcome.engine == "potrace"
        assert not outcome.used_fallback

        root = parse_document(outcome.svg)
        assert root.get("width") == "100%"
        assert root.get("viewBox") == "0 0 20 20"
        paths = find_paths(root)
        assert len(paths) >= 1
        assert all(p.get("stroke") == "#00d4ff" for p in paths)

    def test_blank_image_falls_back(self):
        pixels = PixelBuffer.solid(8, 8, (255, 255, 255, 255))

        outcome = TraceOrchestrator().trace_sync(pixels)

        assert outcome.used_fallback
        assert outcome.engine == "contour"
