"""Tests for domain models to verify they work correctly."""

import numpy as np
import pytest

from vectrace.domain import (
    BinaryGrid,
    Contour,
    PixelBuffer,
    Point,
    WindingDirection,
)
from vectrace.exceptions import PixelBufferError


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(4.5, 7.5)
        assert p.x == 4.5
        assert p.y == 7.5

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point(1.5, 2.5).to_tuple() == (1.5, 2.5)

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(1.0, 2.0)
        with pytest.raises(AttributeError):
            p.x = 3.0  # type: ignore

    def test_point_hashable(self) -> None:
        """Equal points collapse in a set."""
        assert len({Point(1.0, 2.0), Point(1.0, 2.0), Point(2.0, 1.0)}) == 2


class TestContour:
    """Tests for Contour class."""

    def test_contour_creation(self) -> None:
        """Test basic contour creation."""
        points = [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]
        contour = Contour(points=points)
        assert len(contour) == 4
        assert list(contour) == points

    def test_validity(self) -> None:
        """Contours need three points."""
        assert not Contour(points=[Point(0, 0), Point(1, 0)]).is_valid
        assert Contour(points=[Point(0, 0), Point(1, 0), Point(1, 1)]).is_valid

    def test_signed_area_clockwise_on_screen(self) -> None:
        """Right, down, left, up is clockwise with y pointing down."""
        contour = Contour(
            points=[Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]
        )
        assert contour.signed_area() == 100.0
        assert contour.winding() == WindingDirection.CLOCKWISE

    def test_signed_area_counter_clockwise_on_screen(self) -> None:
        """Down, right, up, left is counter-clockwise with y pointing down."""
        contour = Contour(
            points=[Point(0, 0), Point(0, 10), Point(10, 10), Point(10, 0)]
        )
        assert contour.signed_area() == -100.0
        assert contour.winding() == WindingDirection.COUNTER_CLOCKWISE

    def test_degenerate_winding(self) -> None:
        """Collinear and short contours have no winding."""
        assert Contour(points=[Point(0, 0), Point(1, 0)]).winding() is None
        line = Contour(points=[Point(0, 0), Point(1, 0), Point(2, 0)])
        assert line.signed_area() == 0.0
        assert line.winding() is None

    def test_bounding_box(self) -> None:
        """Test bounding box calculation."""
        contour = Contour(
            points=[Point(4.5, 4.5), Point(4.5, 14.5), Point(14.5, 14.5), Point(14.5, 4.5)]
        )
        assert contour.bounding_box() == (4.5, 4.5, 14.5, 14.5)

    def test_empty_bounding_box(self) -> None:
        """Empty contours have a zero bounding box."""
        assert Contour().bounding_box() == (0.0, 0.0, 0.0, 0.0)


class TestPixelBuffer:
    """Tests for PixelBuffer class."""

    def test_creation(self) -> None:
        """A correctly sized buffer is accepted."""
        pixels = PixelBuffer(width=2, height=3, data=bytes(2 * 3 * 4))
        assert pixels.width == 2
        assert pixels.height == 3

    def test_wrong_length_fails_fast(self) -> None:
        """A buffer shorter than width * height * 4 is rejected."""
        with pytest.raises(PixelBufferError) as exc_info:
            PixelBuffer(width=4, height=4, data=bytes(63))

        assert exc_info.value.width == 4
        assert exc_info.value.height == 4
        assert exc_info.value.length == 63
        assert "expected 64 bytes" in str(exc_info.value)

    def test_non_bytes_data_rejected(self) -> None:
        """An int is not mistaken for a run of zero bytes."""
        with pytest.raises(TypeError, match="bytes-like"):
            PixelBuffer(width=1, height=1, data=4)  # type: ignore[arg-type]

    def test_negative_dimensions_rejected(self) -> None:
        """Negative sizes are never valid."""
        with pytest.raises(PixelBufferError):
            PixelBuffer(width=-1, height=1, data=b"")

    def test_empty_image_allowed(self) -> None:
        """A zero-sized image is degenerate but well formed."""
        pixels = PixelBuffer(width=0, height=0, data=b"")
        assert pixels.as_array().shape == (0, 0, 4)

    def test_bytearray_is_copied_to_bytes(self) -> None:
        """Mutable input is frozen into bytes."""
        data = bytearray(4)
        pixels = PixelBuffer(width=1, height=1, data=data)
        data[0] = 255
        assert isinstance(pixels.data, bytes)
        assert pixels.as_array()[0, 0].tolist() == [0, 0, 0, 0]

    def test_pixel_access_is_row_major(self) -> None:
        """Pixel (x, y) lives at offset (y * width + x) * 4."""
        rgba = np.zeros((2, 3, 4), dtype=np.uint8)
        rgba[1, 2] = (10, 20, 30, 40)
        pixels = PixelBuffer.from_array(rgba)

        assert pixels.width == 3
        assert pixels.height == 2
        assert pixels.as_array()[1, 2].tolist() == [10, 20, 30, 40]
        assert pixels.data[(1 * 3 + 2) * 4] == 10

    def test_from_array_rejects_wrong_shape(self) -> None:
        """Arrays without an RGBA axis are rejected."""
        with pytest.raises(PixelBufferError):
            PixelBuffer.from_array(np.zeros((4, 4, 3), dtype=np.uint8))

    def test_solid(self) -> None:
        """Solid buffers repeat a single color."""
        pixels = PixelBuffer.solid(3, 2, (1, 2, 3, 4))
        assert len(pixels.data) == 24
        assert pixels.as_array()[1, 2].tolist() == [1, 2, 3, 4]

    def test_immutable(self) -> None:
        """Pixel buffers are frozen."""
        pixels = PixelBuffer.solid(1, 1, (0, 0, 0, 255))
        with pytest.raises(AttributeError):
            pixels.width = 2  # type: ignore


class TestBinaryGrid:
    """Tests for BinaryGrid class."""

    def test_empty(self) -> None:
        """Empty grids are all background."""
        grid = BinaryGrid.empty(5, 3)
        assert grid.width == 5
        assert grid.height == 3
        assert grid.foreground_count() == 0

    def test_cell_code_weights(self) -> None:
        """Corners weigh tl=8, tr=4, br=2, bl=1."""
        grid = BinaryGrid.empty(2, 2)
        grid.cells[0, 0] = True
        assert grid.cell_code(0, 0) == 8

        grid = BinaryGrid.empty(2, 2)
        grid.cells[0, 1] = True
        assert grid.cell_code(0, 0) == 4

        grid = BinaryGrid.empty(2, 2)
        grid.cells[1, 1] = True
        assert grid.cell_code(0, 0) == 2

        grid = BinaryGrid.empty(2, 2)
        grid.cells[1, 0] = True
        assert grid.cell_code(0, 0) == 1

    def test_to_pixel_buffer(self) -> None:
        """Foreground renders black, background white, both opaque."""
        grid = BinaryGrid.empty(2, 1)
        grid.cells[0, 0] = True
        pixels = grid.to_pixel_buffer()

        assert pixels.as_array()[0, 0].tolist() == [0, 0, 0, 255]
        assert pixels.as_array()[0, 1].tolist() == [255, 255, 255, 255]
