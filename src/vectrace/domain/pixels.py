"""Raster inputs to the tracing pipeline.

- PixelBuffer: the caller's RGBA image, borrowed for the duration of a trace
- BinaryGrid: the foreground/background classification of a PixelBuffer
"""

from dataclasses import dataclass

import numpy as np

from vectrace.exceptions import PixelBufferError

CHANNELS = 4

FOREGROUND_RGBA = (0, 0, 0, 255)
BACKGROUND_RGBA = (255, 255, 255, 255)


@dataclass(frozen=True)
class PixelBuffer:
    """An RGBA image, row-major, origin top-left.

    Attributes:
        width: Image width in pixels
        height: Image height in pixels
        data: ``width * height * 4`` bytes of R, G, B, A per pixel

    Raises:
        TypeError: If ``data`` is not a bytes-like object
        PixelBufferError: If the dimensions are negative or ``data`` has the
            wrong length
    """

    width: int
    height: int
    data: bytes

    def __post_init__(self) -> None:
        # bytes(n) would silently build n zero bytes from an int
        if not isinstance(self.data, (bytes, bytearray, memoryview)):
            raise TypeError(
                f"pixel data must be bytes-like, not {type(self.data).__name__}"
            )
        data = bytes(self.data)
        object.__setattr__(self, "data", data)
        if (
            self.width < 0
            or self.height < 0
            or len(data) != self.width * self.height * CHANNELS
        ):
            raise PixelBufferError(self.width, self.height, len(data))

    def as_array(self) -> np.ndarray:
        """Read-only uint8 view of shape (height, width, 4)."""
        return np.frombuffer(self.data, dtype=np.uint8).reshape(
            self.height, self.width, CHANNELS
        )

    @classmethod
    def from_array(cls, array: np.ndarray) -> "PixelBuffer":
        """Build a buffer from a (height, width, 4) array.

        Args:
            array: Array convertible to uint8 with a trailing RGBA axis

        Returns:
            PixelBuffer copying the array's contents
        """
        if array.ndim != 3 or array.shape[2] != CHANNELS:
            raise PixelBufferError(
                array.shape[1] if array.ndim > 1 else 0,
                array.shape[0] if array.ndim > 0 else 0,
                int(array.size),
            )
        height, width = array.shape[:2]
        data = np.ascontiguousarray(array, dtype=np.uint8).tobytes()
        return cls(width=width, height=height, data=data)

    @classmethod
    def solid(
        cls, width: int, height: int, rgba: tuple[int, int, int, int]
    ) -> "PixelBuffer":
        """Build a buffer filled with a single color."""
        return cls(width=width, height=height, data=bytes(rgba) * (width * height))


@dataclass
class BinaryGrid:
    """Foreground/background classification, ``True`` meaning foreground.

    Attributes:
        cells: Boolean array of shape (height, width)
    """

    cells: np.ndarray

    @classmethod
    def empty(cls, width: int, height: int) -> "BinaryGrid":
        """All-background grid of the given size."""
        return cls(cells=np.zeros((height, width), dtype=bool))

    @property
    def width(self) -> int:
        return int(self.cells.shape[1])

    @property
    def height(self) -> int:
        return int(self.cells.shape[0])

    def foreground_count(self) -> int:
        return int(np.count_nonzero(self.cells))

    def cell_code(self, x: int, y: int) -> int:
        """Marching-squares code of the 2x2 cell whose top-left pixel is (x, y).

        Corners are weighted top-left 8, top-right 4, bottom-right 2 and
        bottom-left 1.
        """
        cells = self.cells
        return (
            (8 if cells[y, x] else 0)
            | (4 if cells[y, x + 1] else 0)
            | (2 if cells[y + 1, x + 1] else 0)
            | (1 if cells[y + 1, x] else 0)
        )

    def to_pixel_buffer(self) -> PixelBuffer:
        """Render as opaque black ink on opaque white paper."""
        rgba = np.empty((self.height, self.width, CHANNELS), dtype=np.uint8)
        rgba[...] = BACKGROUND_RGBA
        rgba[self.cells] = FOREGROUND_RGBA
        return PixelBuffer.from_array(rgba)
