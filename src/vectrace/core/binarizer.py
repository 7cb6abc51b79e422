"""Thresholding of RGBA pixels into a foreground/background grid.

Gray values are the plain average of the red, green and blue channels; no
perceptual weighting is applied. Mostly transparent pixels (alpha below
ALPHA_CUTOFF) count as paper when tracing dark ink on a light background and as
ink otherwise.
"""

from collections.abc import Iterator

import numpy as np

from vectrace.domain import BinaryGrid, PixelBuffer

ALPHA_CUTOFF = 128
DEFAULT_BATCH_ROWS = 50


def iter_binarize(
    pixels: PixelBuffer,
    grid: BinaryGrid,
    threshold: int,
    black_on_white: bool,
    batch_rows: int = DEFAULT_BATCH_ROWS,
) -> Iterator[int]:
    """Fill ``grid`` from ``pixels`` one batch of rows at a time.

    Each yield is a suspension point; the value yielded is the number of rows
    classified so far.

    Args:
        pixels: Source image
        grid: Destination grid with the same dimensions as ``pixels``
        threshold: Gray level cutoff (0-255)
        black_on_white: True to treat dark pixels as foreground
        batch_rows: Rows classified between yields

    Yields:
        Number of rows completed
    """
    rgba = pixels.as_array()
    transparent_is_ink = not black_on_white

    for start in range(0, pixels.height, batch_rows):
        end = min(start + batch_rows, pixels.height)
        block = rgba[start:end]

        gray = block[..., :3].astype(np.uint16).sum(axis=2) / 3.0
        if black_on_white:
            ink = gray < threshold
        else:
            ink = gray >= threshold

        opaque = block[..., 3] >= ALPHA_CUTOFF
        grid.cells[start:end] = np.where(opaque, ink, transparent_is_ink)
        yield end


def binarize(
    pixels: PixelBuffer,
    threshold: int,
    black_on_white: bool,
) -> BinaryGrid:
    """Classify every pixel of ``pixels`` as foreground or background.

    Args:
        pixels: Source image
        threshold: Gray level cutoff (0-255)
        black_on_white: True to treat dark pixels as foreground

    Returns:
        Freshly allocated BinaryGrid
    """
    grid = BinaryGrid.empty(pixels.width, pixels.height)
    for _ in iter_binarize(pixels, grid, threshold, black_on_white):
        pass
    return grid
