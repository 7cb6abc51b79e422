"""Domain models for vectrace.

This module contains the data handed between tracing stages. All models are
created fresh for each trace and discarded when it completes:

- PixelBuffer: The caller's RGBA image (immutable)
- BinaryGrid: Foreground/background classification of the image
- Point: A 2D point in pixel space
- Contour: An implicitly closed boundary
"""

from vectrace.domain.contour import MIN_CONTOUR_POINTS, Contour, Point, WindingDirection
from vectrace.domain.pixels import BinaryGrid, PixelBuffer

__all__: list[str] = [
    # Enums
    "WindingDirection",
    # Core types
    "Point",
    "Contour",
    "PixelBuffer",
    "BinaryGrid",
    # Constants
    "MIN_CONTOUR_POINTS",
]
