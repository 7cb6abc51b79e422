"""I/O layer for vectrace.

This module handles everything on either side of the tracing engine:
decoding raster images, serializing outlines to SVG, post-processing engine
output and writing documents to disk.

Key responsibilities:
- Load raster images with Pillow into PixelBuffers
- Serialize outlines as single-path SVG documents
- Restyle and normalize documents returned by the primary engine
- Write SVG documents with the traced naming convention

Key classes:
- ImageReader: Load images as PixelBuffers
- SvgWriter: Save SVG documents
- PathStyle: Presentation attributes for emitted paths
"""

from vectrace.io.reader import ImageReader, image_to_pixel_buffer
from vectrace.io.svg_writer import PathStyle, serialize
from vectrace.io.writer import SvgWriter

__all__ = [
    "ImageReader",
    "PathStyle",
    "SvgWriter",
    "image_to_pixel_buffer",
    "serialize",
]
