"""Vectrace - Trace raster images into SVG outlines.

Vectrace converts an RGBA pixel buffer into an SVG document whose path outlines the
foreground regions of the image. Potrace is tried first; when it fails or comes
back empty, a marching-squares tracer with Douglas-Peucker simplification
produces the outline instead.

Example:
    $ vectrace logo.png

This will create logo.svg next to the input image.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
