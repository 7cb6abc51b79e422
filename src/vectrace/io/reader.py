"""Image reader for loading raster files.

This module provides the ImageReader class for loading image files with
Pillow and handing them to the tracer as PixelBuffers. The tracing engine
itself never decodes images.
"""

from pathlib import Path

from PIL import Image

from vectrace.domain import PixelBuffer


def image_to_pixel_buffer(image: Image.Image) -> PixelBuffer:
    """Convert a Pillow image to an RGBA PixelBuffer.

    Args:
        image: Image in any mode Pillow can convert to RGBA

    Returns:
        PixelBuffer with the image's RGBA bytes
    """
    if image.mode != "RGBA":
        image = image.convert("RGBA")
    width, height = image.size
    return PixelBuffer(width=width, height=height, data=image.tobytes())


class ImageReader:
    """Loads raster images and exposes them as PixelBuffers.

    Example:
        reader = ImageReader(Path("logo.png"))
        reader.load()
        pixels = reader.pixel_buffer()
    """

    def __init__(self, image_path: Path) -> None:
        """Initialize the image reader.

        Args:
            image_path: Path to a raster image (PNG, JPEG, BMP, ...)
        """
        self._image_path = image_path
        self._image: Image.Image | None = None

    def load(self) -> None:
        """Load the image file.

        Raises:
            FileNotFoundError: If image file does not exist
            PIL.UnidentifiedImageError: If the file is not a recognized image
        """
        if not self._image_path.exists():
            raise FileNotFoundError(f"Image file not found: {self._image_path}")

        with Image.open(self._image_path) as image:
            image.load()
            self._image = image.convert("RGBA")

    @property
    def size(self) -> tuple[int, int]:
        """Return (width, height) in pixels.

        Raises:
            RuntimeError: If image has not been loaded yet
        """
        if self._image is None:
            raise RuntimeError("Image not loaded. Call load() first.")

        return self._image.size

    @property
    def format(self) -> str:
        """Return the file format Pillow detected from the file extension.

        Raises:
            RuntimeError: If image has not been loaded yet
        """
        if self._image is None:
            raise RuntimeError("Image not loaded. Call load() first.")

        extension = self._image_path.suffix.lower().lstrip(".")
        return Image.registered_extensions().get(f".{extension}", extension.upper())

    def pixel_buffer(self) -> PixelBuffer:
        """Return the image as an RGBA PixelBuffer.

        Raises:
            RuntimeError: If image has not been loaded yet
        """
        if self._image is None:
            raise RuntimeError("Image not loaded. Call load() first.")

        return image_to_pixel_buffer(self._image)

    def close(self) -> None:
        """Release the decoded image."""
        if self._image is not None:
            self._image.close()
            self._image = None

    def __enter__(self) -> "ImageReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
