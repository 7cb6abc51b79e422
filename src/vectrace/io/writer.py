"""SVG writer for saving traced documents."""

from pathlib import Path


class SvgWriter:
    """Writes traced SVG documents to disk.

    Example:
        writer = SvgWriter(Path("logo.svg"))
        writer.save(svg)
    """

    def __init__(self, output_path: Path) -> None:
        """Initialize the SVG writer.

        Args:
            output_path: Path where the document will be saved
        """
        self._output_path = output_path

    @property
    def output_path(self) -> Path:
        return self._output_path

    def save(self, svg: str) -> None:
        """Write the document as UTF-8, creating parent directories as needed.

        Raises:
            OSError: If file cannot be written
        """
        self._output_path.parent.mkdir(parents=True, exist_ok=True)
        self._output_path.write_text(svg, encoding="utf-8")

    @staticmethod
    def get_traced_path(input_path: Path) -> Path:
        """Generate the default output path for a traced image.

        Converts: logo.png -> logo.svg
                  scans/page-01.jpeg -> scans/page-01.svg

        Args:
            input_path: Original image path

        Returns:
            Path next to the input with an .svg extension
        """
        return input_path.with_suffix(".svg")
