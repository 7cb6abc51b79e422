"""Exception hierarchy for Vectrace."""


class VectraceError(Exception):
    """Base exception for all Vectrace errors."""

    pass


class InputError(VectraceError):
    """Errors related to the pixel data handed to the engine."""

    pass


class PixelBufferError(InputError):
    """Pixel buffer does not match its stated dimensions."""

    def __init__(self, width: int, height: int, length: int) -> None:
        self.width = width
        self.height = height
        self.length = length
        super().__init__(
            f"Pixel buffer of {length} bytes does not describe a {width}x{height} "
            f"RGBA image (expected {max(width, 0) * max(height, 0) * 4} bytes)"
        )


class EngineError(VectraceError):
    """Errors raised by a tracing engine."""

    pass


class EmptyTraceError(EngineError):
    """A tracing engine produced a document without any path elements."""

    def __init__(self, engine: str) -> None:
        self.engine = engine
        super().__init__(f"Tracing engine '{engine}' produced no paths")


class PotraceNotFoundError(EngineError):
    """The Potrace executable could not be located."""

    def __init__(self, executable: str) -> None:
        self.executable = executable
        super().__init__(f"Potrace executable '{executable}' not found on PATH")


class PotraceFailedError(EngineError):
    """The Potrace process exited with an error or timed out."""

    def __init__(self, reason: str, returncode: int | None = None) -> None:
        self.reason = reason
        self.returncode = returncode
        super().__init__(f"Potrace failed: {reason}")


class SvgDocumentError(EngineError):
    """An SVG document could not be parsed."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid SVG document: {reason}")


class TraceCancelledError(VectraceError):
    """Tracing was cancelled at a yield point."""

    def __init__(self, stage: str, rows_done: int) -> None:
        self.stage = stage
        self.rows_done = rows_done
        super().__init__(f"Trace cancelled during {stage} after {rows_done} rows")


class FileIOError(VectraceError):
    """Errors related to reading images or writing SVG files."""

    pass


class ImageLoadError(FileIOError):
    """Error loading an image file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load image '{path}': {reason}")


class SvgSaveError(FileIOError):
    """Error saving an SVG file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save SVG '{path}': {reason}")
