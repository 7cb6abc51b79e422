"""CLI application entry point for vectrace.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from vectrace import __version__
from vectrace.cli.output import (
    console,
    print_cancellation_notice,
    print_error,
    print_header,
    print_image_info,
    print_settings_info,
    print_step,
    print_success,
)
from vectrace.config import (
    EngineConfig,
    LoggingConfig,
    TraceSettings,
    TurnPolicy,
    VectraceSettings,
)
from vectrace.core import TraceOrchestrator
from vectrace.exceptions import ImageLoadError, SvgSaveError, VectraceError
from vectrace.io import ImageReader, SvgWriter
from vectrace.utils import TraceLogger, configure_logging

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# Create the Typer app
app = typer.Typer(
    name="vectrace",
    help="Trace raster images into SVG outlines.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Vectrace[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def trace(
    input_image: Annotated[
        Path,
        typer.Argument(
            help="Path to input image (PNG, JPEG, BMP, ...)",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}.svg next to the input)",
        ),
    ] = None,
    threshold: Annotated[
        int,
        typer.Option(
            "--threshold",
            "-t",
            help="Gray level separating ink from paper (0-255)",
            min=0,
            max=255,
        ),
    ] = 128,
    turd_size: Annotated[
        int,
        typer.Option(
            "--turd-size",
            "-s",
            help="Suppress speckles smaller than this",
            min=0,
        ),
    ] = 2,
    tolerance: Annotated[
        float,
        typer.Option(
            "--tolerance",
            help="Curve optimization / simplification tolerance",
            min=0.0,
        ),
    ] = 0.2,
    alpha_max: Annotated[
        float,
        typer.Option(
            "--alpha-max",
            help="Potrace corner threshold (0 = polygons, 1.34 = smooth)",
            min=0.0,
            max=1.34,
        ),
    ] = 1.0,
    turn_policy: Annotated[
        str,
        typer.Option(
            "--turn-policy",
            help="Potrace turn policy (black|white|left|right|minority|majority)",
        ),
    ] = "minority",
    invert: Annotated[
        bool,
        typer.Option(
            "--invert",
            "-i",
            help="Trace light shapes on a dark background",
        ),
    ] = False,
    color: Annotated[
        str,
        typer.Option(
            "--color",
            "-c",
            help="Stroke color of the traced path",
        ),
    ] = "#00d4ff",
    fill: Annotated[
        str,
        typer.Option(
            "--fill",
            help="Fill color of the traced path",
        ),
    ] = "transparent",
    stroke_width: Annotated[
        float,
        typer.Option(
            "--stroke-width",
            "-w",
            help="Stroke width of the traced path",
            min=0.0,
        ),
    ] = 1.0,
    no_potrace: Annotated[
        bool,
        typer.Option(
            "--no-potrace",
            help="Skip Potrace and use the contour tracer directly",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Trace a raster image into an SVG outline.

    Dark shapes on a light background are traced by default; use --invert for
    light shapes on a dark background. Potrace is tried first, and the built-in
    contour tracer takes over if Potrace fails or finds nothing.

    Example:
        vectrace logo.png

    This will create logo.svg next to the input image.
    """
    # Validate input file exists
    if not input_image.exists():
        print_error(
            f"Input file not found: {input_image}",
            details=f"The file '{input_image}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_image.is_file():
        print_error(
            f"Input path is not a file: {input_image}",
            details="Please provide a path to a raster image file.",
        )
        raise typer.Exit(code=1)

    # Validate turn policy argument
    try:
        policy = TurnPolicy(turn_policy.lower())
    except ValueError:
        print_error(
            f"Invalid turn policy: {turn_policy}",
            details="Valid values: black, white, left, right, minority, majority",
        )
        raise typer.Exit(code=1)

    if log_level.upper() not in LOG_LEVELS:
        print_error(
            f"Invalid log level: {log_level}",
            details=f"Valid values: {', '.join(LOG_LEVELS)}",
        )
        raise typer.Exit(code=1)

    try:
        settings = VectraceSettings(
            trace=TraceSettings(
                threshold=threshold,
                turd_size=turd_size,
                alpha_max=alpha_max,
                opt_tolerance=tolerance,
                turn_policy=policy,
                black_on_white=not invert,
                color=color,
                fill_color=fill,
                stroke_width=stroke_width,
            ),
            engine=EngineConfig(use_primary=not no_potrace),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level if not quiet else "WARNING",
            ),
        )
    except ValidationError as e:
        print_error("Invalid settings", details=str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    output_path = output if output is not None else SvgWriter.get_traced_path(input_image)

    try:
        if not quiet:
            print_step("Loading image")

        try:
            with ImageReader(input_image) as reader:
                pixels = reader.pixel_buffer()
                image_format = reader.format
        except Exception as e:
            raise ImageLoadError(str(input_image), str(e)) from e

        if not quiet:
            print_image_info(
                image_path=str(input_image),
                image_format=image_format,
                width=pixels.width,
                height=pixels.height,
            )
            print_step("Tracing")
            print_settings_info(threshold, turd_size, tolerance, invert)

        orchestrator = TraceOrchestrator(
            config=settings,
            trace_logger=TraceLogger(logger),
        )

        try:
            if not quiet:
                with console.status("  tracing..."):
                    outcome = orchestrator.trace_sync(pixels)
            else:
                outcome = orchestrator.trace_sync(pixels)
        except KeyboardInterrupt:
            if not quiet:
                print_cancellation_notice()
            raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code

        try:
            SvgWriter(output_path).save(outcome.svg)
        except OSError as e:
            raise SvgSaveError(str(output_path), str(e)) from e

        if not quiet:
            print_success(
                output_path=str(output_path),
                file_size=_format_file_size(output_path),
                total_time_s=outcome.duration_ms / 1000,
                engine=outcome.engine,
                used_fallback=outcome.used_fallback,
            )

    except ImageLoadError as e:
        print_error(f"Could not load image: {e.reason}")
        raise typer.Exit(code=1)
    except SvgSaveError as e:
        print_error(f"Could not save SVG: {e.reason}")
        raise typer.Exit(code=1)
    except VectraceError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "12 KB")
    """
    try:
        size_bytes = path.stat().st_size
    except OSError:
        return "unknown"

    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
