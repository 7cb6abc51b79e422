"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with status spinners and formatted messages.
"""


from rich.console import Console
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Vectrace[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_image_info(image_path: str, image_format: str, width: int, height: int) -> None:
    """Print image information.

    Args:
        image_path: Path to the image file
        image_format: Detected image format (e.g., "PNG")
        width: Width in pixels
        height: Height in pixels
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(image_path)
    line1.append(f" ({image_format})")
    console.print(line1)
    console.print(f"  {width:,} {SYM_DOT} {height:,} px")


def print_settings_info(threshold: int, turd_size: int, tolerance: float, invert: bool) -> None:
    """Print the trace settings in effect."""
    mode = "light on dark" if invert else "dark on light"
    console.print(
        f"  threshold {threshold} {SYM_DOT} turd size {turd_size} {SYM_DOT} "
        f"tolerance {tolerance} {SYM_DOT} {mode}"
    )


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    output_path: str,
    file_size: str,
    total_time_s: float,
    engine: str,
    used_fallback: bool,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        total_time_s: Total trace time in seconds
        engine: Name of the engine that produced the document
        used_fallback: Whether the fallback engine was used
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)

    engine_style = "yellow" if used_fallback else "green"
    suffix = " (fallback)" if used_fallback else ""
    console.print(f"  traced with [{engine_style}]{engine}{suffix}[/{engine_style}]")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_cancellation_notice() -> None:
    """Print cancellation acknowledgment."""
    console.print(f"\n{SYM_DOT} [bold]Cancelled[/bold]")
    console.print("  No output file created")
