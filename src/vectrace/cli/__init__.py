"""Command-line interface for vectrace.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Potrace tuning and output styling from the command line
- Quiet output mode
- Structured log files
- Detailed error reporting
"""

from vectrace.cli.app import cli, main

__all__ = ["cli", "main"]
