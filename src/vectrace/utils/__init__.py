"""Utility functions for vectrace.

This module provides utility functions including:

- Logging setup and configuration
- Trace statistics collection
"""

from vectrace.utils.logging import (
    TraceLogger,
    TraceStats,
    configure_logging,
    get_logger,
)

__all__ = [
    "TraceLogger",
    "TraceStats",
    "configure_logging",
    "get_logger",
]
