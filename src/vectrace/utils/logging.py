"""Logging utilities for Vectrace."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

LOGGER_NAME = "vectrace"

# Hosts that never configure logging hear nothing from the library
logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


@dataclass
class TraceStats:
    """Statistics from one or more trace runs."""

    trace_count: int = 0
    primary_attempts: int = 0
    primary_failures: int = 0
    fallback_count: int = 0
    contour_count: int = 0
    failures: list[tuple[str, str]] = field(default_factory=list)
    durations_ms: list[float] = field(default_factory=list)

    @property
    def avg_duration_ms(self) -> float:
        """Average trace duration."""
        if not self.durations_ms:
            return 0.0
        return sum(self.durations_ms) / len(self.durations_ms)


def get_logger() -> structlog.stdlib.BoundLogger:
    """Logger shared by the library modules.

    Events always pass through the stdlib "vectrace" logger, so its handlers
    decide where they go.
    """
    return structlog.wrap_logger(
        logging.getLogger(LOGGER_NAME),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Library code never calls this; applications (the CLI) do.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(logging.DEBUG)

    # Reconfiguring replaces the handlers of the previous call
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        package_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(
        logging.ERROR if quiet else getattr(logging, console_level.upper())
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = get_logger()
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class TraceLogger:
    """Logger for tracking engine attempts and trace statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else get_logger()
        self._stats = TraceStats()

    def log_trace_start(self, width: int, height: int) -> None:
        """Log start of a trace."""
        self._logger.debug("Trace started", width=width, height=height)
        self._stats.trace_count += 1

    def log_primary_attempt(self, engine: str) -> None:
        """Log an attempt with the primary engine."""
        self._logger.debug("Trying primary engine", engine=engine)
        self._stats.primary_attempts += 1

    def log_primary_failure(self, engine: str, error: Exception) -> None:
        """Log a recovered primary engine failure."""
        self._logger.warning(
            "Primary engine failed, falling back",
            engine=engine,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.primary_failures += 1
        self._stats.failures.append((engine, str(error)))

    def log_fallback(self, engine: str) -> None:
        """Log that the fallback engine is running."""
        self._logger.debug("Running fallback engine", engine=engine)
        self._stats.fallback_count += 1

    def log_contours(
        self,
        found: int,
        emitted: int,
        points_before: int,
        points_after: int,
        capped: bool,
    ) -> None:
        """Log contour extraction and simplification results."""
        self._logger.debug(
            "Contours traced",
            found=found,
            emitted=emitted,
            points_before=points_before,
            points_after=points_after,
            capped=capped,
        )
        self._stats.contour_count += emitted

    def log_trace_complete(self, engine: str, duration_ms: float) -> None:
        """Log successful trace."""
        self._logger.info(
            "Trace complete",
            engine=engine,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.durations_ms.append(duration_ms)

    @property
    def stats(self) -> TraceStats:
        """Get current trace statistics."""
        return self._stats
