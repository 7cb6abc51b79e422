"""Dual-engine trace orchestration.

The orchestrator is the public entry point of the tracing engine. It tries the
primary engine first; if that raises or returns a document without paths it
runs the fallback engine on the same input. A successful primary result is
restyled with the caller's colors and normalized for responsive embedding.
Either way the caller receives one complete SVG document.

    Start -> TryPrimary -> PostProcessPrimary -> Done
                      \\-> RunFallback -------> Done

Only cancellation and failures of the fallback itself reach the caller.
"""

import asyncio
import threading
import time
from dataclasses import dataclass

from vectrace.config import TraceSettings, VectraceSettings
from vectrace.core.engines import ContourEngine, PotraceEngine, TracingEngine
from vectrace.core.scheduler import Scheduler
from vectrace.domain import PixelBuffer
from vectrace.exceptions import EmptyTraceError, TraceCancelledError
from vectrace.io.svg_document import count_paths, finalize_primary
from vectrace.io.svg_writer import PathStyle
from vectrace.utils.logging import TraceLogger


@dataclass(frozen=True)
class TraceOutcome:
    """Result of one orchestrated trace.

    Attributes:
        svg: The SVG document
        engine: Name of the engine that produced it
        used_fallback: True when the primary engine was skipped or failed
        duration_ms: Wall time of the whole trace
    """

    svg: str
    engine: str
    used_fallback: bool
    duration_ms: float


class TraceOrchestrator:
    """Runs the primary engine with a fallback.

    Holds no per-trace state, so one instance can serve any number of
    concurrent traces.

    Example:
        orchestrator = TraceOrchestrator()
        outcome = await orchestrator.trace(pixels, TraceSettings(threshold=100))
        print(outcome.engine, len(outcome.svg))
    """

    def __init__(
        self,
        config: VectraceSettings | None = None,
        primary: TracingEngine | None = None,
        fallback: TracingEngine | None = None,
        trace_logger: TraceLogger | None = None,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            config: Application settings (defaults if None)
            primary: Primary engine (Potrace if None)
            fallback: Fallback engine (contour tracer if None)
            trace_logger: Logger collecting trace statistics
        """
        self.config = config or VectraceSettings()
        self.trace_logger = trace_logger or TraceLogger()
        self.primary = primary or PotraceEngine(self.config.scheduler, self.config.engine)
        self.fallback = fallback or ContourEngine(
            self.config.scheduler, self.trace_logger
        )

    async def _try_primary(
        self,
        pixels: PixelBuffer,
        settings: TraceSettings,
        scheduler: Scheduler,
    ) -> str | None:
        """Run the primary engine, returning None on any recoverable failure."""
        self.trace_logger.log_primary_attempt(self.primary.name)
        try:
            svg = await self.primary.trace(pixels, settings, scheduler)
            if count_paths(svg) == 0:
                raise EmptyTraceError(self.primary.name)
            return finalize_primary(
                svg, pixels.width, pixels.height, PathStyle.from_settings(settings)
            )
        except TraceCancelledError:
            raise
        except Exception as e:
            self.trace_logger.log_primary_failure(self.primary.name, e)
            return None

    async def trace(
        self,
        pixels: PixelBuffer,
        settings: TraceSettings | None = None,
        cancel_event: threading.Event | None = None,
    ) -> TraceOutcome:
        """Trace ``pixels`` into an SVG document.

        Args:
            pixels: Source image
            settings: Trace settings (config defaults if None)
            cancel_event: Optional event checked at every yield point

        Returns:
            TraceOutcome with the document and the engine that produced it

        Raises:
            TraceCancelledError: If ``cancel_event`` is set during the trace
        """
        if settings is None:
            settings = self.config.trace

        start_time = time.time()
        scheduler = Scheduler(cancel_event)
        self.trace_logger.log_trace_start(pixels.width, pixels.height)

        svg = None
        if self.config.engine.use_primary:
            svg = await self._try_primary(pixels, settings, scheduler)

        used_fallback = svg is None
        if not used_fallback:
            engine = self.primary.name
        else:
            self.trace_logger.log_fallback(self.fallback.name)
            svg = await self.fallback.trace(pixels, settings, scheduler)
            engine = self.fallback.name

        duration_ms = (time.time() - start_time) * 1000
        self.trace_logger.log_trace_complete(engine, duration_ms)
        return TraceOutcome(
            svg=svg,
            engine=engine,
            used_fallback=used_fallback,
            duration_ms=duration_ms,
        )

    def trace_sync(
        self,
        pixels: PixelBuffer,
        settings: TraceSettings | None = None,
        cancel_event: threading.Event | None = None,
    ) -> TraceOutcome:
        """Run :meth:`trace` on a fresh event loop."""
        return asyncio.run(self.trace(pixels, settings, cancel_event))

    async def trace_in_thread(
        self,
        pixels: PixelBuffer,
        settings: TraceSettings | None = None,
        cancel_event: threading.Event | None = None,
    ) -> TraceOutcome:
        """Run the whole trace in a worker thread, leaving the caller's loop free."""
        return await asyncio.to_thread(self.trace_sync, pixels, settings, cancel_event)


async def trace_image_to_svg(
    pixels: PixelBuffer,
    settings: TraceSettings | None = None,
    orchestrator: TraceOrchestrator | None = None,
) -> str:
    """Trace ``pixels`` into an SVG document string.

    Args:
        pixels: Source image
        settings: Trace settings (defaults if None)
        orchestrator: Orchestrator to use (a default one if None)

    Returns:
        SVG document
    """
    orchestrator = orchestrator or TraceOrchestrator()
    outcome = await orchestrator.trace(pixels, settings)
    return outcome.svg


def trace_image_to_svg_sync(
    pixels: PixelBuffer,
    settings: TraceSettings | None = None,
    orchestrator: TraceOrchestrator | None = None,
) -> str:
    """Blocking variant of :func:`trace_image_to_svg` for non-async callers."""
    return asyncio.run(trace_image_to_svg(pixels, settings, orchestrator))
