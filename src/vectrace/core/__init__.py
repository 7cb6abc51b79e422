"""Core tracing algorithms for vectrace.

This module contains the tracing pipeline:

- Binarization (RGBA pixels to a foreground/background grid)
- Contour extraction (marching-squares boundary walks)
- Path simplification (Douglas-Peucker)
- Engines (Potrace primary, contour-pipeline fallback)
- Orchestration (primary-then-fallback with cooperative yielding)

All stages are designed to be:
- Stateless between traces (safe to run concurrently or in worker threads)
- Bounded by explicit caps on walk length and contour count

Key functions:
- binarize: Threshold a PixelBuffer into a BinaryGrid
- find_contours: Extract closed boundaries from a BinaryGrid
- simplify: Reduce a polyline within a tolerance
- trace_contours: Run the whole fallback pipeline synchronously
- trace_image_to_svg: Public async entry point

Key classes:
- ContourEngine: Fallback engine
- PotraceEngine: Primary engine
- Scheduler: Cooperative yield points and cancellation
- TraceOrchestrator: Primary-then-fallback driver
"""

from vectrace.core.binarizer import binarize, iter_binarize
from vectrace.core.contours import (
    MAX_CONTOURS,
    MAX_WALK_STEPS,
    SCAN_YIELD_ROWS,
    find_contours,
    iter_find_contours,
    trace_contour,
)
from vectrace.core.engines import (
    ContourEngine,
    PotraceEngine,
    TracingEngine,
    grid_to_pbm,
    potrace_command,
    trace_contours,
)
from vectrace.core.orchestrator import (
    TraceOrchestrator,
    TraceOutcome,
    trace_image_to_svg,
    trace_image_to_svg_sync,
)
from vectrace.core.scheduler import Scheduler
from vectrace.core.simplify import perpendicular_distance, simplify

__all__ = [
    # Caps
    "MAX_CONTOURS",
    "MAX_WALK_STEPS",
    "SCAN_YIELD_ROWS",
    # Engines
    "ContourEngine",
    "PotraceEngine",
    "TracingEngine",
    # Orchestration
    "Scheduler",
    "TraceOrchestrator",
    "TraceOutcome",
    # Pipeline functions
    "binarize",
    "find_contours",
    "grid_to_pbm",
    "iter_binarize",
    "iter_find_contours",
    "perpendicular_distance",
    "potrace_command",
    "simplify",
    "trace_contour",
    "trace_contours",
    "trace_image_to_svg",
    "trace_image_to_svg_sync",
]
