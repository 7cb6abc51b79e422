"""Tracing engines.

Both engines implement the same contract: an RGBA pixel buffer plus trace
settings in, a complete SVG document out.

- PotraceEngine: the Potrace executable fitting Bezier curves to the
  thresholded image. Used as the primary engine.
- ContourEngine: binarization, marching-squares contour extraction,
  Douglas-Peucker simplification and single-path serialization. Used as the
  fallback engine; never consults the Potrace-only settings.
"""

import asyncio
import io
import shutil
import subprocess
from typing import Protocol

import numpy as np
from PIL import Image

from vectrace.config import EngineConfig, SchedulerConfig, TraceSettings
from vectrace.core.binarizer import binarize, iter_binarize
from vectrace.core.contours import MAX_CONTOURS, find_contours, iter_find_contours
from vectrace.core.scheduler import Scheduler
from vectrace.core.simplify import simplify, tolerance_to_epsilon
from vectrace.domain import BinaryGrid, Contour, PixelBuffer, Point
from vectrace.exceptions import PotraceFailedError, PotraceNotFoundError
from vectrace.io.svg_writer import PathStyle, serialize
from vectrace.utils.logging import TraceLogger


class TracingEngine(Protocol):
    """Anything that turns a pixel buffer into an SVG document."""

    name: str

    async def trace(
        self,
        pixels: PixelBuffer,
        settings: TraceSettings,
        scheduler: Scheduler,
    ) -> str:
        """Trace ``pixels`` and return an SVG document."""
        ...


def simplify_contours(contours: list[Contour], tolerance: float) -> list[list[Point]]:
    """Simplify every valid contour.

    Contours with fewer than three points are dropped.

    Args:
        contours: Raw contours from the tracer
        tolerance: Caller's tolerance setting (scaled to an epsilon here)

    Returns:
        Simplified point lists, in contour order
    """
    epsilon = tolerance_to_epsilon(tolerance)
    return [simplify(contour.points, epsilon) for contour in contours if contour.is_valid]


def render_contours(
    contours: list[Contour],
    width: int,
    height: int,
    settings: TraceSettings,
) -> str:
    """Simplify and serialize contours with the caller's styling."""
    simplified = simplify_contours(contours, settings.opt_tolerance)
    return serialize(simplified, width, height, PathStyle.from_settings(settings))


def trace_contours(pixels: PixelBuffer, settings: TraceSettings) -> str:
    """Run the contour pipeline synchronously, without yield points.

    Produces exactly the document ContourEngine produces for the same inputs.
    """
    grid = binarize(pixels, settings.threshold, settings.black_on_white)
    contours = find_contours(grid, settings.turd_size)
    return render_contours(contours, pixels.width, pixels.height, settings)


def grid_to_pbm(grid: BinaryGrid) -> bytes:
    """Encode a binary grid as a PBM image.

    Foreground pixels become black; Potrace traces the black pixels.
    """
    gray = np.where(grid.cells, 0, 255).astype(np.uint8)
    bitmap = Image.fromarray(gray).convert("1", dither=Image.Dither.NONE)
    buffer = io.BytesIO()
    bitmap.save(buffer, format="PPM")
    return buffer.getvalue()


def potrace_command(executable: str, settings: TraceSettings) -> list[str]:
    """Potrace command line reading PBM from stdin and writing SVG to stdout."""
    cmd = [
        executable,
        "--svg",
        "-t", str(settings.turd_size),
        "-z", settings.turn_policy.value,
        "-a", str(settings.alpha_max),
        "-O", str(settings.opt_tolerance),
        "-o", "-",
    ]
    if not settings.opt_curve:
        cmd.append("--longcurve")
    cmd.append("-")
    return cmd


class ContourEngine:
    """Marching-squares tracer with cooperative yield points.

    Example:
        engine = ContourEngine()
        svg = await engine.trace(pixels, TraceSettings(), Scheduler())
    """

    name = "contour"

    def __init__(
        self,
        scheduler_config: SchedulerConfig | None = None,
        trace_logger: TraceLogger | None = None,
    ) -> None:
        self.scheduler_config = scheduler_config or SchedulerConfig()
        self.trace_logger = trace_logger or TraceLogger()

    async def find_contours(
        self,
        pixels: PixelBuffer,
        settings: TraceSettings,
        scheduler: Scheduler,
    ) -> list[Contour]:
        """Binarize and scan ``pixels``, yielding between row batches."""
        grid = BinaryGrid.empty(pixels.width, pixels.height)
        await scheduler.run_steps(
            iter_binarize(
                pixels,
                grid,
                settings.threshold,
                settings.black_on_white,
                self.scheduler_config.binarize_batch_rows,
            ),
            stage="binarize",
        )

        contours: list[Contour] = []
        await scheduler.run_steps(
            iter_find_contours(
                grid,
                settings.turd_size,
                contours,
                self.scheduler_config.scan_yield_rows,
            ),
            stage="contours",
        )
        return contours

    async def trace(
        self,
        pixels: PixelBuffer,
        settings: TraceSettings,
        scheduler: Scheduler,
    ) -> str:
        contours = await self.find_contours(pixels, settings, scheduler)

        simplified = simplify_contours(contours, settings.opt_tolerance)
        self.trace_logger.log_contours(
            found=len(contours),
            emitted=len(simplified),
            points_before=sum(len(c) for c in contours),
            points_after=sum(len(points) for points in simplified),
            capped=len(contours) >= MAX_CONTOURS,
        )
        return serialize(
            simplified, pixels.width, pixels.height, PathStyle.from_settings(settings)
        )


class PotraceEngine:
    """Potrace-backed tracer.

    The image is thresholded with the same rules as the contour pipeline, piped
    to the Potrace executable as a PBM image and traced with the caller's turd
    size, turn policy, corner threshold and curve optimization settings. The
    process runs in a worker thread so the event loop stays responsive. An
    image without foreground yields a document with no paths.
    """

    name = "potrace"

    def __init__(
        self,
        scheduler_config: SchedulerConfig | None = None,
        engine_config: EngineConfig | None = None,
    ) -> None:
        self.scheduler_config = scheduler_config or SchedulerConfig()
        self.engine_config = engine_config or EngineConfig()

    def resolve_executable(self) -> str:
        """Full path of the Potrace executable.

        Raises:
            PotraceNotFoundError: If the executable is not on PATH
        """
        executable = shutil.which(self.engine_config.potrace_executable)
        if executable is None:
            raise PotraceNotFoundError(self.engine_config.potrace_executable)
        return executable

    def run_potrace(self, pbm: bytes, settings: TraceSettings) -> str:
        """Trace a PBM image and return Potrace's SVG output.

        Raises:
            PotraceNotFoundError: If the executable is missing
            PotraceFailedError: If Potrace exits non-zero or times out
        """
        cmd = potrace_command(self.resolve_executable(), settings)
        try:
            result = subprocess.run(
                cmd,
                input=pbm,
                capture_output=True,
                timeout=self.engine_config.potrace_timeout_s,
            )
        except FileNotFoundError as e:
            raise PotraceNotFoundError(cmd[0]) from e
        except subprocess.TimeoutExpired as e:
            raise PotraceFailedError(
                f"timed out after {self.engine_config.potrace_timeout_s}s"
            ) from e

        if result.returncode != 0:
            stderr = result.stderr.decode("utf-8", errors="replace").strip()
            raise PotraceFailedError(stderr or "no error output", result.returncode)

        return result.stdout.decode("utf-8")

    async def trace(
        self,
        pixels: PixelBuffer,
        settings: TraceSettings,
        scheduler: Scheduler,
    ) -> str:
        grid = BinaryGrid.empty(pixels.width, pixels.height)
        await scheduler.run_steps(
            iter_binarize(
                pixels,
                grid,
                settings.threshold,
                settings.black_on_white,
                self.scheduler_config.binarize_batch_rows,
            ),
            stage="binarize",
        )

        pbm = grid_to_pbm(grid)
        await scheduler.checkpoint("potrace", pixels.height)
        return await asyncio.to_thread(self.run_potrace, pbm, settings)
