"""Cooperative yield points for long-running trace stages.

Stages that scale with image size are written as generators that yield after
each batch of rows. The Scheduler drives such a generator and hands control
back to the event loop at every yield with a zero-delay sleep, so a large trace
interleaves with other pending tasks instead of blocking them. Yielding never
introduces a real delay.

Cancellation is opt-in: when a cancel event is supplied and set, the next yield
point raises TraceCancelledError.
"""

import asyncio
import threading
from collections.abc import Iterator

from vectrace.exceptions import TraceCancelledError


class Scheduler:
    """Hands control back to the event loop between batches of work.

    Example:
        scheduler = Scheduler()
        await scheduler.run_steps(iter_binarize(...), stage="binarize")
    """

    def __init__(self, cancel_event: threading.Event | None = None) -> None:
        """Initialize the scheduler.

        Args:
            cancel_event: Optional event; once set, the next yield point
                raises TraceCancelledError. A threading.Event is used so a
                trace running in a worker thread can be cancelled from the
                caller's thread.
        """
        self._cancel_event = cancel_event
        self.yield_count = 0

    @property
    def cancelled(self) -> bool:
        return self._cancel_event is not None and self._cancel_event.is_set()

    def cancel(self) -> None:
        """Request cancellation at the next yield point."""
        if self._cancel_event is None:
            self._cancel_event = threading.Event()
        self._cancel_event.set()

    async def checkpoint(self, stage: str, rows_done: int) -> None:
        """Yield to the event loop once.

        Args:
            stage: Name of the running stage, reported on cancellation
            rows_done: Progress within the stage, reported on cancellation

        Raises:
            TraceCancelledError: If cancellation has been requested
        """
        if self.cancelled:
            raise TraceCancelledError(stage, rows_done)
        self.yield_count += 1
        await asyncio.sleep(0)

    async def run_steps(self, steps: Iterator[int], stage: str) -> None:
        """Exhaust a stage generator, yielding to the loop after each step."""
        for rows_done in steps:
            await self.checkpoint(stage, rows_done)
