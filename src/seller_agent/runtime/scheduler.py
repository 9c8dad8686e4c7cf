"""Fixed-interval callback scheduling on the asyncio event loop.

``AsyncioScheduler`` runs each periodic callback in its own task on the
running loop.  Callbacks are synchronous, so a callback body never
interleaves with another task's handler body.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any, Protocol

import structlog

logger = structlog.get_logger()


class PeriodicHandle(Protocol):
    """Handle returned by a scheduler for cancelling a periodic callback."""

    def cancel(self) -> object: ...


class Scheduler(Protocol):
    """Invokes a callback every *interval* seconds until cancelled."""

    def schedule_periodic(
        self, interval: float, callback: Callable[[], None]
    ) -> PeriodicHandle: ...


class AsyncioScheduler:
    """Scheduler backed by asyncio tasks.

    The first invocation happens one *interval* after scheduling.  An
    exception raised by a callback is logged and the schedule continues.
    Must be used from within a running event loop.
    """

    def __init__(self) -> None:
        # Track tasks to prevent garbage collection (per RUF006)
        self._tasks: set[asyncio.Task[Any]] = set()

    def schedule_periodic(
        self, interval: float, callback: Callable[[], None]
    ) -> asyncio.Task[None]:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        task = asyncio.get_running_loop().create_task(self._run(interval, callback))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _run(self, interval: float, callback: Callable[[], None]) -> None:
        while True:
            await asyncio.sleep(interval)
            try:
                callback()
            except Exception:
                logger.exception("Periodic callback failed", callback=repr(callback))
