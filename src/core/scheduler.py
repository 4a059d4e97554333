"""One-shot callback scheduling for the animation lock.

The lock only needs "run this once after D seconds". Keeping that behind a
protocol lets tests drive time by hand instead of sleeping.
"""

import asyncio
import time
from collections.abc import Callable
from typing import Protocol


class Scheduler(Protocol):
    """Protocol for scheduling a one-shot callback."""

    def now(self) -> float:
        """Return the current time in seconds on this scheduler's clock."""
        ...

    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> None:
        """Run callback once, delay_seconds from now.

        Scheduled callbacks are fire-and-forget: no handle is returned and
        they cannot be cancelled.
        """
        ...


class AsyncioScheduler:
    """Scheduler backed by an asyncio event loop.

    If no loop is given, the running loop is looked up on each call, so the
    scheduler can be created before the loop starts.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is not None:
            return self._loop
        return asyncio.get_running_loop()

    def now(self) -> float:
        if self._loop is None:
            try:
                return asyncio.get_running_loop().time()
            except RuntimeError:
                return time.monotonic()
        return self._loop.time()

    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> None:
        self._get_loop().call_later(delay_seconds, callback)
