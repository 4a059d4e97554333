"""Timed guard against overlapping slide transitions.

At most one committed transition is in flight at a time. A request that
arrives while the lock is engaged is rejected outright, never queued.
"""

import structlog

from src.core.logging import get_logger
from src.core.scheduler import Scheduler

logger = get_logger(__name__)


class AnimationLock:
    """Two-state lock (idle/locked) released by a one-shot timer.

    Attributes:
        duration_seconds: How long the lock stays engaged per acquisition.
        unlock_deadline: Scheduler time at which the pending release fires,
            or None while idle.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        duration_seconds: float,
        log: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._log = log or logger
        self.duration_seconds = duration_seconds
        self._locked = False
        self.unlock_deadline: float | None = None

    @property
    def locked(self) -> bool:
        return self._locked

    def try_acquire(self) -> bool:
        """Engage the lock and schedule its release.

        Returns:
            True if the lock was idle and is now engaged, False if it was
            already engaged (nothing changes in that case).
        """
        if self._locked:
            return False
        deadline = self._scheduler.now() + self.duration_seconds
        # A scheduler that cannot schedule raises here and leaves the lock idle
        self._scheduler.call_later(self.duration_seconds, self._release)
        self._locked = True
        self.unlock_deadline = deadline
        return True

    def _release(self) -> None:
        self._locked = False
        self.unlock_deadline = None
        self._log.debug("lock_released")
