"""Mock implementations for testing."""

from tests.mocks.scheduler import LOCK_SECONDS, ManualScheduler

__all__ = ["LOCK_SECONDS", "ManualScheduler"]
