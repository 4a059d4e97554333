"""Core carousel logic.

This package holds the platform-agnostic navigation state machine: index
clamping, the animation lock, drag gestures and presentation sync.
"""

from src.core.animation_lock import AnimationLock
from src.core.carousel import Carousel
from src.core.carousel_logic import CarouselController, CarouselState, clamp_index
from src.core.config import CarouselConfig
from src.core.errors import (
    CarouselError,
    ConfigurationError,
    ErrorCategory,
    MountError,
)
from src.core.gesture import DragDecision, GesturePhase, GestureSession
from src.core.logging import configure_logging, get_carousel_logger, get_logger
from src.core.presentation import render
from src.core.scheduler import AsyncioScheduler, Scheduler

__all__ = [
    # Runtime
    "Carousel",
    "CarouselConfig",
    # Index state and lock
    "AnimationLock",
    "CarouselController",
    "CarouselState",
    "clamp_index",
    # Gestures
    "DragDecision",
    "GesturePhase",
    "GestureSession",
    # Rendering
    "render",
    # Scheduling
    "AsyncioScheduler",
    "Scheduler",
    # Errors
    "CarouselError",
    "ConfigurationError",
    "ErrorCategory",
    "MountError",
    # Logging
    "configure_logging",
    "get_carousel_logger",
    "get_logger",
]
