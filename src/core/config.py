"""Carousel configuration.

The only runtime option is the transition duration. It must match the CSS
transition of the host surface, otherwise the animation lock releases before
or after the slide actually settles.
"""

import os
from dataclasses import dataclass

from src.core.errors import ConfigurationError

# Matches the `transition: transform 420ms` rule of the stock carousel styles
DEFAULT_TRANSITION_DURATION_MS = 420

# Fraction of the viewport width a drag must exceed to change slides
DRAG_COMMIT_THRESHOLD = 0.25

TRANSITION_DURATION_ENV = "CAROUSEL_TRANSITION_MS"


@dataclass(frozen=True)
class CarouselConfig:
    """Configuration for a mounted carousel.

    Attributes:
        transition_duration_ms: How long the animation lock stays engaged
            after each accepted commit, in milliseconds.
    """

    transition_duration_ms: int = DEFAULT_TRANSITION_DURATION_MS

    def __post_init__(self) -> None:
        value = self.transition_duration_ms
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigurationError(
                f"transition_duration_ms must be an integer, got {value!r}"
            )
        if value <= 0:
            raise ConfigurationError(
                f"transition_duration_ms must be positive, got {value}"
            )

    @property
    def transition_duration_seconds(self) -> float:
        return self.transition_duration_ms / 1000

    @classmethod
    def from_env(cls) -> "CarouselConfig":
        """Build a config from CAROUSEL_TRANSITION_MS, falling back to defaults.

        Raises:
            ConfigurationError: If the variable is set but not a positive integer.
        """
        raw = os.getenv(TRANSITION_DURATION_ENV)
        if raw is None or not raw.strip():
            return cls()
        try:
            duration = int(raw)
        except ValueError as ex:
            raise ConfigurationError(
                f"{TRANSITION_DURATION_ENV} must be an integer, got {raw!r}",
                original_error=ex,
            ) from ex
        return cls(transition_duration_ms=duration)
