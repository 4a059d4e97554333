"""Error types raised while mounting or configuring a carousel.

Navigation itself never raises: locked requests are dropped, out-of-range
requests are clamped and missing optional controls are skipped. The only
failures are broken preconditions detected up front.

Example:
    from src.core.errors import MountError

    try:
        carousel = Carousel(surface)
    except MountError as ex:
        logger.error("carousel_mount_failed", category=ex.category.name)
"""

from enum import Enum, auto


class ErrorCategory(Enum):
    """Classification of carousel errors."""

    INVALID_SURFACE = auto()  # Host surface breaks the mount contract
    CONFIGURATION = auto()  # Bad option value or environment setting


class CarouselError(Exception):
    """Base class for carousel errors.

    Attributes:
        category: What kind of precondition was broken.
        original_error: The underlying exception, if this wraps one.
    """

    default_category = ErrorCategory.INVALID_SURFACE

    def __init__(
        self,
        message: str,
        category: ErrorCategory | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.category = category or self.default_category
        self.original_error = original_error


class MountError(CarouselError):
    """The host surface cannot be mounted (e.g. it has no slides)."""

    default_category = ErrorCategory.INVALID_SURFACE


class ConfigurationError(CarouselError):
    """A configuration value is missing, malformed or out of range."""

    default_category = ErrorCategory.CONFIGURATION
