"""Structured logging for carousel instances using structlog.

Development runs get pretty-printed console output, production runs get one
JSON object per line. Every line a mounted carousel emits carries its
`carousel_id`, and drag geometry is rounded so traces stay readable.

Usage:
    from src.core.logging import configure_logging, get_carousel_logger

    configure_logging(development=True)
    log = get_carousel_logger("facts")
    log.debug("commit_accepted", index=2)
"""

import logging
import sys
from os import getenv
from typing import cast

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

# Keys holding pixel or percent geometry; rounded before rendering
GEOMETRY_KEYS = frozenset({"dx", "offset_percent"})
GEOMETRY_PRECISION = 3


def round_geometry(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Round float geometry fields (drag distance, track offset)."""
    for key in GEOMETRY_KEYS & event_dict.keys():
        value = event_dict[key]
        if isinstance(value, float):
            event_dict[key] = round(value, GEOMETRY_PRECISION)
    return event_dict


def configure_logging(
    development: bool | None = None,
    log_level: str | None = None,
) -> None:
    """Configure structured logging for the carousel runtime.

    Args:
        development: If True, use pretty-printed output. If False, use JSON.
                    If None, reads from ENVIRONMENT env var (default: development).
        log_level: Log level string (DEBUG, INFO, WARNING, ERROR).
                  If None, reads from LOG_LEVEL env var (default: INFO).
    """
    if development is None:
        development = getenv("ENVIRONMENT", "development").lower() != "production"
    if log_level is None:
        log_level = getenv("LOG_LEVEL", "INFO")
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        round_geometry,
    ]
    if development:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=numeric_level,
        force=True,
    )
    logging.getLogger().setLevel(numeric_level)
    # asyncio reports slow callbacks at DEBUG; keep it out of carousel traces
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name, typically __name__ of the calling module.
    """
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))


def get_carousel_logger(carousel_id: str) -> structlog.stdlib.BoundLogger:
    """Logger for one mounted carousel, with its id bound to every line."""
    return get_logger("src.core.carousel").bind(carousel_id=carousel_id)
