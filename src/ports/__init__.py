"""Ports (interfaces) for the carousel.

Protocol definitions for the host surface the carousel renders into. The
core only talks to these, never to a concrete document or toolkit.
"""

from src.ports.surface import (
    AffordanceElement,
    CarouselSurface,
    ControlElement,
    FocusScope,
    SlideElement,
    TrackElement,
    ViewportElement,
)

__all__ = [
    "AffordanceElement",
    "CarouselSurface",
    "ControlElement",
    "FocusScope",
    "SlideElement",
    "TrackElement",
    "ViewportElement",
]
