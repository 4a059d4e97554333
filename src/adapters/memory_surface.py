"""In-memory implementation of the host surface protocols.

Every element is a plain dataclass holding the attributes a document would
hold (active class, aria-hidden, disabled, transform, ...). This adapter is
used by the tests and the demo entry point: fast, inspectable, no browser.

Example:
    surface = build_memory_surface(slide_count=3, with_continue=True)
    carousel = Carousel(surface, scheduler=scheduler)
    surface.viewport.focus()
    assert surface.slides[0].active
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Any

from src.ports.surface import CarouselSurface

DEFAULT_VIEWPORT_WIDTH = 800.0

# Offsets kept by MemoryTrack.history
TRACK_HISTORY_LIMIT = 256


@dataclass
class MemorySlide:
    """A slide with its two derived flags."""

    active: bool = False
    aria_hidden: bool = False


@dataclass
class MemoryControl:
    """A previous/next button."""

    disabled: bool = False
    aria_disabled: bool = False
    opacity: float = 1.0
    interactive: bool = True


@dataclass
class MemoryAffordance:
    """The optional continue control. Hidden until the last slide."""

    visible: bool = False


@dataclass
class MemoryTrack:
    """The slide track.

    Attributes:
        offset_percent: Current translateX, in percent.
        transition_enabled: False while a drag renders instantly.
        history: The most recent offsets written, oldest first, capped at
            TRACK_HISTORY_LIMIT. Inspection aid for tests.
    """

    offset_percent: float = 0.0
    transition_enabled: bool = True
    history: deque[float] = field(
        default_factory=lambda: deque(maxlen=TRACK_HISTORY_LIMIT)
    )

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "offset_percent" and "history" in self.__dict__:
            self.history.append(value)
        super().__setattr__(name, value)


@dataclass
class MemoryViewport:
    """The draggable viewport.

    Attributes:
        width: Rendered width in pixels; change it to simulate a resize.
        focused: Whether focus sits inside the viewport.
        tab_index: Set to 0 by the carousel on mount.
        captured_pointers: Pointer ids currently captured.
    """

    width: float = DEFAULT_VIEWPORT_WIDTH
    focused: bool = False
    tab_index: int | None = None
    captured_pointers: set[int] = field(default_factory=set)

    @property
    def client_width(self) -> float:
        return self.width

    def has_focus_within(self) -> bool:
        return self.focused

    def focus(self) -> None:
        self.focused = True

    def blur(self) -> None:
        self.focused = False

    def capture_pointer(self, pointer_id: int) -> None:
        self.captured_pointers.add(pointer_id)

    def release_pointer(self, pointer_id: int) -> None:
        self.captured_pointers.discard(pointer_id)


def build_memory_surface(
    slide_count: int,
    *,
    viewport_width: float = DEFAULT_VIEWPORT_WIDTH,
    with_prev: bool = True,
    with_next: bool = True,
    with_continue: bool = False,
    active_index: int | None = None,
) -> CarouselSurface:
    """Build a surface backed entirely by in-memory elements.

    Args:
        slide_count: Number of slides to create.
        viewport_width: Initial viewport width in pixels.
        with_prev: Include a previous control.
        with_next: Include a next control.
        with_continue: Include the continue affordance.
        active_index: Slide to pre-mark as active, as markup would.

    Returns:
        A CarouselSurface whose elements are Memory* instances.
    """
    slides = [MemorySlide() for _ in range(slide_count)]
    if active_index is not None:
        slides[active_index].active = True

    return CarouselSurface(
        slides=tuple(slides),
        viewport=MemoryViewport(width=viewport_width),
        track=MemoryTrack(),
        prev_control=MemoryControl() if with_prev else None,
        next_control=MemoryControl() if with_next else None,
        continue_control=MemoryAffordance() if with_continue else None,
    )
