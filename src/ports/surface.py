"""Host surface protocols for a mounted carousel.

This module defines the element interfaces the carousel core writes to and
reads from. A browser binding would back them with DOM nodes; the in-memory
adapter in src/adapters backs them with plain attributes. Nothing here knows
about markup, CSS selectors or a particular UI toolkit.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

# =============================================================================
# Element Protocols
# =============================================================================


class SlideElement(Protocol):
    """One navigable slide.

    Attributes:
        active: Whether the slide carries the active marker.
        aria_hidden: Whether assistive technology should skip the slide.
    """

    active: bool
    aria_hidden: bool


class ControlElement(Protocol):
    """A previous/next button.

    Attributes:
        disabled: Functional disabled flag (the control ignores clicks).
        aria_disabled: Disabled flag exposed to assistive technology.
        opacity: Rendered opacity, 0.0 to 1.0.
        interactive: Whether the control receives pointer input at all.
    """

    disabled: bool
    aria_disabled: bool
    opacity: float
    interactive: bool


class AffordanceElement(Protocol):
    """Optional "continue" control shown only on the last slide."""

    visible: bool


class TrackElement(Protocol):
    """The movable strip that holds every slide side by side.

    Attributes:
        offset_percent: Horizontal translation as a percentage of the track.
        transition_enabled: Whether offset changes animate (eased) or apply
            instantly.
    """

    offset_percent: float
    transition_enabled: bool


class FocusScope(Protocol):
    """Anything that can report whether focus sits inside it."""

    def has_focus_within(self) -> bool:
        """True if the element or one of its descendants holds focus."""
        ...


class ViewportElement(FocusScope, Protocol):
    """The draggable, focusable window onto the track."""

    tab_index: int | None

    @property
    def client_width(self) -> float:
        """Current rendered width in pointer-event units (pixels)."""
        ...

    def capture_pointer(self, pointer_id: int) -> None:
        """Route all further events of pointer_id to this viewport."""
        ...

    def release_pointer(self, pointer_id: int) -> None:
        """Undo capture_pointer. Releasing an uncaptured pointer is a no-op."""
        ...


# =============================================================================
# Mount Contract
# =============================================================================


@dataclass(frozen=True)
class CarouselSurface:
    """Everything a carousel is mounted against.

    Attributes:
        slides: Ordered slides. Order is fixed for the life of the mount.
        viewport: Draggable region receiving pointer and key events.
        track: Region moved to show the current slide.
        prev_control: Optional "previous" button.
        next_control: Optional "next" button.
        continue_control: Optional affordance shown on the last slide.
        focus_root: Optional element whose focus-within state scopes keyboard
            navigation. Defaults to the viewport.
    """

    slides: Sequence[SlideElement]
    viewport: ViewportElement
    track: TrackElement
    prev_control: ControlElement | None = None
    next_control: ControlElement | None = None
    continue_control: AffordanceElement | None = None
    focus_root: FocusScope | None = None

    @property
    def slide_count(self) -> int:
        return len(self.slides)

    def has_focus_within(self) -> bool:
        root = self.focus_root if self.focus_root is not None else self.viewport
        return root.has_focus_within()
