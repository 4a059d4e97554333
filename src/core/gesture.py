"""Pointer drag tracking and the drag-to-navigate decision.

A drag moves the track live under the pointer without touching the index.
On release the horizontal distance decides between stepping one slide and
snapping back:

    |dx| >  0.25 * viewport width  ->  commit to index - 1 (dx > 0) or + 1 (dx < 0)
    |dx| <= 0.25 * viewport width  ->  revert to the resting offset
"""

from dataclasses import dataclass
from enum import Enum, auto

from src.core.carousel_logic import CarouselState
from src.core.config import DRAG_COMMIT_THRESHOLD


class GesturePhase(Enum):
    """Phases of the per-carousel gesture state machine."""

    IDLE = auto()
    DRAGGING = auto()
    COMMITTING = auto()
    REVERTING = auto()


class DragDecision(Enum):
    """What a finished drag asks the carousel to do."""

    PREVIOUS = auto()
    NEXT = auto()
    REVERT = auto()


@dataclass
class GestureSession:
    """Ephemeral state of one pointer drag.

    Attributes:
        pointer_id: The captured pointer driving this drag.
        start_x: Pointer x at drag start.
        last_x: Most recent pointer x.
        active: False once the drag has ended or been cancelled.
    """

    pointer_id: int
    start_x: float
    last_x: float
    active: bool = True

    @property
    def dx(self) -> float:
        return self.last_x - self.start_x


def drag_offset_percent(
    state: CarouselState, dx: float, viewport_width: float
) -> float:
    """Live track offset for a drag of dx pixels.

    The pixel distance is scaled to the per-slide percentage and layered on
    top of the resting offset of the current slide.
    """
    if viewport_width <= 0:
        return state.resting_offset
    dx_percent = (dx / viewport_width) * state.slide_percentage
    return state.resting_offset + dx_percent


def decide_drag(dx: float, viewport_width: float) -> DragDecision:
    """Classify a finished drag against the commit threshold."""
    threshold = viewport_width * DRAG_COMMIT_THRESHOLD
    if abs(dx) <= threshold:
        return DragDecision.REVERT
    # Dragging content rightward reveals the previous slide
    return DragDecision.PREVIOUS if dx > 0 else DragDecision.NEXT


def target_index(state: CarouselState, decision: DragDecision) -> int:
    """Unclamped index a drag decision points at."""
    if decision is DragDecision.PREVIOUS:
        return state.current_index - 1
    if decision is DragDecision.NEXT:
        return state.current_index + 1
    return state.current_index


class GestureTracker:
    """Owns the single live GestureSession of a carousel.

    The tracker only does bookkeeping and geometry; Carousel decides what to
    render and whether to commit.
    """

    def __init__(self) -> None:
        self.session: GestureSession | None = None
        self.phase = GesturePhase.IDLE

    @property
    def dragging(self) -> bool:
        return self.phase is GesturePhase.DRAGGING

    def start(self, pointer_id: int, x: float) -> GestureSession:
        self.session = GestureSession(pointer_id=pointer_id, start_x=x, last_x=x)
        self.phase = GesturePhase.DRAGGING
        return self.session

    def move(self, x: float) -> float | None:
        """Record a pointer move. Returns dx, or None when not dragging."""
        if self.session is None or not self.session.active:
            return None
        self.session.last_x = x
        return self.session.dx

    def finish(self, viewport_width: float, cancelled: bool = False) -> DragDecision | None:
        """Close the live session and classify it.

        Cancelled drags always revert. Returns None when no drag was live.
        """
        session = self.session
        if session is None or not session.active:
            return None
        session.active = False
        if cancelled:
            decision = DragDecision.REVERT
        else:
            decision = decide_drag(session.dx, viewport_width)
        self.phase = (
            GesturePhase.REVERTING
            if decision is DragDecision.REVERT
            else GesturePhase.COMMITTING
        )
        return decision

    def reset(self) -> None:
        """Destroy the session and return to IDLE."""
        self.session = None
        self.phase = GesturePhase.IDLE
