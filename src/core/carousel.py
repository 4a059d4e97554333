"""Mounted carousel: index state, animation lock, gestures and rendering.

Example:
    surface = build_memory_surface(slide_count=5)
    carousel = Carousel(surface, scheduler=AsyncioScheduler())
    carousel.next()          # True, index 1, lock engaged for 420ms
    carousel.next()          # False, still animating
"""

from itertools import count

from src.core.animation_lock import AnimationLock
from src.core.carousel_logic import CarouselController, CarouselState, clamp_index
from src.core.config import CarouselConfig
from src.core.errors import MountError
from src.core.gesture import (
    DragDecision,
    GesturePhase,
    GestureTracker,
    drag_offset_percent,
    target_index,
)
from src.core.logging import get_carousel_logger
from src.core.presentation import render
from src.core.scheduler import AsyncioScheduler, Scheduler
from src.ports.surface import CarouselSurface

_carousel_ids = count(1)


def initial_index(surface: CarouselSurface) -> int:
    """Index of the first slide already marked active, or 0."""
    for i, slide in enumerate(surface.slides):
        if slide.active:
            return i
    return 0


class Carousel:
    """One carousel instance, alive from construction until unmount().

    Attributes:
        surface: The host surface this carousel renders into.
        config: Active configuration.
        carousel_id: Identifier bound into every log line of this instance.
    """

    def __init__(
        self,
        surface: CarouselSurface,
        config: CarouselConfig | None = None,
        scheduler: Scheduler | None = None,
        carousel_id: str | None = None,
    ) -> None:
        """Mount the carousel and render its initial state.

        Args:
            surface: Host surface with at least one slide.
            config: Configuration. Defaults to CarouselConfig().
            scheduler: Timer source for the animation lock. Defaults to the
                running asyncio loop.
            carousel_id: Name for logging. Defaults to a process-wide counter.

        Raises:
            MountError: If the surface has no slides.
        """
        if surface.slide_count < 1:
            raise MountError("cannot mount a carousel without slides")

        self.surface = surface
        self.config = config or CarouselConfig()
        self.carousel_id = carousel_id or f"carousel-{next(_carousel_ids)}"
        self._log = get_carousel_logger(self.carousel_id)

        self._controller = CarouselController()
        self._state = CarouselState(
            slide_count=surface.slide_count,
            current_index=initial_index(surface),
        )
        self._lock = AnimationLock(
            scheduler or AsyncioScheduler(),
            self.config.transition_duration_seconds,
            log=self._log,
        )
        self._gestures = GestureTracker()
        self._mounted = True

        # Keyboard navigation needs the viewport to be reachable with Tab
        surface.viewport.tab_index = 0
        self.render()

        self._log.info(
            "carousel_mounted",
            slide_count=surface.slide_count,
            index=self._state.current_index,
            transition_ms=self.config.transition_duration_ms,
        )

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def state(self) -> CarouselState:
        return self._state

    @property
    def current_index(self) -> int:
        return self._state.current_index

    @property
    def slide_count(self) -> int:
        return self._state.slide_count

    @property
    def locked(self) -> bool:
        return self._lock.locked

    @property
    def mounted(self) -> bool:
        return self._mounted

    @property
    def gesture_phase(self) -> GesturePhase:
        return self._gestures.phase

    def clamp(self, requested: int) -> int:
        return clamp_index(requested, self.slide_count)

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def request_commit(self, target: int) -> bool:
        """Navigate to target if no transition is in flight.

        Returns:
            True if the request was accepted. A rejected request changes
            nothing and is not queued.
        """
        if not self._mounted:
            return False
        if self._lock.locked:
            self._log.debug(
                "commit_rejected_locked",
                target=target,
                index=self._state.current_index,
            )
            return False

        new_state = self._controller.go_to_index(self._state, target)
        self._lock.try_acquire()
        self._state = new_state
        self.render()
        self._log.debug(
            "commit_accepted",
            target=target,
            index=self._state.current_index,
        )
        return True

    def next(self) -> bool:
        return self.request_commit(self._controller.next_page(self._state).current_index)

    def prev(self) -> bool:
        return self.request_commit(self._controller.prev_page(self._state).current_index)

    def render(self) -> None:
        """Re-render the resting state at the current index."""
        render(self.surface, self._state)

    # -------------------------------------------------------------------------
    # Gestures
    # -------------------------------------------------------------------------

    def drag_start(self, pointer_id: int, x: float) -> None:
        if not self._mounted:
            return
        stale = self._gestures.session
        if stale is not None and self._gestures.dragging:
            self.surface.viewport.release_pointer(stale.pointer_id)
        self.surface.viewport.capture_pointer(pointer_id)
        self._gestures.start(pointer_id, x)

    def drag_move(self, x: float) -> None:
        if not self._mounted:
            return
        dx = self._gestures.move(x)
        if dx is None:
            return
        track = self.surface.track
        track.transition_enabled = False
        track.offset_percent = drag_offset_percent(
            self._state, dx, self.surface.viewport.client_width
        )

    def drag_end(self) -> None:
        self._finish_drag(cancelled=False)

    def drag_cancel(self) -> None:
        self._finish_drag(cancelled=True)

    def _finish_drag(self, cancelled: bool) -> None:
        session = self._gestures.session
        decision = self._gestures.finish(
            self.surface.viewport.client_width, cancelled=cancelled
        )
        if session is None or decision is None:
            return

        self.surface.track.transition_enabled = True
        self.surface.viewport.release_pointer(session.pointer_id)

        committed = False
        if decision is not DragDecision.REVERT:
            before = self._state.current_index
            committed = self.request_commit(target_index(self._state, decision))
            # Clamped at either end: nothing moved, snap back instead
            committed = committed and self._state.current_index != before

        if committed:
            self._log.debug(
                "drag_committed",
                dx=session.dx,
                index=self._state.current_index,
            )
        else:
            self.render()
            self._log.debug(
                "drag_reverted",
                dx=session.dx,
                cancelled=cancelled,
                index=self._state.current_index,
            )
        self._gestures.reset()

    # -------------------------------------------------------------------------
    # Layout & lifetime
    # -------------------------------------------------------------------------

    def handle_resize(self) -> None:
        """Layout-only correction at the unchanged index."""
        if not self._mounted:
            return
        self.render()

    def unmount(self) -> None:
        """Detach from the surface. All later input is ignored."""
        if not self._mounted:
            return
        session = self._gestures.session
        if session is not None and self._gestures.dragging:
            self.surface.viewport.release_pointer(session.pointer_id)
            self.surface.track.transition_enabled = True
        self._gestures.reset()
        self._mounted = False
        self._log.info("carousel_unmounted", index=self._state.current_index)
