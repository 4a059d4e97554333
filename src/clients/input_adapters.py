"""Translate host input events into carousel calls.

The adapter is deliberately thin: it filters events (lock short-circuit,
focus scoping, key names) and forwards everything else to Carousel.
"""

from dataclasses import dataclass

from src.core.carousel import Carousel

ARROW_LEFT = "ArrowLeft"
ARROW_RIGHT = "ArrowRight"


@dataclass
class PointerEvent:
    """A pointer down/move/up/cancel event on the viewport."""

    pointer_id: int
    client_x: float


@dataclass
class KeyEvent:
    """A keydown event. Handlers call prevent_default() when they consume it."""

    key: str
    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True


class CarouselInputAdapter:
    """Wires button, keyboard, pointer and resize input to one Carousel."""

    def __init__(self, carousel: Carousel) -> None:
        self.carousel = carousel

    def on_prev_click(self) -> bool:
        # Short-circuit before touching the carousel while a transition runs
        if self.carousel.locked:
            return False
        return self.carousel.prev()

    def on_next_click(self) -> bool:
        if self.carousel.locked:
            return False
        return self.carousel.next()

    def on_keydown(self, event: KeyEvent) -> bool:
        """Handle ArrowLeft/ArrowRight when focus is inside the carousel.

        Returns:
            True if a navigation was committed.
        """
        if not self.carousel.mounted:
            return False
        if not self.carousel.surface.has_focus_within():
            return False

        if event.key == ARROW_LEFT:
            event.prevent_default()
            return self.on_prev_click()
        if event.key == ARROW_RIGHT:
            event.prevent_default()
            return self.on_next_click()
        return False

    def on_pointer_down(self, event: PointerEvent) -> None:
        self.carousel.drag_start(event.pointer_id, event.client_x)

    def on_pointer_move(self, event: PointerEvent) -> None:
        self.carousel.drag_move(event.client_x)

    def on_pointer_up(self, event: PointerEvent) -> None:
        self.carousel.drag_end()

    def on_pointer_cancel(self, event: PointerEvent) -> None:
        self.carousel.drag_cancel()

    def on_resize(self) -> None:
        self.carousel.handle_resize()
