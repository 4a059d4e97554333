"""Carousel index logic - platform agnostic."""

from dataclasses import dataclass


def clamp_index(requested: int, slide_count: int) -> int:
    """Clamp a requested slide index into [0, slide_count - 1].

    Never wraps: anything before the first slide lands on 0 and anything
    after the last one lands on slide_count - 1.
    """
    return max(0, min(slide_count - 1, requested))


@dataclass(frozen=True)
class CarouselState:
    """Index state for a carousel showing one slide per page."""

    slide_count: int
    current_index: int = 0

    @property
    def has_next(self) -> bool:
        return self.current_index < self.slide_count - 1

    @property
    def has_prev(self) -> bool:
        return self.current_index > 0

    @property
    def is_last(self) -> bool:
        return self.current_index == self.slide_count - 1

    @property
    def slide_percentage(self) -> float:
        """Width of one slide as a percentage of the track."""
        return 100 / self.slide_count

    @property
    def resting_offset(self) -> float:
        """Track translation (percent) that shows the current slide."""
        return -self.current_index * self.slide_percentage


class CarouselController:
    """Controls carousel navigation over immutable states."""

    def next_page(self, state: CarouselState) -> CarouselState:
        """Move to next slide, returns new state."""
        return self.go_to_index(state, state.current_index + 1)

    def prev_page(self, state: CarouselState) -> CarouselState:
        """Move to previous slide, returns new state."""
        return self.go_to_index(state, state.current_index - 1)

    def go_to_index(self, state: CarouselState, index: int) -> CarouselState:
        """Jump to a slide, clamping out-of-range requests."""
        clamped = clamp_index(index, state.slide_count)
        if clamped == state.current_index:
            return state
        return CarouselState(slide_count=state.slide_count, current_index=clamped)
