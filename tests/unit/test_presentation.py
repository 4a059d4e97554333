"""Tests for presentation sync."""

from dataclasses import asdict

import pytest

from src.adapters.memory_surface import build_memory_surface
from src.core.carousel_logic import CarouselState
from src.core.presentation import render, set_disabled
from src.ports.surface import CarouselSurface


def snapshot(surface: CarouselSurface) -> dict:
    """Observable attribute state of an in-memory surface."""
    return {
        "offset": surface.track.offset_percent,
        "slides": [asdict(slide) for slide in surface.slides],
        "prev": asdict(surface.prev_control) if surface.prev_control else None,
        "next": asdict(surface.next_control) if surface.next_control else None,
        "continue": asdict(surface.continue_control) if surface.continue_control else None,
    }


class TestRender:
    """Tests for render()."""

    def test_track_offset(self) -> None:
        surface = build_memory_surface(5)
        render(surface, CarouselState(slide_count=5, current_index=3))
        assert surface.track.offset_percent == pytest.approx(-60.0)

    def test_only_current_slide_active_and_exposed(self) -> None:
        surface = build_memory_surface(4)
        render(surface, CarouselState(slide_count=4, current_index=1))

        assert [s.active for s in surface.slides] == [False, True, False, False]
        assert [s.aria_hidden for s in surface.slides] == [True, False, True, True]

    def test_prev_disabled_on_first_slide(self) -> None:
        surface = build_memory_surface(3)
        render(surface, CarouselState(slide_count=3))

        assert surface.prev_control.disabled
        assert surface.prev_control.aria_disabled
        assert not surface.next_control.disabled
        assert not surface.next_control.aria_disabled

    def test_next_disabled_on_last_slide(self) -> None:
        surface = build_memory_surface(3)
        render(surface, CarouselState(slide_count=3, current_index=2))

        assert surface.next_control.disabled
        assert surface.next_control.aria_disabled
        assert not surface.prev_control.disabled

    def test_single_slide_disables_both(self) -> None:
        surface = build_memory_surface(1)
        render(surface, CarouselState(slide_count=1))
        assert surface.prev_control.disabled
        assert surface.next_control.disabled

    def test_render_is_idempotent(self) -> None:
        surface = build_memory_surface(5, with_continue=True)
        state = CarouselState(slide_count=5, current_index=4)

        render(surface, state)
        first = snapshot(surface)
        render(surface, state)

        assert snapshot(surface) == first

    def test_missing_controls_are_skipped(self) -> None:
        surface = build_memory_surface(3, with_prev=False, with_next=False)
        render(surface, CarouselState(slide_count=3, current_index=2))
        assert surface.slides[2].active


class TestContinueAffordance:
    """Tests for the last-slide continue control."""

    def test_shown_on_last_slide_and_next_suppressed(self) -> None:
        surface = build_memory_surface(3, with_continue=True)
        render(surface, CarouselState(slide_count=3, current_index=2))

        assert surface.continue_control.visible
        assert surface.next_control.opacity == 0.0
        assert not surface.next_control.interactive

    def test_hidden_elsewhere_and_next_restored(self) -> None:
        surface = build_memory_surface(3, with_continue=True)
        render(surface, CarouselState(slide_count=3, current_index=2))
        render(surface, CarouselState(slide_count=3, current_index=1))

        assert not surface.continue_control.visible
        assert surface.next_control.opacity == 1.0
        assert surface.next_control.interactive

    def test_without_continue_control_next_untouched(self) -> None:
        surface = build_memory_surface(3)
        surface.next_control.opacity = 0.5
        render(surface, CarouselState(slide_count=3, current_index=2))

        assert surface.next_control.opacity == 0.5
        assert surface.next_control.interactive

    def test_continue_without_next_control(self) -> None:
        surface = build_memory_surface(2, with_next=False, with_continue=True)
        render(surface, CarouselState(slide_count=2, current_index=1))
        assert surface.continue_control.visible


class TestSetDisabled:
    def test_none_is_noop(self) -> None:
        set_disabled(None, True)
