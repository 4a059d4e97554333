"""Tests for drag geometry and the gesture state machine."""

import pytest

from src.core.carousel_logic import CarouselState
from src.core.gesture import (
    DragDecision,
    GesturePhase,
    GestureTracker,
    decide_drag,
    drag_offset_percent,
    target_index,
)

WIDTH = 1000.0


class TestDecideDrag:
    """Tests for the commit threshold."""

    def test_leftward_past_threshold_goes_next(self) -> None:
        assert decide_drag(-0.3 * WIDTH, WIDTH) is DragDecision.NEXT

    def test_rightward_past_threshold_goes_previous(self) -> None:
        assert decide_drag(0.3 * WIDTH, WIDTH) is DragDecision.PREVIOUS

    def test_small_drag_reverts(self) -> None:
        assert decide_drag(0.1 * WIDTH, WIDTH) is DragDecision.REVERT
        assert decide_drag(-0.1 * WIDTH, WIDTH) is DragDecision.REVERT

    def test_exactly_threshold_reverts(self) -> None:
        assert decide_drag(250.0, WIDTH) is DragDecision.REVERT
        assert decide_drag(-250.0, WIDTH) is DragDecision.REVERT


class TestDragOffset:
    """Tests for the live track offset during a drag."""

    def test_no_movement_is_resting_offset(self) -> None:
        state = CarouselState(slide_count=5, current_index=2)
        assert drag_offset_percent(state, 0, WIDTH) == pytest.approx(-40.0)

    def test_full_width_drag_shifts_one_slide(self) -> None:
        state = CarouselState(slide_count=5, current_index=2)
        assert drag_offset_percent(state, -WIDTH, WIDTH) == pytest.approx(-60.0)
        assert drag_offset_percent(state, WIDTH, WIDTH) == pytest.approx(-20.0)

    def test_partial_drag(self) -> None:
        state = CarouselState(slide_count=4, current_index=1)
        # 25% of the viewport is a quarter of one 25% slide
        assert drag_offset_percent(state, 250, WIDTH) == pytest.approx(-18.75)

    def test_zero_width_viewport(self) -> None:
        state = CarouselState(slide_count=5, current_index=1)
        assert drag_offset_percent(state, 120, 0) == pytest.approx(-20.0)


class TestTargetIndex:
    def test_targets(self) -> None:
        state = CarouselState(slide_count=5, current_index=1)
        assert target_index(state, DragDecision.PREVIOUS) == 0
        assert target_index(state, DragDecision.NEXT) == 2
        assert target_index(state, DragDecision.REVERT) == 1


class TestGestureTracker:
    """Tests for GestureTracker bookkeeping."""

    def test_start_enters_dragging(self) -> None:
        tracker = GestureTracker()
        session = tracker.start(pointer_id=7, x=300)

        assert tracker.phase is GesturePhase.DRAGGING
        assert session.start_x == session.last_x == 300
        assert session.active

    def test_move_without_session_is_ignored(self) -> None:
        tracker = GestureTracker()
        assert tracker.move(100) is None
        assert tracker.phase is GesturePhase.IDLE

    def test_move_tracks_dx(self) -> None:
        tracker = GestureTracker()
        tracker.start(pointer_id=1, x=500)
        assert tracker.move(420) == -80
        assert tracker.move(380) == -120

    def test_finish_commit(self) -> None:
        tracker = GestureTracker()
        tracker.start(pointer_id=1, x=800)
        tracker.move(400)

        assert tracker.finish(WIDTH) is DragDecision.NEXT
        assert tracker.phase is GesturePhase.COMMITTING
        assert not tracker.session.active

    def test_finish_revert(self) -> None:
        tracker = GestureTracker()
        tracker.start(pointer_id=1, x=500)
        tracker.move(550)

        assert tracker.finish(WIDTH) is DragDecision.REVERT
        assert tracker.phase is GesturePhase.REVERTING

    def test_cancel_always_reverts(self) -> None:
        tracker = GestureTracker()
        tracker.start(pointer_id=1, x=900)
        tracker.move(100)

        assert tracker.finish(WIDTH, cancelled=True) is DragDecision.REVERT

    def test_finish_without_session(self) -> None:
        assert GestureTracker().finish(WIDTH) is None

    def test_reset_returns_to_idle(self) -> None:
        tracker = GestureTracker()
        tracker.start(pointer_id=1, x=0)
        tracker.finish(WIDTH)
        tracker.reset()

        assert tracker.session is None
        assert tracker.phase is GesturePhase.IDLE

    def test_moves_after_finish_are_ignored(self) -> None:
        tracker = GestureTracker()
        tracker.start(pointer_id=1, x=500)
        tracker.move(100)
        tracker.finish(WIDTH)

        assert tracker.move(900) is None
        assert tracker.session.last_x == 100

    def test_finish_twice_is_noop(self) -> None:
        tracker = GestureTracker()
        tracker.start(pointer_id=1, x=500)
        tracker.finish(WIDTH)

        assert tracker.finish(WIDTH) is None
