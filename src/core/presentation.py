"""Presentation sync: derive every visual and accessibility flag from the index.

render() is a pure function of (surface, state). Calling it twice with the
same state leaves the surface exactly as the first call did.
"""

from src.core.carousel_logic import CarouselState
from src.ports.surface import CarouselSurface, ControlElement


def render(surface: CarouselSurface, state: CarouselState) -> None:
    """Bring the surface in line with the current index.

    Args:
        surface: The mounted host surface.
        state: Index state to render.
    """
    surface.track.offset_percent = state.resting_offset

    for i, slide in enumerate(surface.slides):
        is_active = i == state.current_index
        slide.active = is_active
        slide.aria_hidden = not is_active

    set_disabled(surface.prev_control, not state.has_prev)
    set_disabled(surface.next_control, not state.has_next)

    _sync_continue_affordance(surface, state)


def set_disabled(control: ControlElement | None, disabled: bool) -> None:
    """Set both the functional and the accessibility disabled flag."""
    if control is None:
        return
    control.disabled = disabled
    control.aria_disabled = disabled


def _sync_continue_affordance(surface: CarouselSurface, state: CarouselState) -> None:
    # The next control is only suppressed when there is a continue control to
    # take its place.
    continue_control = surface.continue_control
    if continue_control is None:
        return

    next_control = surface.next_control
    if state.is_last:
        continue_control.visible = True
        if next_control is not None:
            next_control.opacity = 0.0
            next_control.interactive = False
    else:
        continue_control.visible = False
        if next_control is not None:
            next_control.opacity = 1.0
            next_control.interactive = True
