"""Entry point: replay a short navigation session on an in-memory carousel."""

import asyncio
from typing import cast

from src.adapters.memory_surface import MemoryViewport, build_memory_surface
from src.clients.input_adapters import (
    ARROW_LEFT,
    CarouselInputAdapter,
    KeyEvent,
    PointerEvent,
)
from src.core.carousel import Carousel
from src.core.config import CarouselConfig
from src.core.logging import configure_logging, get_logger
from src.core.scheduler import AsyncioScheduler
from src.ports.surface import CarouselSurface

# Configure structured logging (reads ENVIRONMENT and LOG_LEVEL from env)
configure_logging()

logger = get_logger(__name__)


def describe(surface: CarouselSurface) -> dict[str, object]:
    """Snapshot of the attributes a reader of the page would notice."""
    next_control = surface.next_control
    continue_control = surface.continue_control
    return {
        "active": [i for i, s in enumerate(surface.slides) if s.active],
        "offset_percent": round(surface.track.offset_percent, 3),
        "prev_disabled": surface.prev_control.disabled if surface.prev_control else None,
        "next_interactive": next_control.interactive if next_control else None,
        "continue_visible": continue_control.visible if continue_control else None,
    }


async def main() -> None:
    config = CarouselConfig.from_env()
    surface = build_memory_surface(slide_count=3, with_continue=True)
    carousel = Carousel(surface, config=config, scheduler=AsyncioScheduler())
    adapter = CarouselInputAdapter(carousel)
    wait = config.transition_duration_seconds + 0.05

    for _ in range(2):
        adapter.on_next_click()
        logger.info("after_next_click", **describe(surface))
        await asyncio.sleep(wait)

    cast(MemoryViewport, surface.viewport).focus()
    adapter.on_keydown(KeyEvent(key=ARROW_LEFT))
    logger.info("after_arrow_left", **describe(surface))
    await asyncio.sleep(wait)

    width = surface.viewport.client_width
    adapter.on_pointer_down(PointerEvent(pointer_id=1, client_x=width * 0.8))
    adapter.on_pointer_move(PointerEvent(pointer_id=1, client_x=width * 0.4))
    adapter.on_pointer_up(PointerEvent(pointer_id=1, client_x=width * 0.4))
    logger.info("after_swipe_left", **describe(surface))

    carousel.unmount()


if __name__ == "__main__":
    asyncio.run(main())
