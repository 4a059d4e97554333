"""Shared pytest fixtures for carousel tests."""

from collections.abc import Callable
from typing import Any

import pytest

from src.adapters.memory_surface import build_memory_surface
from src.core.carousel import Carousel
from src.ports.surface import CarouselSurface
from tests.mocks.scheduler import ManualScheduler

pytest_plugins = ["pytest_asyncio"]


@pytest.fixture
def scheduler() -> ManualScheduler:
    """Provide a scheduler whose clock only moves when the test advances it."""
    return ManualScheduler()


@pytest.fixture
def make_carousel(
    scheduler: ManualScheduler,
) -> Callable[..., tuple[Carousel, CarouselSurface]]:
    """Provide a factory mounting a carousel on a fresh in-memory surface.

    Keyword arguments are forwarded to build_memory_surface().

    Example:
        def test_something(make_carousel):
            carousel, surface = make_carousel(5, with_continue=True)
    """

    def _make(slide_count: int = 5, **surface_kwargs: Any) -> tuple[Carousel, CarouselSurface]:
        surface = build_memory_surface(slide_count, **surface_kwargs)
        return Carousel(surface, scheduler=scheduler), surface

    return _make
