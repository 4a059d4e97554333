"""Adapters for host surfaces.

Implementations of the surface protocols in src/ports.
"""

from src.adapters.memory_surface import (
    MemoryAffordance,
    MemoryControl,
    MemorySlide,
    MemoryTrack,
    MemoryViewport,
    build_memory_surface,
)

__all__ = [
    "MemoryAffordance",
    "MemoryControl",
    "MemorySlide",
    "MemoryTrack",
    "MemoryViewport",
    "build_memory_surface",
]
