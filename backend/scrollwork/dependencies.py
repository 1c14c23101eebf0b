"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from scrollwork.config import settings
from scrollwork.engine.generator import ScrollworkGenerator


def get_settings():
    return settings


@lru_cache(maxsize=1)
def get_generator() -> ScrollworkGenerator:
    return ScrollworkGenerator(
        layout_cache_size=settings.layout_cache_size,
        bounds_cache_size=settings.bounds_cache_size,
    )
