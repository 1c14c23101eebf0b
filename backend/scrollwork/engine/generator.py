"""ScrollworkGenerator: the calling layer around the pure core.

Holds the current outline, substitutes the default outline when none is
given, and memoizes bounds per outline and motifs per
(region, style, intricacy, seed).
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from scrollwork.engine.bounds import DEFAULT_OUTLINE_PATH, BoundaryResolver, BoundingRegion, OutlineBoundary
from scrollwork.engine.config import GenerationConfig
from scrollwork.engine.layout import LayoutCache, Motif
from scrollwork.engine.styles import StyleProfile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Scene:
    """Everything a renderer needs for one frame."""

    config: GenerationConfig
    outline: OutlineBoundary
    region: BoundingRegion
    style: StyleProfile
    motifs: tuple[Motif, ...]

    @property
    def leaf_count(self) -> int:
        return sum(len(m.leaves) for m in self.motifs)


class ScrollworkGenerator:
    """Session object: current outline plus bounds and layout memos."""

    def __init__(
        self,
        outline: OutlineBoundary | str | None = None,
        layout_cache_size: int = 32,
        bounds_cache_size: int = 16,
    ) -> None:
        self._bounds = BoundaryResolver(maxsize=bounds_cache_size)
        self._layouts = LayoutCache(maxsize=layout_cache_size)
        self.outline = _as_outline(outline) if outline is not None else OutlineBoundary(DEFAULT_OUTLINE_PATH)

    def set_outline(self, outline: OutlineBoundary | str) -> BoundingRegion:
        """Replace the current outline; returns its (validated) bounding region."""
        candidate = _as_outline(outline)
        region = self._bounds.resolve(candidate)
        self.outline = candidate
        return region

    def reset_outline(self) -> None:
        self.outline = OutlineBoundary(DEFAULT_OUTLINE_PATH)

    def region(self, outline: OutlineBoundary | str | None = None) -> BoundingRegion:
        return self._bounds.resolve(_as_outline(outline) if outline is not None else self.outline)

    def generate(
        self,
        config: GenerationConfig,
        outline: OutlineBoundary | str | None = None,
    ) -> Scene:
        start = time.perf_counter()
        target = _as_outline(outline) if outline is not None else self.outline
        region = self._bounds.resolve(target)
        style = config.style
        motifs = self._layouts.get(region, style, config.intricacy, config.seed)
        scene = Scene(config=config, outline=target, region=region, style=style, motifs=motifs)

        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Generated %d motifs / %d leaves (%s, intricacy=%d, seed=%d) in %.1fms",
            len(motifs),
            scene.leaf_count,
            style.name,
            config.intricacy,
            config.seed,
            elapsed,
        )
        return scene

    def export(
        self,
        config: GenerationConfig,
        outline: OutlineBoundary | str | None = None,
        height: int | str = 700,
    ) -> tuple[str, str]:
        """Render to a standalone SVG document. Returns (filename, svg_text)."""
        from scrollwork.svg.serializer import render_scene

        scene = self.generate(config, outline)
        return config.export_filename, render_scene(scene, height=height)

    @property
    def layout_computations(self) -> int:
        return self._layouts.computations

    @property
    def bounds_computations(self) -> int:
        return self._bounds.computations


def _as_outline(outline: OutlineBoundary | str) -> OutlineBoundary:
    if isinstance(outline, OutlineBoundary):
        return outline
    return OutlineBoundary(outline)
