"""Motif layout engine.

``layout(region, style, intricacy, seed)`` is a pure function: one seeded
mulberry32 stream is threaded through every draw, in a fixed order, so the
same four inputs always give the same motifs. Memoization lives with the
caller (see ``LayoutCache`` and ``ScrollworkGenerator``).
"""

from __future__ import annotations

import functools
import logging
import math
from dataclasses import dataclass

from scrollwork.engine import curves
from scrollwork.engine.bounds import BoundingRegion
from scrollwork.engine.curves import Curve, Point
from scrollwork.engine.prng import SEED_MAX, SEED_MIN, Mulberry32
from scrollwork.engine.styles import StyleProfile
from scrollwork.errors import InvalidConfigurationError

logger = logging.getLogger(__name__)

MOTIFS_PER_TEN = 18  # motif count = floor(intricacy / 10 * 18)
CENTER_INSET = 10.0
LAYOUT_SMOOTHING = 0.25

LEAF_JITTER_MIN = 0.8
LEAF_JITTER_SPAN = 0.5  # jitter in [0.8, 1.3)
LEAF_LENGTH_RANGE = (6.0, 12.0)
LEAF_OFFSET_RANGE = (0.5, 3.0)  # multiples of the spiral's initial radius

TAU = math.pi * 2


@dataclass(frozen=True)
class Motif:
    """One spiral plus its leaves, with the parameters that placed them."""

    spiral: Curve
    leaves: tuple[Curve, ...]
    center: Point
    turns: float
    initial_radius: float
    rotation: float

    @property
    def curves(self) -> tuple[Curve, ...]:
        return (self.spiral, *self.leaves)


def motif_count(intricacy: int) -> int:
    return math.floor((intricacy / 10) * MOTIFS_PER_TEN)


def validate_layout_inputs(intricacy: int, seed: int) -> None:
    if isinstance(intricacy, bool) or not isinstance(intricacy, int):
        raise InvalidConfigurationError(f"intricacy must be an integer, got {intricacy!r}")
    if intricacy <= 0:
        raise InvalidConfigurationError(f"intricacy must be positive, got {intricacy}")
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise InvalidConfigurationError(f"seed must be an integer, got {seed!r}")
    if not SEED_MIN <= seed <= SEED_MAX:
        raise InvalidConfigurationError(f"seed {seed} does not fit in 32 bits")


def _place_leaves(
    rng: Mulberry32,
    style: StyleProfile,
    intricacy: int,
    center: Point,
    initial_radius: float,
) -> tuple[Curve, ...]:
    jitter = LEAF_JITTER_MIN + rng.random() * LEAF_JITTER_SPAN
    count = math.floor(intricacy * style.leaf_frequency * jitter)

    cx, cy = center
    off_lo = initial_radius * LEAF_OFFSET_RANGE[0]
    off_hi = initial_radius * LEAF_OFFSET_RANGE[1]
    leaves: list[Curve] = []
    for _ in range(count):
        angle = rng.uniform(0, TAU)
        length = rng.uniform(*LEAF_LENGTH_RANGE) * style.leaf_scale
        lx = cx + rng.uniform(off_lo, off_hi) * math.cos(angle)
        ly = cy + rng.uniform(off_lo, off_hi) * math.sin(angle)
        flip = math.pi if rng.chance(0.5) else 0.0
        leaves.append(curves.leaf((lx, ly), angle + flip, length))
    return tuple(leaves)


def layout(
    region: BoundingRegion,
    style: StyleProfile,
    intricacy: int,
    seed: int,
) -> list[Motif]:
    """Place ``floor(intricacy / 10 * 18)`` motifs inside ``region``.

    Draw order per motif: cx, cy, turns, initial radius, rotation, leaf
    jitter, then per leaf angle, length, x offset, y offset, flip.
    """
    validate_layout_inputs(intricacy, seed)

    rng = Mulberry32(seed)
    count = motif_count(intricacy)
    x_lo, x_hi = region.min_x + CENTER_INSET, region.min_x + region.width - CENTER_INSET
    y_lo, y_hi = region.min_y + CENTER_INSET, region.min_y + region.height - CENTER_INSET

    motifs: list[Motif] = []
    for _ in range(count):
        cx = rng.uniform(x_lo, x_hi)
        cy = rng.uniform(y_lo, y_hi)
        turns = rng.uniform(*style.spiral_turns_range)
        r0 = rng.uniform(*style.initial_radius_range)
        rotation = rng.uniform(0, TAU)
        spiral = curves.spiral((cx, cy), r0, turns, rotation, smoothing=LAYOUT_SMOOTHING)
        leaves = _place_leaves(rng, style, intricacy, (cx, cy), r0)
        motifs.append(
            Motif(
                spiral=spiral,
                leaves=leaves,
                center=(cx, cy),
                turns=turns,
                initial_radius=r0,
                rotation=rotation,
            )
        )

    logger.debug(
        "Laid out %d motifs (%d leaves) for style=%s intricacy=%d seed=%d in %d draws",
        len(motifs),
        sum(len(m.leaves) for m in motifs),
        style.name,
        intricacy,
        seed,
        rng.draws,
    )
    return motifs


class LayoutCache:
    """Caller-side memo keyed on (region, style, intricacy, seed) by value."""

    def __init__(self, maxsize: int = 32) -> None:
        self._layout = functools.lru_cache(maxsize=maxsize)(self._compute)

    @staticmethod
    def _compute(
        region: BoundingRegion,
        style: StyleProfile,
        intricacy: int,
        seed: int,
    ) -> tuple[Motif, ...]:
        return tuple(layout(region, style, intricacy, seed))

    def get(
        self,
        region: BoundingRegion,
        style: StyleProfile,
        intricacy: int,
        seed: int,
    ) -> tuple[Motif, ...]:
        validate_layout_inputs(intricacy, seed)
        return self._layout(region, style, intricacy, seed)

    @property
    def computations(self) -> int:
        return self._layout.cache_info().misses

    def clear(self) -> None:
        self._layout.cache_clear()
