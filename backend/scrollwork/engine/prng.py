"""Deterministic PRNG: mulberry32 over unsigned 32-bit state.

Pure functional core (``create`` / ``next_value``) plus a small stream wrapper
that the layout engine threads through its draws. All arithmetic is masked to
32 bits so the sequence is identical to the reference generator for any seed.
"""

from __future__ import annotations

from typing import NamedTuple

_MASK32 = 0xFFFFFFFF
_INCREMENT = 0x6D2B79F5
_TWO_POW_32 = 4294967296.0

SEED_MIN = -(2**31)
SEED_MAX = 2**32 - 1


class PrngState(NamedTuple):
    """Running 32-bit state of a mulberry32 stream."""

    a: int


def _imul(x: int, y: int) -> int:
    """Low 32 bits of the product (Math.imul, read unsigned)."""
    return (x * y) & _MASK32


def create(seed: int) -> PrngState:
    """Start a stream. Negative seeds wrap to their two's-complement value."""
    return PrngState(seed & _MASK32)


def next_value(state: PrngState) -> tuple[float, PrngState]:
    """Advance once. Returns a float in [0, 1) and the new state."""
    a = (state.a + _INCREMENT) & _MASK32
    t = _imul(a ^ (a >> 15), a | 1)
    t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _MASK32
    t = (t ^ (t >> 14)) & _MASK32
    return t / _TWO_POW_32, PrngState(a)


def rand_between(state: PrngState, lo: float, hi: float) -> tuple[float, PrngState]:
    """Uniform draw in [lo, hi)."""
    u, state = next_value(state)
    return lo + (hi - lo) * u, state


class Mulberry32:
    """Mutable stream over the functional core, one per generation pass."""

    def __init__(self, seed: int) -> None:
        self.seed = seed
        self._state = create(seed)
        self.draws = 0

    @property
    def state(self) -> PrngState:
        return self._state

    def random(self) -> float:
        value, self._state = next_value(self._state)
        self.draws += 1
        return value

    def uniform(self, lo: float, hi: float) -> float:
        return lo + (hi - lo) * self.random()

    def chance(self, threshold: float = 0.5) -> bool:
        """True when the next draw is strictly above ``threshold``."""
        return self.random() > threshold
