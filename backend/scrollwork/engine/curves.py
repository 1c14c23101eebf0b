"""Curve command model and the spiral / leaf builders.

Curves are kept as structured command lists (MoveTo, CurveTo, QuadTo,
ClosePath) with full-precision coordinates. Text serialization happens only
in ``Curve.to_path_data`` at the rendering boundary.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

import numpy as np

Point = tuple[float, float]

# Logarithmic spiral growth rate: r = r0 * exp(GROWTH * t)
SPIRAL_GROWTH = 0.12
SPIRAL_SAMPLES_PER_TURN = 60
SPIRAL_MIN_STEPS = 6
DEFAULT_SMOOTHING = 0.22

# Leaf teardrop proportions
LEAF_CONTROL_SPREAD = 0.9  # radians either side of the leaf axis
LEAF_CONTROL_REACH = 0.35  # fraction of length
LEAF_BACK_REACH = 0.15  # fraction of length, behind the origin

PATH_PRECISION = 2


@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float

    @property
    def end(self) -> Point:
        return (self.x, self.y)

    def format(self, precision: int = PATH_PRECISION) -> str:
        return f"M {_fmt(self.x, precision)} {_fmt(self.y, precision)}"


@dataclass(frozen=True)
class CurveTo:
    """Cubic Bézier segment: two control points then the end point."""

    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float

    @property
    def end(self) -> Point:
        return (self.x, self.y)

    def format(self, precision: int = PATH_PRECISION) -> str:
        nums = (self.x1, self.y1, self.x2, self.y2, self.x, self.y)
        return "C " + " ".join(_fmt(v, precision) for v in nums)


@dataclass(frozen=True)
class QuadTo:
    """Quadratic Bézier segment: one control point then the end point."""

    x1: float
    y1: float
    x: float
    y: float

    @property
    def end(self) -> Point:
        return (self.x, self.y)

    def format(self, precision: int = PATH_PRECISION) -> str:
        nums = (self.x1, self.y1, self.x, self.y)
        return "Q " + " ".join(_fmt(v, precision) for v in nums)


@dataclass(frozen=True)
class ClosePath:
    @property
    def end(self) -> Point | None:
        return None

    def format(self, precision: int = PATH_PRECISION) -> str:
        return "Z"


PathCommand = Union[MoveTo, CurveTo, QuadTo, ClosePath]


def _fmt(value: float, precision: int) -> str:
    return f"{value:.{precision}f}"


@dataclass(frozen=True)
class Curve:
    """Immutable path: a MoveTo followed by drawing commands, or nothing at all."""

    commands: tuple[PathCommand, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.commands

    @property
    def start(self) -> Point | None:
        if self.is_empty:
            return None
        return self.commands[0].end

    @property
    def end(self) -> Point | None:
        for cmd in reversed(self.commands):
            if cmd.end is not None:
                return cmd.end
        return None

    def anchor_points(self) -> list[Point]:
        """On-curve points: the start plus every segment end point."""
        return [cmd.end for cmd in self.commands if cmd.end is not None]

    def to_path_data(self, precision: int = PATH_PRECISION) -> str:
        return " ".join(cmd.format(precision) for cmd in self.commands)

    def __len__(self) -> int:
        return len(self.commands)


EMPTY_CURVE = Curve()


def spiral_steps(turns: float) -> int:
    """Number of equal parameter steps for a spiral; 0 means zero sweep."""
    raw = math.floor(SPIRAL_SAMPLES_PER_TURN * abs(turns))
    if raw < 1:
        return 0
    return max(SPIRAL_MIN_STEPS, raw)


def spiral_points(
    center: Point,
    initial_radius: float,
    turns: float,
    rotation: float,
) -> np.ndarray:
    """Sample the equiangular spiral. Returns an (steps + 1) x 2 array, or empty."""
    steps = spiral_steps(turns)
    if steps == 0:
        return np.empty((0, 2))

    cx, cy = center
    i = np.arange(steps + 1, dtype=np.float64)
    t = (i / steps) * turns * np.pi * 2
    r = initial_radius * np.exp(SPIRAL_GROWTH * t)
    x = cx + r * np.cos(t + rotation)
    y = cy + r * np.sin(t + rotation)
    return np.column_stack([x, y])


def smooth_polyline(points: np.ndarray, smoothing: float = DEFAULT_SMOOTHING) -> Curve:
    """Join consecutive points with cubic segments.

    Each segment's control points sit ``smoothing`` of the chord in from
    either end, so only the adjacent pair is consulted.
    """
    if len(points) < 2:
        return EMPTY_CURVE

    p0 = points[:-1]
    p1 = points[1:]
    chord = p1 - p0
    c1 = p0 + chord * smoothing
    c2 = p1 - chord * smoothing

    commands: list[PathCommand] = [MoveTo(float(points[0, 0]), float(points[0, 1]))]
    for a, b, end in zip(c1.tolist(), c2.tolist(), p1.tolist()):
        commands.append(CurveTo(a[0], a[1], b[0], b[1], end[0], end[1]))
    return Curve(tuple(commands))


def spiral(
    center: Point,
    initial_radius: float,
    turns: float,
    rotation: float,
    smoothing: float = DEFAULT_SMOOTHING,
) -> Curve:
    """Smoothed logarithmic spiral around ``center``."""
    pts = spiral_points(center, initial_radius, turns, rotation)
    return smooth_polyline(pts, smoothing)


def _polar(origin: Point, reach: float, angle: float) -> Point:
    return (origin[0] + reach * math.cos(angle), origin[1] + reach * math.sin(angle))


def leaf_tip(origin: Point, angle: float, length: float) -> Point:
    return _polar(origin, length, angle)


def leaf(origin: Point, angle: float, length: float) -> Curve:
    """Closed teardrop pointing along ``angle``.

    One cubic out to the tip with controls splayed ±0.9 rad, then a quadratic
    back to the origin pulled through a point just behind it.
    """
    reach = length * LEAF_CONTROL_REACH
    c1 = _polar(origin, reach, angle - LEAF_CONTROL_SPREAD)
    c2 = _polar(origin, reach, angle + LEAF_CONTROL_SPREAD)
    tip = leaf_tip(origin, angle, length)
    back = _polar(origin, length * LEAF_BACK_REACH, angle + math.pi)
    return Curve(
        (
            MoveTo(*origin),
            CurveTo(c1[0], c1[1], c2[0], c2[1], tip[0], tip[1]),
            QuadTo(back[0], back[1], origin[0], origin[1]),
        )
    )
