"""Outline boundary + bounding region resolver.

The outline is opaque SVG path data; the only question asked of it is its
axis-aligned bounding box, computed analytically by svgpathtools over every
segment (lines, quadratic/cubic Béziers, elliptical arcs). Under the
even-odd fill rule holes lie inside the outer contour, so the segment union
bbox is the bbox of the filled area.
"""

from __future__ import annotations

import functools
import logging
import math
import re
from dataclasses import dataclass

from svgpathtools import Path, parse_path

from scrollwork.errors import InvalidBoundaryError

logger = logging.getLogger(__name__)

# Padding added on every side of the outline's raw bounds
REGION_PAD = 20.0

# Scroll-shaped outline with a circular cut-out near its right end.
# Substituted by calling layers when the user supplies no outline.
DEFAULT_OUTLINE_PATH = (
    "M 20 140 Q 40 110 120 105 Q 240 98 360 110 Q 430 117 480 102 Q 530 87 580 110 "
    "Q 630 133 690 130 Q 780 126 860 145 Q 900 155 915 185 Q 930 215 915 245 "
    "Q 880 315 800 330 Q 720 345 640 338 Q 600 334 520 352 Q 440 370 360 355 "
    "Q 280 340 210 350 Q 140 360 90 330 Q 40 300 25 260 Q 10 220 20 140 Z "
    "M 835 210 a 18 18 0 1 0 36 0 a 18 18 0 1 0 -36 0 Z"
)

_LEADING_MOVE_RE = re.compile(r"^\s*[Mm]")

# One path-data token: command letter, number, or comma separator
_PATH_TOKEN_RE = re.compile(
    r"\s*(?:[MmLlHhVvCcSsQqTtAaZz]|[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?|,)"
)
_TRAILING_SPACE_RE = re.compile(r"\s*\Z")


@dataclass(frozen=True)
class OutlineBoundary:
    """Closed-region path the ornament is confined within (even-odd fill)."""

    path_data: str
    fill_rule: str = "evenodd"

    def __post_init__(self) -> None:
        if not isinstance(self.path_data, str) or not self.path_data.strip():
            raise InvalidBoundaryError("Outline path data is empty")

    def to_path(self) -> Path:
        return parse_outline(self.path_data)


@dataclass(frozen=True)
class BoundingRegion:
    """Padded axis-aligned bounds: {minX, minY, width, height}."""

    min_x: float
    min_y: float
    width: float
    height: float

    @classmethod
    def from_bbox(
        cls,
        xmin: float,
        ymin: float,
        xmax: float,
        ymax: float,
        pad: float = REGION_PAD,
    ) -> BoundingRegion:
        return cls(
            min_x=xmin - pad,
            min_y=ymin - pad,
            width=(xmax - xmin) + pad * 2,
            height=(ymax - ymin) + pad * 2,
        )

    @property
    def max_x(self) -> float:
        return self.min_x + self.width

    @property
    def max_y(self) -> float:
        return self.min_y + self.height

    def view_box(self) -> str:
        return " ".join(_compact(v) for v in (self.min_x, self.min_y, self.width, self.height))

    def as_dict(self) -> dict[str, float]:
        return {"minX": self.min_x, "minY": self.min_y, "width": self.width, "height": self.height}


def _compact(value: float) -> str:
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _first_invalid_token(path_data: str) -> int | None:
    """Offset of the first character outside the path-data grammar, or None."""
    pos = 0
    end = len(path_data)
    while pos < end:
        if _TRAILING_SPACE_RE.match(path_data, pos):
            return None
        m = _PATH_TOKEN_RE.match(path_data, pos)
        if m is None:
            return pos
        pos = m.end()
    return None


def parse_outline(path_data: str | None) -> Path:
    """Parse SVG path data, raising InvalidBoundaryError on anything unusable."""
    if path_data is None:
        raise InvalidBoundaryError("Outline boundary is missing")
    if not isinstance(path_data, str) or not path_data.strip():
        raise InvalidBoundaryError("Outline path data is empty")
    if not _LEADING_MOVE_RE.match(path_data):
        raise InvalidBoundaryError("Outline path data must begin with a move-to command")
    bad = _first_invalid_token(path_data)
    if bad is not None:
        raise InvalidBoundaryError(f"Malformed outline path data at offset {bad}: {path_data[bad:bad + 10]!r}")

    try:
        path = parse_path(path_data)
    except (ValueError, IndexError, TypeError, ZeroDivisionError) as e:
        logger.warning("Failed to parse outline path: %s", e)
        raise InvalidBoundaryError(f"Malformed outline path data: {e}") from e

    if len(path) == 0:
        raise InvalidBoundaryError("Outline path has no drawable segments")
    return path


def raw_bbox(outline: OutlineBoundary | str) -> tuple[float, float, float, float]:
    """Tight (xmin, ymin, xmax, ymax) of the outline geometry."""
    path_data = outline.path_data if isinstance(outline, OutlineBoundary) else outline
    path = parse_outline(path_data)
    try:
        xmin, xmax, ymin, ymax = path.bbox()
    except (ValueError, ZeroDivisionError) as e:
        raise InvalidBoundaryError(f"Could not measure outline bounds: {e}") from e
    bounds = (float(xmin), float(ymin), float(xmax), float(ymax))
    if not all(math.isfinite(v) for v in bounds):
        raise InvalidBoundaryError("Outline bounds are not finite")
    return bounds


def resolve(outline: OutlineBoundary | str | None) -> BoundingRegion:
    """Bounding region of an outline, padded by REGION_PAD on every side."""
    if outline is None:
        raise InvalidBoundaryError("Outline boundary is missing")
    xmin, ymin, xmax, ymax = raw_bbox(outline)
    region = BoundingRegion.from_bbox(xmin, ymin, xmax, ymax)
    if not (math.isfinite(region.width) and math.isfinite(region.height)):
        raise InvalidBoundaryError("Outline bounds are not finite")
    logger.debug("Resolved bounding region %s", region.view_box())
    return region


class BoundaryResolver:
    """Memoizes ``resolve`` per distinct outline path data."""

    def __init__(self, maxsize: int = 16) -> None:
        self._resolve = functools.lru_cache(maxsize=maxsize)(self._compute)

    @staticmethod
    def _compute(path_data: str) -> BoundingRegion:
        return resolve(path_data)

    def resolve(self, outline: OutlineBoundary | str | None) -> BoundingRegion:
        if outline is None:
            raise InvalidBoundaryError("Outline boundary is missing")
        key = outline.path_data if isinstance(outline, OutlineBoundary) else outline
        return self._resolve(key)

    @property
    def computations(self) -> int:
        return self._resolve.cache_info().misses

    def clear(self) -> None:
        self._resolve.cache_clear()
