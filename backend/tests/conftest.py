"""Shared test fixtures."""

from __future__ import annotations

import pytest

from scrollwork.engine.bounds import BoundingRegion

SQUARE_PATH = "M 0 0 L 100 0 L 100 100 L 0 100 Z"

# Outer square with an inner square cut-out (even-odd hole)
SQUARE_WITH_HOLE_PATH = "M 0 0 L 100 0 L 100 100 L 0 100 Z M 30 30 L 70 30 L 70 70 L 30 70 Z"

CIRCLE_ARC_PATH = "M 835 210 a 18 18 0 1 0 36 0 a 18 18 0 1 0 -36 0 Z"

SQUARE_SVG = f'''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <path d="{SQUARE_PATH}" fill="#000"/>
</svg>'''

TWO_PATH_SVG = f'''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 200 200">
  <rect x="0" y="0" width="10" height="10"/>
  <g><path d="{CIRCLE_ARC_PATH}"/></g>
  <path d="{SQUARE_PATH}"/>
</svg>'''

NO_PATH_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <circle cx="12" cy="12" r="10"/>
</svg>'''


@pytest.fixture
def square_path() -> str:
    return SQUARE_PATH


@pytest.fixture
def square_with_hole_path() -> str:
    return SQUARE_WITH_HOLE_PATH


@pytest.fixture
def circle_arc_path() -> str:
    return CIRCLE_ARC_PATH


@pytest.fixture
def square_svg() -> str:
    return SQUARE_SVG


@pytest.fixture
def two_path_svg() -> str:
    return TWO_PATH_SVG


@pytest.fixture
def no_path_svg() -> str:
    return NO_PATH_SVG


@pytest.fixture
def square_region() -> BoundingRegion:
    """Padded region of the 100×100 square."""
    return BoundingRegion(min_x=-20.0, min_y=-20.0, width=140.0, height=140.0)
