"""Geometry generation engine: PRNG, curve builders, bounds, styles, layout."""

from scrollwork.engine.bounds import BoundingRegion, OutlineBoundary, resolve
from scrollwork.engine.curves import Curve, leaf, spiral
from scrollwork.engine.layout import Motif, layout
from scrollwork.engine.styles import STYLES, StyleProfile, get_style

__all__ = [
    "BoundingRegion",
    "Curve",
    "Motif",
    "OutlineBoundary",
    "STYLES",
    "StyleProfile",
    "get_style",
    "layout",
    "leaf",
    "resolve",
    "spiral",
]
