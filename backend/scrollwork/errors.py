"""Exception hierarchy. Every failure surfaced by the core derives from ScrollworkError."""

from __future__ import annotations


class ScrollworkError(Exception):
    """Base class for all scrollwork errors."""


class InvalidBoundaryError(ScrollworkError, ValueError):
    """Outline boundary is missing, empty, or not valid SVG path data."""


class InvalidConfigurationError(ScrollworkError, ValueError):
    """Generation parameters are outside their documented domain."""


class UnknownStyleError(InvalidConfigurationError):
    """Requested style name is not registered in the style table."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(f"Unknown style {name!r} (available: {', '.join(available)})")
