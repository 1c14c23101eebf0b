"""Scrollwork: seeded spiral-and-leaf ornament generator confined to an outline."""

__version__ = "0.1.0"
