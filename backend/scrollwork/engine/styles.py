"""Style profile table: named presets of stroke and geometry constants."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass

from scrollwork.errors import InvalidConfigurationError, UnknownStyleError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StyleProfile:
    name: str
    stroke_color: str
    stroke_width: float
    leaf_scale: float
    leaf_frequency: float  # leaves per unit of intricacy
    spiral_turns_range: tuple[float, float]
    initial_radius_range: tuple[float, float]

    def __post_init__(self) -> None:
        for label, (lo, hi) in (
            ("spiral_turns_range", self.spiral_turns_range),
            ("initial_radius_range", self.initial_radius_range),
        ):
            if lo > hi:
                raise InvalidConfigurationError(f"{self.name}: {label} min {lo} exceeds max {hi}")
        if self.stroke_width <= 0:
            raise InvalidConfigurationError(f"{self.name}: stroke_width must be positive")
        if self.leaf_frequency < 0 or self.leaf_scale < 0:
            raise InvalidConfigurationError(f"{self.name}: leaf settings must be non-negative")

    def to_dict(self) -> dict:
        data = asdict(self)
        data["spiral_turns_range"] = list(self.spiral_turns_range)
        data["initial_radius_range"] = list(self.initial_radius_range)
        return data


ACANTHUS = StyleProfile(
    name="Acanthus",
    stroke_color="#000",
    stroke_width=1.6,
    leaf_scale=1.0,
    leaf_frequency=0.35,
    spiral_turns_range=(0.8, 1.2),
    initial_radius_range=(4.0, 9.0),
)

VICTORIAN = StyleProfile(
    name="Victorian",
    stroke_color="#000",
    stroke_width=1.2,
    leaf_scale=0.8,
    leaf_frequency=0.2,
    spiral_turns_range=(1.0, 1.6),
    initial_radius_range=(3.0, 7.0),
)

WESTERN = StyleProfile(
    name="Western",
    stroke_color="#000",
    stroke_width=2.0,
    leaf_scale=1.2,
    leaf_frequency=0.28,
    spiral_turns_range=(0.7, 1.0),
    initial_radius_range=(5.0, 10.0),
)

MINIMAL = StyleProfile(
    name="Minimal",
    stroke_color="#000",
    stroke_width=1.4,
    leaf_scale=0.4,
    leaf_frequency=0.08,
    spiral_turns_range=(0.6, 0.9),
    initial_radius_range=(6.0, 12.0),
)

STYLES: dict[str, StyleProfile] = {s.name: s for s in (ACANTHUS, VICTORIAN, WESTERN, MINIMAL)}


def register_style(profile: StyleProfile, *, replace: bool = False) -> None:
    """Add a preset to the process-wide table.

    Call at import or application setup time, before generation starts; the
    table is read, never written, by GenerationConfig and the API handlers.
    """
    if profile.name in STYLES and not replace:
        raise InvalidConfigurationError(f"Style {profile.name!r} is already registered")
    STYLES[profile.name] = profile
    logger.debug("Registered style %s", profile.name)


def get_style(name: str) -> StyleProfile:
    try:
        return STYLES[name]
    except (KeyError, TypeError):
        raise UnknownStyleError(str(name), style_names()) from None


def style_names() -> list[str]:
    return list(STYLES)
