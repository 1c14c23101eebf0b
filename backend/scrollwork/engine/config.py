"""Generation configuration: one validated record per render request."""

from __future__ import annotations

from dataclasses import dataclass

from scrollwork.engine.prng import SEED_MAX, SEED_MIN
from scrollwork.engine.styles import StyleProfile, get_style
from scrollwork.errors import InvalidConfigurationError

INTRICACY_MIN = 10
INTRICACY_MAX = 120
THICKNESS_MIN = 0.5
THICKNESS_MAX = 2.0


@dataclass(frozen=True)
class GenerationConfig:
    """User-facing knobs. ``thickness`` and ``invert`` only affect rendering."""

    style_name: str = "Acanthus"
    intricacy: int = 60
    seed: int = 12345
    thickness: float = 1.0
    invert: bool = False

    def __post_init__(self) -> None:
        # Raises UnknownStyleError for unregistered names
        get_style(self.style_name)

        if isinstance(self.intricacy, bool) or not isinstance(self.intricacy, int):
            raise InvalidConfigurationError(f"intricacy must be an integer, got {self.intricacy!r}")
        if not INTRICACY_MIN <= self.intricacy <= INTRICACY_MAX:
            raise InvalidConfigurationError(
                f"intricacy {self.intricacy} outside [{INTRICACY_MIN}, {INTRICACY_MAX}]"
            )

        if isinstance(self.seed, bool) or not isinstance(self.seed, int):
            raise InvalidConfigurationError(f"seed must be an integer, got {self.seed!r}")
        if not SEED_MIN <= self.seed <= SEED_MAX:
            raise InvalidConfigurationError(f"seed {self.seed} does not fit in 32 bits")

        if isinstance(self.thickness, bool) or not isinstance(self.thickness, (int, float)):
            raise InvalidConfigurationError(f"thickness must be a number, got {self.thickness!r}")
        if not THICKNESS_MIN <= self.thickness <= THICKNESS_MAX:
            raise InvalidConfigurationError(
                f"thickness {self.thickness} outside [{THICKNESS_MIN}, {THICKNESS_MAX}]"
            )

        if not isinstance(self.invert, bool):
            raise InvalidConfigurationError(f"invert must be a boolean, got {self.invert!r}")

    @property
    def style(self) -> StyleProfile:
        return get_style(self.style_name)

    @property
    def export_filename(self) -> str:
        return f"scrollwork_{self.style_name}_seed{self.seed}.svg"
