"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from scrollwork.engine.config import INTRICACY_MAX, INTRICACY_MIN, THICKNESS_MAX, THICKNESS_MIN
from scrollwork.engine.prng import SEED_MAX, SEED_MIN


class OutlineRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG document containing at least one <path>")


class GenerateRequest(BaseModel):
    path_data: str | None = Field(
        default=None,
        description="Outline path data; the default scroll outline is used when omitted",
    )
    style: str | None = Field(default=None, description="Style preset name")
    intricacy: int | None = Field(default=None, ge=INTRICACY_MIN, le=INTRICACY_MAX)
    seed: int | None = Field(default=None, ge=SEED_MIN, le=SEED_MAX)
    thickness: float | None = Field(default=None, ge=THICKNESS_MIN, le=THICKNESS_MAX)
    invert: bool = Field(default=False, description="Black fill with white outline stroke")
