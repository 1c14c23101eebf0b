"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    styles: list[str] = Field(default_factory=list)


class RegionModel(BaseModel):
    minX: float
    minY: float
    width: float
    height: float


class StyleModel(BaseModel):
    name: str
    stroke_color: str
    stroke_width: float
    leaf_scale: float
    leaf_frequency: float
    spiral_turns_range: list[float]
    initial_radius_range: list[float]


class OutlineResponse(BaseModel):
    path_data: str
    region: RegionModel


class GenerateResponse(BaseModel):
    svg: str
    filename: str
    region: RegionModel
    motif_count: int = 0
    leaf_count: int = 0
