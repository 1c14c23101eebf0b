"""GET /api/styles: the registered style presets."""

from __future__ import annotations

from fastapi import APIRouter

from scrollwork.engine.styles import STYLES
from scrollwork.models.responses import StyleModel

router = APIRouter()


@router.get("/styles", response_model=list[StyleModel])
async def list_styles() -> list[StyleModel]:
    return [StyleModel(**profile.to_dict()) for profile in STYLES.values()]
