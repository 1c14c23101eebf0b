"""Health check."""

from __future__ import annotations

from fastapi import APIRouter

from scrollwork import __version__
from scrollwork.engine.styles import style_names
from scrollwork.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__, styles=style_names())
