"""Master API router: mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from scrollwork.api import generate, health, outline, styles

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(styles.router)
api_router.include_router(outline.router)
api_router.include_router(generate.router)
