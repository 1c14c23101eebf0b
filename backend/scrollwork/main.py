"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from scrollwork import __version__
from scrollwork.config import settings
from scrollwork.errors import ScrollworkError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.scrollwork_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


async def _scrollwork_error_handler(request: Request, exc: ScrollworkError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "error": type(exc).__name__},
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title="Scrollwork",
        description="Seeded spiral-and-leaf ornament generator confined to an SVG outline",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ScrollworkError, _scrollwork_error_handler)

    from scrollwork.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
