"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    scrollwork_env: str = "development"
    scrollwork_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Generation defaults (used when a request omits a field)
    default_style: str = "Acanthus"
    default_intricacy: int = 60
    default_seed: int = 12345
    default_thickness: float = 1.0

    # Export
    export_height: int = 700

    # Memoization sizes
    layout_cache_size: int = 32
    bounds_cache_size: int = 16

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
