"""Application configuration from environment variables."""

from __future__ import annotations

import logging

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    sullivan_env: str = "development"
    sullivan_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Rendering
    default_precision: int = 4
    # Pixel viewports requested over HTTP or the CLI are clamped to this size.
    max_viewport_px: int = 4096

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=getattr(logging, (level or settings.sullivan_log_level).upper(), logging.INFO),
        format=LOG_FORMAT,
    )
