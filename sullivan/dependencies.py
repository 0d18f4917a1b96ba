"""FastAPI dependency injection."""

from __future__ import annotations

from sullivan.config import Settings, settings
from sullivan.engine.pipeline import Pipeline, create_pipeline
from sullivan.svg.serializer import SvgRenderOptions


def get_settings() -> Settings:
    return settings


def get_pipeline() -> Pipeline:
    return create_pipeline(SvgRenderOptions(precision=settings.default_precision))
