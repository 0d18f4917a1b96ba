"""API response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Response(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HealthResponse(_Response):
    status: str = "ok"
    version: str = "0.1.0"
    generators_registered: int = 0


class GeneratorInfo(_Response):
    id: str
    description: str = ""
    tags: list[str] = Field(default_factory=list)
    defaults: dict[str, Any] = Field(default_factory=dict)


class BoundsModel(_Response):
    x: float
    y: float
    width: float
    height: float


class RenderResponse(_Response):
    generator_id: str
    svg: str
    bounds: BoundsModel
    path_count: int = 0
    node_count: int = 0
    roles: dict[str, int] = Field(default_factory=dict)
    processing_time_ms: float = 0.0


class SceneResponse(_Response):
    generator_id: str
    bounds: BoundsModel
    root: dict[str, Any]
