"""API request models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from sullivan.models.presets import ControllerParams, PresetPart
from sullivan.svg.serializer import SvgRenderOptions


class _Request(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Viewport(_Request):
    width: float = Field(..., gt=0, description="Pixel width of the output frame")
    height: float = Field(..., gt=0, description="Pixel height of the output frame")


class RenderRequest(_Request):
    params: dict[str, Any] = Field(
        default_factory=dict,
        description="Generator parameters (camelCase or snake_case); omitted fields use defaults",
    )
    options: SvgRenderOptions | None = Field(default=None, description="Serializer options")
    viewport: Viewport | None = Field(
        default=None,
        description="Fit the scene's bounds into a pixel frame before serializing",
    )


class PresetRenderRequest(_Request):
    preset: ControllerParams = Field(default_factory=ControllerParams)
    part: PresetPart = Field(default="flow", description="Which part of the preset to draw")
    options: SvgRenderOptions | None = None
    viewport: Viewport | None = None
