"""POST /api/render, /api/scene, /api/presets/render — build ornaments over HTTP."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import ValidationError

from sullivan.config import Settings
from sullivan.dependencies import get_pipeline, get_settings
from sullivan.engine.pipeline import Pipeline, RenderResult
from sullivan.engine.scene import node_to_dict
from sullivan.errors import ConstructionError, UnknownGeneratorError
from sullivan.geometry.curves import clamp
from sullivan.models.requests import PresetRenderRequest, RenderRequest, Viewport
from sullivan.models.responses import BoundsModel, RenderResponse, SceneResponse

logger = logging.getLogger(__name__)

router = APIRouter()

T = TypeVar("T")

# Numeric code; the starlette constant name differs between releases.
_UNPROCESSABLE = 422


def _guarded(fn: Callable[[], T]) -> T:
    """Run a pipeline call, mapping engine errors onto HTTP status codes."""
    try:
        return fn()
    except UnknownGeneratorError as e:
        logger.warning("Unknown generator requested: %s", e.generator_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except ValidationError as e:
        logger.warning("Invalid generator parameters: %d errors", e.error_count())
        raise HTTPException(
            status_code=_UNPROCESSABLE,
            detail=e.errors(include_url=False, include_context=False),
        ) from e
    except ConstructionError as e:
        logger.warning("Construction failed: %s", e)
        raise HTTPException(status_code=_UNPROCESSABLE, detail=str(e)) from e


def _viewport(viewport: Viewport | None, settings: Settings) -> tuple[float, float] | None:
    if viewport is None:
        return None
    limit = settings.max_viewport_px
    return clamp(viewport.width, 1, limit), clamp(viewport.height, 1, limit)


def _response(rendered: RenderResult) -> RenderResponse:
    b = rendered.result.bounds
    return RenderResponse(
        generator_id=rendered.generator_id,
        svg=rendered.svg,
        bounds=BoundsModel(x=b.x, y=b.y, width=b.width, height=b.height),
        path_count=rendered.path_count,
        node_count=rendered.node_count,
        roles=rendered.roles,
        processing_time_ms=rendered.elapsed_ms,
    )


@router.post("/render/{generator_id}", response_model=RenderResponse)
async def render(
    generator_id: str,
    request: RenderRequest | None = None,
    pipeline: Pipeline = Depends(get_pipeline),
    settings: Settings = Depends(get_settings),
) -> RenderResponse:
    request = request or RenderRequest()
    rendered = _guarded(
        lambda: pipeline.render(
            generator_id,
            request.params,
            request.options,
            viewport=_viewport(request.viewport, settings),
        )
    )
    return _response(rendered)


@router.post("/scene/{generator_id}", response_model=SceneResponse)
async def scene(
    generator_id: str,
    request: RenderRequest | None = None,
    pipeline: Pipeline = Depends(get_pipeline),
    settings: Settings = Depends(get_settings),
) -> SceneResponse:
    request = request or RenderRequest()
    result = _guarded(
        lambda: pipeline.scene(
            generator_id,
            request.params,
            viewport=_viewport(request.viewport, settings),
        )
    )
    b = result.bounds
    return SceneResponse(
        generator_id=generator_id,
        bounds=BoundsModel(x=b.x, y=b.y, width=b.width, height=b.height),
        root=node_to_dict(result.root),
    )


@router.post("/presets/render", response_model=RenderResponse)
async def render_preset(
    request: PresetRenderRequest,
    pipeline: Pipeline = Depends(get_pipeline),
    settings: Settings = Depends(get_settings),
) -> RenderResponse:
    rendered = _guarded(
        lambda: pipeline.render_preset(
            request.preset,
            request.part,
            request.options,
            viewport=_viewport(request.viewport, settings),
        )
    )
    return _response(rendered)
