"""Health check + generator listing."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from sullivan import __version__
from sullivan.dependencies import get_pipeline
from sullivan.engine.pipeline import Pipeline
from sullivan.models.responses import GeneratorInfo, HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(pipeline: Pipeline = Depends(get_pipeline)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        generators_registered=pipeline.registry.count,
    )


@router.get("/generators", response_model=list[GeneratorInfo])
async def generators(pipeline: Pipeline = Depends(get_pipeline)) -> list[GeneratorInfo]:
    return [
        GeneratorInfo(
            id=spec.id,
            description=spec.description,
            tags=sorted(spec.tags),
            defaults=spec.defaults(),
        )
        for spec in pipeline.registry.all()
    ]
