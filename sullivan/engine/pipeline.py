"""Render pipeline — generator → (viewport) → flatten → serialize, with timing."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

import sullivan.generators  # noqa: F401  (registers the built-in generators)
from sullivan.engine.flatten import FlattenedPath, flatten
from sullivan.engine.registry import GeneratorRegistry, get_registry
from sullivan.engine.scene import OrnamentResult, count_nodes, scale_to_viewport, summarize
from sullivan.models.presets import ControllerParams, PresetPart
from sullivan.svg.serializer import SvgRenderOptions, render_svg, visible_paths

logger = logging.getLogger(__name__)

RawParams = BaseModel | dict[str, Any] | None


@dataclass
class RenderResult:
    generator_id: str
    result: OrnamentResult
    flattened: list[FlattenedPath]
    svg: str
    elapsed_ms: float
    # Paths actually written to the SVG.
    path_count: int

    @property
    def node_count(self) -> int:
        return count_nodes(self.result.root)

    @property
    def roles(self) -> dict[str, int]:
        return summarize(self.result.root)


class Pipeline:
    """Builds scenes through the generator registry and serializes them."""

    def __init__(
        self,
        registry: GeneratorRegistry | None = None,
        default_options: SvgRenderOptions | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.default_options = default_options or SvgRenderOptions()

    def scene(
        self,
        generator_id: str,
        params: RawParams = None,
        *,
        viewport: tuple[float, float] | None = None,
    ) -> OrnamentResult:
        """Run one generator; optionally fit the result into a pixel viewport."""
        spec = self.registry.get(generator_id)
        t0 = time.perf_counter()
        result = spec.build(params)
        if viewport is not None:
            result = scale_to_viewport(result, *viewport)
        logger.debug("  %s built in %.1fms", generator_id, (time.perf_counter() - t0) * 1000)
        return result

    def render(
        self,
        generator_id: str,
        params: RawParams = None,
        options: SvgRenderOptions | None = None,
        *,
        viewport: tuple[float, float] | None = None,
    ) -> RenderResult:
        start = time.perf_counter()
        opts = options or self.default_options
        if viewport is not None and opts.width is None and opts.height is None:
            opts = opts.model_copy(update={"width": viewport[0], "height": viewport[1]})

        result = self.scene(generator_id, params, viewport=viewport)
        flattened = flatten(result)
        svg = render_svg(flattened, result.bounds, opts)
        emitted = len(visible_paths(flattened, opts))

        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Rendered %s: %d paths, %d bytes in %.1fms",
            generator_id,
            emitted,
            len(svg),
            elapsed,
        )
        return RenderResult(
            generator_id=generator_id,
            result=result,
            flattened=flattened,
            svg=svg,
            elapsed_ms=round(elapsed, 3),
            path_count=emitted,
        )

    def render_preset(
        self,
        preset: ControllerParams,
        part: PresetPart = "flow",
        options: SvgRenderOptions | None = None,
        *,
        viewport: tuple[float, float] | None = None,
    ) -> RenderResult:
        generator_id, params = preset.part(part)
        return self.render(generator_id, params, options, viewport=viewport)


def create_pipeline(default_options: SvgRenderOptions | None = None) -> Pipeline:
    """Factory function for creating a pipeline instance."""
    return Pipeline(default_options=default_options)
