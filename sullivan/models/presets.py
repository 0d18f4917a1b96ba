"""Controller presets — the full slider state, saved and loaded as versioned JSON."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Literal

from pydantic import Field

from sullivan.models.params import (
    Clamped,
    FlooredInt,
    LeafSceneParams,
    ParamsModel,
    PlateParams,
    RadialFlowSettings,
    SquareSettings,
)

logger = logging.getLogger(__name__)

PRESET_VERSION = 1

PresetPart = Literal["flow", "square", "leaf", "plate"]


def default_square_settings() -> SquareSettings:
    return SquareSettings.from_step(7)


def default_flow_settings() -> RadialFlowSettings:
    return RadialFlowSettings(
        show_base_circle=True,
        show_cross=True,
        circle_radius=0.72,
        push_motif="diamond",
        sub_center_radius=0.3,
    )


class ControllerParams(ParamsModel):
    """Everything the controller window exposes."""

    # Plate-style preset slider; higher steps enable more motifs.
    step: Annotated[int, FlooredInt(0, 7)] = 7
    leaf_morph_alpha: Annotated[float, Clamped(0.0, 1.0)] = 0.35
    square: SquareSettings = Field(default_factory=default_square_settings)
    flow: RadialFlowSettings = Field(default_factory=default_flow_settings)

    def apply_step(self, step: int) -> ControllerParams:
        """Copy with ``step`` set and the square toggles reset to that step's preset."""
        square = SquareSettings.from_step(
            step,
            inner_margin=self.square.inner_margin,
            subdivisions=self.square.subdivisions,
        )
        return self.model_copy(update={"step": step, "square": square})

    def plate_params(self) -> PlateParams:
        return PlateParams(step=self.step)

    def leaf_params(self) -> LeafSceneParams:
        """Lanceolate leaf blended toward ovate by ``leaf_morph_alpha``."""
        return LeafSceneParams(
            profile="lanceolate",
            morph_target="ovate",
            morph_alpha=self.leaf_morph_alpha,
            max_width=0.62,
            curvature=0.18,
            pull_bias=0.65,
            resolution=64,
        )

    def part(self, name: PresetPart) -> tuple[str, ParamsModel]:
        """(generator id, params) for one part of the preset."""
        if name == "flow":
            return "radial-flow", self.flow
        if name == "square":
            return "square", self.square
        if name == "leaf":
            return "leaf", self.leaf_params()
        if name == "plate":
            return "plate", self.plate_params()
        raise ValueError(f"Unknown preset part: {name!r}")


class PresetFile(ParamsModel):
    version: int = PRESET_VERSION
    params: ControllerParams = Field(default_factory=ControllerParams)


def default_controller_params() -> ControllerParams:
    return ControllerParams()


def dump_preset(params: ControllerParams, *, indent: int | None = 2) -> str:
    return PresetFile(params=params).model_dump_json(by_alias=True, indent=indent)


def load_preset(text: str | bytes) -> ControllerParams:
    """Parse preset JSON. Accepts a ``{version, params}`` file or bare controller params."""
    data = json.loads(text)
    if isinstance(data, dict) and "params" in data:
        preset = PresetFile.model_validate(data)
        if preset.version != PRESET_VERSION:
            logger.warning("Preset version %s, expected %s", preset.version, PRESET_VERSION)
        return preset.params
    return ControllerParams.model_validate(data)


def read_preset_file(path: str | Path) -> ControllerParams:
    return load_preset(Path(path).read_text(encoding="utf-8"))


def write_preset_file(path: str | Path, params: ControllerParams) -> None:
    Path(path).write_text(dump_preset(params) + "\n", encoding="utf-8")
