"""Leaf generator — profile-driven outline and midrib, plus the simplified stem-leaf parameters.

Leaf-local space: base at the origin, tip at (spine, length), y up. The outline
traces the left edge base → tip, then the right edge tip → base, then closes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sullivan.engine.registry import generator
from sullivan.engine.scene import NodeType, OrnamentNode, OrnamentResult, make_bounds
from sullivan.errors import ConstructionError
from sullivan.geometry.curves import clamp, clamp01, clamp_int, lerp, round_half_up
from sullivan.geometry.primitives import (
    Path,
    PathCommand,
    Transform,
    close_path,
    line_to,
    move_to,
)
from sullivan.geometry.profile import (
    CORDATE,
    LANCEOLATE,
    OVATE,
    LeafProfile,
    sample_width_at,
)
from sullivan.models.params import LeafSceneParams

logger = logging.getLogger(__name__)

MIN_RESOLUTION = 6
MAX_RESOLUTION = 512

# Pinch never collapses the outline below this fraction of the profile width.
_MIN_PINCH = 0.1
_BASE_PINCH = 0.35
_TIP_PINCH = 0.55


@dataclass(frozen=True, slots=True)
class LeafGeometry:
    outline: Path
    midrib: Path


@dataclass(frozen=True, slots=True)
class LeafParams:
    """Coarse, slider-friendly leaf description used for stem leaves."""

    length: float = 0.4
    width: float = 0.2
    tip_sharpness: float = 0.5
    base_taper: float = 0.5
    asymmetry: float = 0.5
    lobes: float = 0.0
    serration: float = 0.0
    curvature: float = 0.2


DEFAULT_LEAF_PARAMS = LeafParams()


def spine_offset(t: float, curvature: float, length: float) -> float:
    """Sideways midrib displacement: zero at base and tip, largest at t = 0.5."""
    return curvature * (t - t * t) * length


def shape_pinch(t: float, base_pull: float, tip_pull: float, bias: float) -> float:
    base = 1 - (1 - clamp01(base_pull)) ** (bias + 0.5) * (1 - t) * _BASE_PINCH
    tip = 1 - (1 - clamp01(tip_pull)) ** (bias + 0.5) * t * _TIP_PINCH
    return max(_MIN_PINCH, base * tip)


def _build_outline(
    profile: LeafProfile,
    length: float,
    max_width: float,
    curvature: float,
    pull_bias: float,
    resolution: int,
) -> Path:
    left: list[tuple[float, float]] = []
    right: list[tuple[float, float]] = []

    for i in range(resolution + 1):
        t = i / resolution
        half_width = max_width * sample_width_at(profile, t) * shape_pinch(
            t, profile.base_pull, profile.tip_pull, pull_bias
        )
        y = length * t
        mid_x = spine_offset(t, curvature, length)
        left.append((mid_x - half_width, y))
        right.append((mid_x + half_width, y))

    commands: list[PathCommand] = [move_to(*left[0])]
    commands.extend(line_to(x, y) for x, y in left[1:])
    commands.extend(line_to(x, y) for x, y in reversed(right))
    commands.append(close_path())
    return Path(tuple(commands), closed=True)


def _build_midrib(length: float, curvature: float, resolution: int) -> Path:
    commands: list[PathCommand] = [move_to(spine_offset(0, curvature, length), 0)]
    for i in range(1, resolution + 1):
        t = i / resolution
        commands.append(line_to(spine_offset(t, curvature, length), length * t))
    return Path(tuple(commands), closed=False)


def create_leaf_geometry(
    profile: LeafProfile | None = None,
    *,
    length: float = 1.0,
    max_width: float = 0.6,
    curvature: float = 0.0,
    pull_bias: float = 0.6,
    resolution: int = 48,
) -> LeafGeometry:
    """Outline + midrib for one leaf. Curvature, bias and resolution are clamped."""
    profile = profile or OVATE
    curvature = clamp(curvature, -0.85, 0.85)
    pull_bias = clamp01(pull_bias)
    resolution = clamp_int(resolution, MIN_RESOLUTION, MAX_RESOLUTION)

    return LeafGeometry(
        outline=_build_outline(profile, length, max_width, curvature, pull_bias, resolution),
        midrib=_build_midrib(length, curvature, resolution),
    )


def create_leaf_node(
    profile: LeafProfile | None = None,
    *,
    length: float = 1.0,
    max_width: float = 0.6,
    curvature: float = 0.0,
    pull_bias: float = 0.6,
    resolution: int = 48,
    transform: Transform | None = None,
) -> OrnamentNode:
    profile = profile or OVATE
    geometry = create_leaf_geometry(
        profile,
        length=length,
        max_width=max_width,
        curvature=curvature,
        pull_bias=pull_bias,
        resolution=resolution,
    )
    return OrnamentNode(
        id=f"leaf-{profile.id}",
        type=NodeType.LEAF,
        plate_origin=2,
        step_in_plate=2,
        role="leaf-outline",
        params={
            "profile": profile.id,
            "curvature": curvature,
            "length": length,
            "maxWidth": max_width,
        },
        transform=transform or Transform(),
        paths=[geometry.outline, geometry.midrib],
    )


# ── Simplified stem-leaf parameters ───────────────────────────────────────


def morph_leaf_params(a: LeafParams, b: LeafParams, alpha: float) -> LeafParams:
    """Field-wise lerp of two parameter sets; alpha is clamped to [0, 1]."""
    t = clamp01(alpha)
    return LeafParams(
        length=lerp(a.length, b.length, t),
        width=lerp(a.width, b.width, t),
        tip_sharpness=lerp(a.tip_sharpness, b.tip_sharpness, t),
        base_taper=lerp(a.base_taper, b.base_taper, t),
        asymmetry=lerp(a.asymmetry, b.asymmetry, t),
        lobes=lerp(a.lobes, b.lobes, t),
        serration=lerp(a.serration, b.serration, t),
        curvature=lerp(a.curvature, b.curvature, t),
    )


def select_profile(params: LeafParams) -> LeafProfile:
    if params.lobes > 0.65:
        return CORDATE
    if params.tip_sharpness > 0.6:
        return LANCEOLATE
    return OVATE


def leaf_params_to_path(params: LeafParams) -> Path:
    """Outline for a simplified parameter set."""
    geometry = create_leaf_geometry(
        select_profile(params),
        length=clamp(params.length, 0.1, 1.5),
        max_width=clamp(params.width, 0.05, 0.8),
        curvature=params.curvature + (clamp01(params.asymmetry) - 0.5) * 0.25,
        pull_bias=0.35 + params.tip_sharpness * 0.4 - params.base_taper * 0.25,
        resolution=48 + round_half_up(clamp01(params.serration) * 24),
    )
    return geometry.outline


# ── Scene generator ───────────────────────────────────────────────────────


@generator(
    id="leaf",
    params=LeafSceneParams,
    description="Single leaf outline and midrib, optionally morphed between two profiles",
    tags={"plate-2"},
)
def generate_leaf(params: LeafSceneParams) -> OrnamentResult:
    try:
        profile = params.resolved_profile()
    except ValueError as exc:
        raise ConstructionError(str(exc)) from exc

    # Base near the bottom edge, tip toward the top: y is flipped.
    node = create_leaf_node(
        profile,
        length=params.length,
        max_width=params.max_width,
        curvature=params.curvature,
        pull_bias=params.pull_bias,
        resolution=params.resolution,
        transform=Transform(
            tx=params.width / 2,
            ty=params.height * 0.9,
            scale_x=params.width * 0.35,
            scale_y=-params.height * 0.82,
        ),
    )
    logger.debug("Leaf %s: %d outline commands", node.id, len(node.paths[0].commands))
    return OrnamentResult(root=node, bounds=make_bounds(0, 0, params.width, params.height))
