"""Plate 1 — blank block, geometric manipulation, central medallion.

Geometry is authored in [-1, 1]²; the root transform maps that square onto the
requested ``width × height`` with the origin at the top-left corner.

    step 0   container border
    step 1   + subdivision grid
    step 2   + diagonal and secondary axes
    step 3+  + radiating stems and medallion
"""

from __future__ import annotations

import logging
import math

from sullivan.engine.registry import generator
from sullivan.engine.scene import NodeType, OrnamentNode, OrnamentResult, count_nodes, make_bounds
from sullivan.geometry.curves import clamp, clamp01, round_half_up
from sullivan.geometry.primitives import Path, Transform, ellipse_path, line_path, rect_path
from sullivan.generators.leaf import LeafParams
from sullivan.generators.stem import create_stem_with_leaves
from sullivan.models.params import PlateParams

logger = logging.getLogger(__name__)

_DIAGONAL_REACH = 1.05
_SECONDARY_REACH = 0.98
# Maximum diagonal twist at full symmetry bias (~12.8°).
_DIAGONAL_TWIST = math.pi / 14
_SECONDARY_SKEW = math.pi / 32

# (arm name, angle) for the four medallion petals.
_PETAL_ARMS = (
    ("right", 0.0),
    ("top", math.pi / 2),
    ("left", math.pi),
    ("bottom", 3 * math.pi / 2),
)


def axis_path(angle: float, reach: float) -> Path:
    """Line through the origin at ``angle``, scaled so its longer component equals ``reach``."""
    dx = math.cos(angle)
    dy = math.sin(angle)
    limit = reach / (max(abs(dx), abs(dy)) or 1.0)
    return line_path(-dx * limit, -dy * limit, dx * limit, dy * limit)


def create_grid_node(subdivisions: int) -> OrnamentNode:
    node = OrnamentNode(
        id="grid",
        type=NodeType.AUXILIARY,
        plate_origin=1,
        step_in_plate=1,
        role="grid",
        params={"subdivisions": subdivisions},
    )
    for i in range(1, subdivisions):
        t = -1 + 2 * i / subdivisions
        node.paths.append(line_path(t, -1, t, 1))
        node.paths.append(line_path(-1, t, 1, t))
    return node


def create_diagonal_axes_node(symmetry_bias: float) -> OrnamentNode:
    node = OrnamentNode(
        id="axes-diagonal",
        type=NodeType.AXIS,
        plate_origin=1,
        step_in_plate=2,
        role="diagonal-axis",
        params={"symmetryBias": symmetry_bias},
    )
    twist = symmetry_bias * _DIAGONAL_TWIST
    node.paths.append(axis_path(math.pi / 4 + twist, _DIAGONAL_REACH))
    node.paths.append(axis_path(3 * math.pi / 4 - twist, _DIAGONAL_REACH))
    return node


def create_secondary_axes_node(pairs: int, symmetry_bias: float) -> OrnamentNode | None:
    """Axis pairs interleaved between the cardinal grid and the diagonals."""
    if pairs <= 0:
        return None

    node = OrnamentNode(
        id="axes-secondary",
        type=NodeType.AXIS,
        plate_origin=1,
        step_in_plate=2,
        role="secondary-axis",
        params={"pairs": pairs, "symmetryBias": symmetry_bias},
    )
    skew = _SECONDARY_SKEW * symmetry_bias
    for i in range(pairs):
        offset = (i + 1) / (pairs + 1) * (math.pi / 4)
        node.paths.append(axis_path(offset + skew, _SECONDARY_REACH))
        node.paths.append(axis_path(offset + math.pi / 2 - skew, _SECONDARY_REACH))
    return node


def stem_leaf_params(
    normalized_radius: float,
    symmetry_bias: float,
    side: int,
    emphasize_tip: bool,
) -> LeafParams:
    """Leaf endpoint for one stem: the base set (A) or the tip-emphasised set (B)."""
    nr = normalized_radius
    b = symmetry_bias
    return LeafParams(
        length=clamp((0.28 if emphasize_tip else 0.18) + nr * 0.45, 0.12, 0.95),
        width=clamp((0.12 if emphasize_tip else 0.09) + nr * 0.25, 0.05, 0.4),
        tip_sharpness=clamp01((0.55 if emphasize_tip else 0.4) + b * 0.3),
        base_taper=clamp01((0.35 if emphasize_tip else 0.6) + b * 0.15),
        asymmetry=clamp01(0.45 + side * 0.15 * b),
        lobes=clamp01((0.25 if emphasize_tip else 0.1) + nr * 0.4),
        serration=clamp01((0.3 if emphasize_tip else 0.12) + b * 0.35),
        curvature=clamp((-0.05 if emphasize_tip else -0.12) - side * 0.25 + b * 0.2, -0.75, 0.75),
    )


def create_stems_node(count: int, stem_length: float, symmetry_bias: float) -> OrnamentNode | None:
    if count <= 0:
        return None

    node = OrnamentNode(
        id="radiating-stems",
        type=NodeType.STEM,
        plate_origin=1,
        step_in_plate=3,
        role="medallion-stem",
        params={"count": count, "stemLength": stem_length, "symmetryBias": symmetry_bias},
    )

    for i in range(count):
        alternating = -1 if i % 2 == 0 else 1
        angle = 2 * math.pi * i / count + alternating * symmetry_bias * 0.2
        jitter = clamp(1 - symmetry_bias * 0.25 + alternating * symmetry_bias * 0.15, 0.35, 1.2)
        radius = stem_length * jitter

        axis = OrnamentNode(
            id=f"stem-axis-{i}",
            type=NodeType.AXIS,
            plate_origin=1,
            step_in_plate=3,
            role="stem-axis",
            params={"angle": angle, "radius": radius},
            paths=[line_path(0, 0, math.cos(angle) * radius, math.sin(angle) * radius)],
        )

        nr = clamp01(radius)
        curve_bias = clamp01(0.25 + nr * 0.5 + symmetry_bias * 0.25)
        curve_variation = (i % 3 - 1) * 0.08

        node.children.append(
            create_stem_with_leaves(
                f"radiating-stem-{i}",
                axis,
                stem_leaf_params(nr, symmetry_bias, alternating, emphasize_tip=False),
                stem_leaf_params(nr, symmetry_bias, alternating, emphasize_tip=True),
                max(3, round_half_up(3 + nr * 5)),
                curve_amount=clamp01(curve_bias + curve_variation),
                side=1 if alternating >= 0 else -1,
                leaf_offset=0.035 + nr * 0.05,
            )
        )

    return node


def create_medallion_node(radius: float) -> OrnamentNode:
    """Central circle with four petals pushed out along the cardinal directions."""
    node = OrnamentNode(
        id="medallion",
        type=NodeType.MEDALLION,
        plate_origin=1,
        step_in_plate=3,
        role="central-medallion",
        params={"radius": radius},
        paths=[ellipse_path(radius * 0.55, radius * 0.55)],
    )

    petal = ellipse_path(radius * 0.75, radius * 0.35)
    for arm, angle in _PETAL_ARMS:
        node.children.append(
            OrnamentNode(
                id=f"medallion-petal-{arm}",
                type=NodeType.MEDALLION,
                plate_origin=1,
                step_in_plate=3,
                role="medallion-petal",
                params={"arm": arm, "angle": angle},
                transform=Transform(
                    tx=math.cos(angle) * radius,
                    ty=math.sin(angle) * radius,
                    rotation=angle,
                ),
                paths=[petal],
            )
        )
    return node


@generator(
    id="plate",
    params=PlateParams,
    description="Plate 1: container, grid, axes, radiating stems and central medallion",
    tags={"plate-1"},
)
def generate_plate(params: PlateParams) -> OrnamentResult:
    step = params.step
    root = OrnamentNode(
        id="root-container",
        type=NodeType.CONTAINER,
        plate_origin=1,
        step_in_plate=step,
        role="panel",
        paths=[rect_path(-1, -1, 2, 2)],
        transform=Transform(
            tx=params.width / 2,
            ty=params.height / 2,
            scale_x=params.width / 2,
            scale_y=params.height / 2,
        ),
    )

    if step >= 1:
        root.children.append(create_grid_node(params.subdivisions))

    if step >= 2:
        root.children.append(create_diagonal_axes_node(params.symmetry_bias))
        secondary = create_secondary_axes_node(params.secondary_axis_pairs, params.symmetry_bias)
        if secondary is not None:
            root.children.append(secondary)

    if step >= 3:
        stems = create_stems_node(params.stem_count, params.stem_length, params.symmetry_bias)
        if stems is not None:
            root.children.append(stems)
        root.children.append(create_medallion_node(params.medallion_radius))

    logger.debug("Plate step %d: %d nodes", step, count_nodes(root))
    return OrnamentResult(root=root, bounds=make_bounds(0, 0, params.width, params.height))
