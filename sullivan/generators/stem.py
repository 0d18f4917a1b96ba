"""Stem-with-leaves — bow a straight axis into a quadratic stem and hang morphing leaves on it."""

from __future__ import annotations

import logging
import math
from typing import Literal

from sullivan.engine.scene import NodeType, OrnamentNode
from sullivan.errors import ConstructionError
from sullivan.geometry.curves import clamp01, normalize, quad_point, quad_tangent
from sullivan.geometry.primitives import LineTo, MoveTo, Path, Transform, Vec2, move_to, quad_to
from sullivan.generators.leaf import LeafParams, leaf_params_to_path, morph_leaf_params

logger = logging.getLogger(__name__)


def _axis_endpoints(axis: OrnamentNode) -> tuple[Vec2, Vec2]:
    if len(axis.paths) != 1 or len(axis.paths[0].commands) != 2:
        raise ConstructionError(f"Stem axis {axis.id!r} must be a single MoveTo → LineTo path")
    start, end = axis.paths[0].commands
    if not isinstance(start, MoveTo) or not isinstance(end, LineTo):
        raise ConstructionError(f"Stem axis {axis.id!r} must be a straight line (MoveTo → LineTo)")
    return start.p, end.p


def create_stem_with_leaves(
    id: str,
    axis: OrnamentNode,
    leaf_a: LeafParams,
    leaf_b: LeafParams,
    leaf_count: int,
    *,
    curve_amount: float = 0.4,
    side: Literal[1, -1] = 1,
    leaf_offset: float = 0.04,
) -> OrnamentNode:
    """Stem node whose children are ``leaf_count`` leaves spaced evenly along the curve.

    Leaf i sits at t = i / (n + 1), pushed ``leaf_offset`` off the stem along the
    normal and rotated so its base → tip direction follows the tangent. Its
    parameters are ``leaf_a`` morphed toward ``leaf_b`` by t.
    """
    p0, p1 = _axis_endpoints(axis)

    dx = p1.x - p0.x
    dy = p1.y - p0.y
    length = math.hypot(dx, dy) or 1.0

    curve_amount = clamp01(curve_amount)
    side = -1 if side == -1 else 1
    leaf_offset = max(0.0, leaf_offset)

    ux, uy = dx / length, dy / length
    nx, ny = -uy * side, ux * side
    bow = curve_amount * length / 2
    control = Vec2((p0.x + p1.x) / 2 + nx * bow, (p0.y + p1.y) / 2 + ny * bow)

    stem = OrnamentNode(
        id=id,
        type=NodeType.STEM,
        plate_origin=axis.plate_origin if axis.plate_origin is not None else 1,
        step_in_plate=axis.step_in_plate if axis.step_in_plate is not None else 3,
        role="flowing-stem",
        params={"curveAmount": curve_amount, "side": side, "leafCount": leaf_count},
        paths=[Path((move_to(p0.x, p0.y), quad_to(control.x, control.y, p1.x, p1.y)))],
    )

    count = max(0, math.floor(leaf_count))
    for i in range(1, count + 1):
        t = i / (count + 1)
        pos = quad_point(p0, control, p1, t)
        tangent = normalize(quad_tangent(p0, control, p1, t))
        normal = Vec2(-tangent.y * side, tangent.x * side)

        leaf = OrnamentNode(
            id=f"{id}-leaf-{i}",
            type=NodeType.LEAF,
            plate_origin=2,
            step_in_plate=i,
            role="stem-leaf",
            params={"t": t},
            # Leaves grow along +y locally; rotate that onto the tangent.
            transform=Transform(
                tx=pos.x + normal.x * leaf_offset,
                ty=pos.y + normal.y * leaf_offset,
                rotation=math.atan2(tangent.y, tangent.x) - math.pi / 2,
            ),
            paths=[leaf_params_to_path(morph_leaf_params(leaf_a, leaf_b, t))],
        )
        stem.children.append(leaf)

    logger.debug("Stem %s: %d leaves", id, count)
    return stem
