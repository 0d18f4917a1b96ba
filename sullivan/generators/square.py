"""Inorganic square — construction study over the fixed [-1, 1]² canvas.

Frames are owned directly by the root; every other element is its own
auxiliary child, so each toggle gates exactly one subtree.
"""

from __future__ import annotations

import logging
import math

from sullivan.engine.registry import generator
from sullivan.engine.scene import NodeType, OrnamentNode, OrnamentResult, make_bounds
from sullivan.geometry.primitives import Path, Vec2, ellipse_path, line_path, polygon_path, rect_path
from sullivan.models.params import SquareSettings

logger = logging.getLogger(__name__)


def _auxiliary(id: str, paths: list[Path], **params: float) -> OrnamentNode:
    return OrnamentNode(
        id=id,
        type=NodeType.AUXILIARY,
        plate_origin=1,
        step_in_plate=0,
        role=id,
        params=dict(params),
        paths=paths,
    )


def subdivision_grid_node(subdivisions: int) -> OrnamentNode:
    n = max(2, subdivisions)
    paths: list[Path] = []
    for i in range(1, n):
        t = -1 + 2 * i / n
        paths.append(line_path(t, -1, t, 1))
        paths.append(line_path(-1, t, 1, t))
    node = _auxiliary("subdivision-grid", paths, subdivisions=n)
    node.role = "grid"
    return node


def diamond_path() -> Path:
    """Square rotated 45°, vertices on the axes at distance 1/√2."""
    k = 1 / math.sqrt(2)
    return polygon_path([Vec2(0, -k), Vec2(k, 0), Vec2(0, k), Vec2(-k, 0)])


@generator(
    id="square",
    params=SquareSettings,
    description="Inorganic square: frames, cross, diagonals, grid, circle, diamond, arcs",
    tags={"plate-1"},
)
def generate_square(settings: SquareSettings) -> OrnamentResult:
    root = OrnamentNode(
        id="inorganic-square-root",
        type=NodeType.CONTAINER,
        plate_origin=1,
        step_in_plate=0,
        role="panel",
    )
    margin = settings.inner_margin

    if settings.show_outer_frame:
        root.paths.append(rect_path(-1, -1, 2, 2))

    if settings.show_inner_frame:
        size = 2 - 2 * margin
        root.paths.append(rect_path(-1 + margin, -1 + margin, size, size))

    if settings.show_center_cross:
        root.children.append(
            _auxiliary("center-cross", [line_path(-1, 0, 1, 0), line_path(0, -1, 0, 1)])
        )

    if settings.show_diagonals:
        root.children.append(
            _auxiliary("diagonals", [line_path(-1, -1, 1, 1), line_path(-1, 1, 1, -1)])
        )

    if settings.show_subdivision_grid:
        root.children.append(subdivision_grid_node(settings.subdivisions))

    if settings.show_inscribed_circle:
        # Touches the inner frame when it is shown, the outer frame otherwise.
        r = 1 - margin if settings.show_inner_frame else 1.0
        root.children.append(_auxiliary("inscribed-circle", [ellipse_path(r, r)], r=r))

    if settings.show_diamond_square:
        root.children.append(_auxiliary("diamond-square", [diamond_path()]))

    if settings.show_quarter_arcs:
        # Straight chords between adjacent side midpoints.
        root.children.append(
            _auxiliary(
                "quarter-arcs",
                [
                    line_path(0, -1, 1, 0),
                    line_path(1, 0, 0, 1),
                    line_path(0, 1, -1, 0),
                    line_path(-1, 0, 0, -1),
                ],
            )
        )

    logger.debug("Square: %d root paths, %d children", len(root.paths), len(root.children))
    return OrnamentResult(root=root, bounds=make_bounds(-1, -1, 2, 2))
