"""Flattening — compose ancestor transforms and emit absolute-space paths.

Pre-order walk: a node's own paths come before its children's, children in
array order. Nothing is filtered here; dropping construction lines is the
serializer's job.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from sullivan.engine.scene import NodeType, OrnamentNode, OrnamentResult
from sullivan.geometry import affine
from sullivan.geometry.primitives import (
    ClosePath,
    CubicTo,
    LineTo,
    MoveTo,
    PathCommand,
    QuadTo,
    Rect,
    command_points,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FlattenedPath:
    """One owned path mapped into world space, tagged with its originating node."""

    commands: tuple[PathCommand, ...]
    closed: bool
    node_type: NodeType
    node_id: str
    role: str | None = None

    @property
    def has_close_command(self) -> bool:
        return bool(self.commands) and isinstance(self.commands[-1], ClosePath)


def map_command(m: NDArray[np.float64], cmd: PathCommand) -> PathCommand:
    """Map every coordinate of ``cmd`` through ``m``. ClosePath carries none."""
    if isinstance(cmd, MoveTo):
        return MoveTo(affine.apply(m, cmd.p))
    if isinstance(cmd, LineTo):
        return LineTo(affine.apply(m, cmd.p))
    if isinstance(cmd, QuadTo):
        return QuadTo(affine.apply(m, cmd.p1), affine.apply(m, cmd.p))
    if isinstance(cmd, CubicTo):
        return CubicTo(affine.apply(m, cmd.p1), affine.apply(m, cmd.p2), affine.apply(m, cmd.p))
    if isinstance(cmd, ClosePath):
        return cmd
    raise TypeError(f"Unknown path command: {cmd!r}")


def flatten_node(
    node: OrnamentNode,
    parent_matrix: NDArray[np.float64],
    out: list[FlattenedPath],
) -> None:
    combined = affine.compose(parent_matrix, affine.matrix_from_transform(node.transform))

    for path in node.paths:
        out.append(
            FlattenedPath(
                commands=tuple(map_command(combined, cmd) for cmd in path.commands),
                closed=path.closed,
                node_type=node.type,
                node_id=node.id,
                role=node.role,
            )
        )

    for child in node.children:
        flatten_node(child, combined, out)


def flatten(result: OrnamentResult | OrnamentNode) -> list[FlattenedPath]:
    """Flatten a whole tree into world-space paths in document order."""
    root = result.root if isinstance(result, OrnamentResult) else result
    out: list[FlattenedPath] = []
    flatten_node(root, affine.IDENTITY, out)
    logger.debug("Flattened %s: %d paths", root.id, len(out))
    return out


def flattened_extent(paths: list[FlattenedPath]) -> Rect | None:
    """Axis-aligned box of every coordinate (control points included), or None if empty."""
    coords = [(p.x, p.y) for fp in paths for cmd in fp.commands for p in command_points(cmd)]
    if not coords:
        return None
    pts = np.array(coords, dtype=np.float64)
    xmin, ymin = pts.min(axis=0)
    xmax, ymax = pts.max(axis=0)
    return Rect(float(xmin), float(ymin), float(xmax - xmin), float(ymax - ymin))
