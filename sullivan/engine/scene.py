"""Scene graph — ornament nodes and the generator result.

Nodes own their paths (local space) and their children. Trees are strictly
nested: no back-references, no shared subtrees, so traversal needs no
visited-set bookkeeping.
"""

from __future__ import annotations

import enum
from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Union

from sullivan.geometry.primitives import (
    ClosePath,
    CubicTo,
    LineTo,
    MoveTo,
    Path,
    PathCommand,
    QuadTo,
    Rect,
    Transform,
    Vec2,
    identity_transform,
)

# Smallest width/height a result's bounds may have. Viewports built from
# bounds are never degenerate.
BOUNDS_FLOOR = 1.0

ParamValue = Union[bool, int, float, str]


class NodeType(str, enum.Enum):
    CONTAINER = "container"
    AXIS = "axis"
    STEM = "stem"
    LEAF = "leaf"
    MEDALLION = "medallion"
    OVERLAY = "overlay"
    AUXILIARY = "auxiliary"


@dataclass
class OrnamentNode:
    """One element of the ornament tree."""

    id: str
    type: NodeType
    # Provenance only: which plate / step produced this node.
    plate_origin: int | None = None
    step_in_plate: int | None = None
    # Free-form semantic tag, e.g. "grid", "medallion-petal".
    role: str | None = None
    # Descriptive metadata; never read by flattening or serialization.
    params: dict[str, ParamValue] = field(default_factory=dict)
    transform: Transform = field(default_factory=identity_transform)
    paths: list[Path] = field(default_factory=list)
    children: list[OrnamentNode] = field(default_factory=list)

    def walk(self) -> Iterator[OrnamentNode]:
        """Pre-order traversal: self, then each child subtree in order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def find(self, node_id: str) -> OrnamentNode | None:
        for node in self.walk():
            if node.id == node_id:
                return node
        return None

    def find_role(self, role: str) -> list[OrnamentNode]:
        return [node for node in self.walk() if node.role == role]

    @property
    def is_empty(self) -> bool:
        return not self.paths and not self.children


@dataclass
class OrnamentResult:
    root: OrnamentNode
    # Advisory viewport, computed from generator parameters rather than from
    # actual geometry extents.
    bounds: Rect


def make_bounds(x: float, y: float, width: float, height: float) -> Rect:
    """Bounds rect with both dimensions floored at BOUNDS_FLOOR."""
    return Rect(x, y, max(width, BOUNDS_FLOOR), max(height, BOUNDS_FLOOR))


def square_bounds(extent: float) -> Rect:
    """Origin-centred square spanning [-extent, extent]²."""
    extent = max(extent, BOUNDS_FLOOR / 2)
    return make_bounds(-extent, -extent, extent * 2, extent * 2)


def count_nodes(root: OrnamentNode) -> int:
    return sum(1 for _ in root.walk())


def count_paths(root: OrnamentNode) -> int:
    return sum(len(node.paths) for node in root.walk())


def summarize(root: OrnamentNode) -> dict[str, int]:
    """Node count per role (nodes without a role are grouped under their type)."""
    counts: Counter[str] = Counter()
    for node in root.walk():
        counts[node.role or node.type.value] += 1
    return dict(sorted(counts.items()))


def scale_to_viewport(result: OrnamentResult, width: float, height: float) -> OrnamentResult:
    """Fit a result's bounds into a ``width × height`` pixel frame, preserving aspect.

    The original tree is wrapped, not modified.
    """
    width = max(width, BOUNDS_FLOOR)
    height = max(height, BOUNDS_FLOOR)
    b = result.bounds
    scale = min(width / b.width, height / b.height)
    cx = b.x + b.width / 2
    cy = b.y + b.height / 2

    viewport = OrnamentNode(
        id="viewport",
        type=NodeType.CONTAINER,
        role="viewport",
        params={"width": width, "height": height, "scale": scale},
        transform=Transform(
            tx=width / 2 - cx * scale,
            ty=height / 2 - cy * scale,
            scale_x=scale,
            scale_y=scale,
        ),
        children=[result.root],
    )
    return OrnamentResult(root=viewport, bounds=make_bounds(0, 0, width, height))


def _point(p: Vec2) -> dict[str, float]:
    return {"x": p.x, "y": p.y}


def command_to_dict(cmd: PathCommand) -> dict[str, Any]:
    if isinstance(cmd, MoveTo):
        return {"type": "M", "p": _point(cmd.p)}
    if isinstance(cmd, LineTo):
        return {"type": "L", "p": _point(cmd.p)}
    if isinstance(cmd, QuadTo):
        return {"type": "Q", "p1": _point(cmd.p1), "p": _point(cmd.p)}
    if isinstance(cmd, CubicTo):
        return {"type": "C", "p1": _point(cmd.p1), "p2": _point(cmd.p2), "p": _point(cmd.p)}
    if isinstance(cmd, ClosePath):
        return {"type": "Z"}
    raise TypeError(f"Unknown path command: {cmd!r}")


def node_to_dict(node: OrnamentNode) -> dict[str, Any]:
    """JSON-ready view of a subtree, local coordinates, camelCase keys."""
    t = node.transform
    return {
        "id": node.id,
        "type": node.type.value,
        "plateOrigin": node.plate_origin,
        "stepInPlate": node.step_in_plate,
        "role": node.role,
        "params": dict(node.params),
        "transform": {
            "tx": t.tx,
            "ty": t.ty,
            "rotation": t.rotation,
            "scaleX": t.scale_x,
            "scaleY": t.scale_y,
        },
        "paths": [
            {"commands": [command_to_dict(c) for c in p.commands], "closed": p.closed}
            for p in node.paths
        ],
        "children": [node_to_dict(child) for child in node.children],
    }
