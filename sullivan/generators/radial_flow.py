"""Radial flow — circle → polygon → energy lines → sub-centers, plus an ornament layer.

Two layer containers under the root:

    flow-structure   base circle, cross, dividing polygon, radials, sub-centers
    flow-ornament    push/pull motifs, node and edge decorations, line diamonds

A layer with nothing in it is left out of the tree. Everything is authored
around the origin; bounds are a square estimated from the parameters.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from sullivan.engine.registry import generator
from sullivan.engine.scene import (
    NodeType,
    OrnamentNode,
    OrnamentResult,
    count_nodes,
    square_bounds,
)
from sullivan.geometry.curves import clamp_int, deg_to_rad, polar, round_half_up
from sullivan.geometry.primitives import (
    Path,
    Transform,
    Vec2,
    ellipse_path,
    line_path,
    move_to,
    polygon_path,
    quad_to,
    rect_path,
)
from sullivan.models.params import EdgeDecorationStyle, NodeDecorationType, PushMotif, RadialFlowSettings

logger = logging.getLogger(__name__)

MAX_RADIALS = 96
# Each sub-center level shrinks the radius by this factor.
SUB_CENTER_RATIO = 0.6
# Bounds never shrink below ±MIN_EXTENT, whatever the radius.
MIN_EXTENT = 1.6
RADIAL_REACH = 1.08


@dataclass(frozen=True, slots=True)
class Ray:
    angle: float
    direction: Vec2
    normal: Vec2
    end: Vec2


def ray_angles(count: int, rotation: float) -> list[float]:
    return [rotation + 2 * math.pi * i / count for i in range(count)]


def build_rays(count: int, rotation: float, radius: float) -> list[Ray]:
    rays = []
    for angle in ray_angles(count, rotation):
        d = polar(1.0, angle)
        rays.append(Ray(angle, d, Vec2(-d.y, d.x), Vec2(d.x * radius, d.y * radius)))
    return rays


def polygon_vertices(radius: float, sides: int, rotation: float) -> list[Vec2]:
    return [polar(radius, angle) for angle in ray_angles(sides, rotation)]


def _node(
    id: str,
    type: NodeType,
    role: str,
    step: int,
    *,
    paths: list[Path] | None = None,
    transform: Transform | None = None,
    **params,
) -> OrnamentNode:
    return OrnamentNode(
        id=id,
        type=type,
        plate_origin=1,
        step_in_plate=step,
        role=role,
        params=dict(params),
        transform=transform or Transform(),
        paths=paths or [],
    )


# ── Structural layer ──────────────────────────────────────────────────────


def create_cross_node(radius: float) -> OrnamentNode:
    reach = max(radius * 1.35, radius + 0.2)
    return _node(
        "flow-cross",
        NodeType.AXIS,
        "circle-cross",
        1,
        paths=[line_path(-reach, 0, reach, 0), line_path(0, -reach, 0, reach)],
    )


def create_polygon_node(vertices: list[Vec2]) -> OrnamentNode:
    return _node(
        "flow-dividing-polygon",
        NodeType.AUXILIARY,
        "dividing-polygon",
        1,
        paths=[polygon_path(vertices)],
        sides=len(vertices),
    )


def create_radials_node(radius: float, count: int, rotation: float) -> OrnamentNode:
    reach = radius * RADIAL_REACH
    paths = [line_path(0, 0, *_xy(polar(reach, angle))) for angle in ray_angles(count, rotation)]
    return _node("flow-radials", NodeType.AXIS, "radial-energy", 2, paths=paths, count=count)


def _xy(p: Vec2) -> tuple[float, float]:
    return p.x, p.y


def create_local_radials_node(radius: float, sides: int) -> OrnamentNode:
    paths = [line_path(0, 0, *_xy(polar(radius, angle))) for angle in ray_angles(sides, 0.0)]
    return _node(
        "sub-center-radials",
        NodeType.AXIS,
        "sub-center-radial",
        4,
        paths=paths,
        sides=sides,
    )


def create_sub_center_node(
    id: str,
    remaining_depth: int,
    radius: float,
    sides: int,
    radiate: bool,
    transform: Transform,
) -> OrnamentNode:
    """One sub-center; spawns ``sides`` smaller sub-centers while depth remains."""
    node = _node(
        id,
        NodeType.CONTAINER,
        "sub-center",
        4 - remaining_depth,
        paths=[ellipse_path(radius * 0.4, radius * 0.4)],
        transform=transform,
        radius=radius,
        depth=remaining_depth,
    )

    if radiate:
        node.children.append(create_local_radials_node(radius, sides))

    if remaining_depth > 1:
        for i, angle in enumerate(ray_angles(sides, 0.0)):
            offset = polar(radius, angle)
            node.children.append(
                create_sub_center_node(
                    f"{id}-{i}",
                    remaining_depth - 1,
                    radius * SUB_CENTER_RATIO,
                    sides,
                    radiate,
                    Transform(tx=offset.x, ty=offset.y),
                )
            )

    return node


def create_sub_center_group(
    depth: int,
    radius: float,
    anchor_radius: float,
    radial_count: int,
    rotation: float,
    sides: int,
    radiate: bool,
) -> OrnamentNode | None:
    if depth <= 0 or radius <= 0:
        return None

    group = _node("flow-sub-centers", NodeType.CONTAINER, "sub-centers", 4, depth=depth)
    for i, angle in enumerate(ray_angles(radial_count, rotation)):
        anchor = polar(anchor_radius, angle)
        group.children.append(
            create_sub_center_node(
                f"sub-center-{i}",
                depth,
                radius,
                sides,
                radiate,
                Transform(tx=anchor.x, ty=anchor.y),
            )
        )
    return group


# ── Ornament layer ────────────────────────────────────────────────────────


def motif_path(kind: PushMotif, size: float) -> Path:
    if kind == "diamond":
        w = size * 0.65
        return polygon_path([Vec2(0, -size), Vec2(w, 0), Vec2(0, size), Vec2(-w, 0)])
    if kind == "lobe":
        return ellipse_path(size * 0.5, size * 0.9)
    if kind == "pyramid":
        return polygon_path(
            [Vec2(-size * 0.6, size * 0.5), Vec2(size * 0.6, size * 0.5), Vec2(0, -size * 0.65)]
        )
    return rect_path(-size / 2, -size / 2, size, size)


def pull_motif_path(size: float) -> Path:
    w = size * 0.5
    h = size * 1.4
    return polygon_path([Vec2(0, -h / 2), Vec2(w, 0), Vec2(0, h / 2), Vec2(-w, 0)])


def create_push_motif_node(
    radius: float,
    count: int,
    rotation: float,
    amount: float,
    motif: PushMotif,
) -> OrnamentNode:
    """Motifs pushed outward past the circle, one per radial, pointing away from the center."""
    group = _node("flow-push-motifs", NodeType.OVERLAY, "push-motif", 3, motif=motif)
    path = motif_path(motif, 0.08 + amount * 0.18)
    reach = radius * (1 + amount * 0.45)

    for i, angle in enumerate(ray_angles(count, rotation)):
        at = polar(reach, angle)
        group.children.append(
            _node(
                f"push-{i}",
                NodeType.OVERLAY,
                "push-instance",
                3,
                paths=[path],
                transform=Transform(tx=at.x, ty=at.y, rotation=angle + math.pi / 2),
                angle=angle,
            )
        )
    return group


def create_pull_motif_node(radius: float, count: int, rotation: float, amount: float) -> OrnamentNode:
    """Motifs drawn inward from the perimeter, placed halfway to the pulled radius."""
    group = _node("flow-pull-motifs", NodeType.OVERLAY, "pull-motif", 3)
    inner = radius * (1 - 0.6 * amount)
    reach = (radius + inner) / 2
    path = pull_motif_path(0.06 + amount * 0.16)

    for i, angle in enumerate(ray_angles(count, rotation)):
        at = polar(reach, angle)
        group.children.append(
            _node(
                f"pull-{i}",
                NodeType.OVERLAY,
                "pull-instance",
                3,
                paths=[path],
                transform=Transform(tx=at.x, ty=at.y, rotation=angle + math.pi),
                angle=angle,
            )
        )
    return group


def node_decoration_path(kind: NodeDecorationType, size: float) -> Path:
    if kind == "square":
        return rect_path(-size / 2, -size / 2, size, size)
    if kind == "petal":
        return ellipse_path(size * 0.35, size * 0.65)
    if kind == "custom":
        # Elongated hexagon.
        w = size * 0.6
        h = size
        return polygon_path(
            [
                Vec2(0, -h / 2),
                Vec2(w / 2, -h / 4),
                Vec2(w / 2, h / 4),
                Vec2(0, h / 2),
                Vec2(-w / 2, h / 4),
                Vec2(-w / 2, -h / 4),
            ]
        )
    return ellipse_path(size * 0.5, size * 0.5)


def create_node_decoration_node(
    kind: NodeDecorationType,
    size_ratio: float,
    rays: list[Ray],
    radius: float,
) -> OrnamentNode | None:
    """One decoration at the center plus one at each radial end, rotated to the radial."""
    if kind == "none" or size_ratio <= 0 or not rays:
        return None

    size = radius * size_ratio
    path = node_decoration_path(kind, size)
    group = _node("node-decorations", NodeType.OVERLAY, "node-decoration", 4, kind=kind, size=size)
    group.children.append(_node("node-center", NodeType.OVERLAY, "node-center", 4, paths=[path]))

    for i, ray in enumerate(rays):
        group.children.append(
            _node(
                f"node-{i}",
                NodeType.OVERLAY,
                "node-ray",
                4,
                paths=[path],
                transform=Transform(tx=ray.end.x, ty=ray.end.y, rotation=ray.angle),
                angle=ray.angle,
            )
        )
    return group


def _offset(base: Vec2, d: Vec2, amount: float) -> Vec2:
    return Vec2(base.x + d.x * amount, base.y + d.y * amount)


def create_edge_decoration_node(
    style: EdgeDecorationStyle,
    repeats: int,
    bulge: float,
    rays: list[Ray],
    radius: float,
    size_ratio: float,
) -> OrnamentNode | None:
    """``repeats`` evenly spaced marks along every radial: arches or double ticks."""
    if style == "straight" or repeats <= 0 or not rays:
        return None

    span = radius * max(0.04, size_ratio * 0.25)
    group = _node(
        "edge-ornaments",
        NodeType.OVERLAY,
        "edge-decoration",
        4,
        style=style,
        repeats=repeats,
    )

    for ray in rays:
        for r in range(repeats):
            t = (r + 1) / (repeats + 1)
            base = Vec2(ray.direction.x * radius * t, ray.direction.y * radius * t)

            if style == "arched":
                lateral = span * (0.8 + r * 0.05)
                start = _offset(base, ray.normal, -lateral)
                end = _offset(base, ray.normal, lateral)
                control = _offset(base, ray.direction, bulge * lateral * 1.4)
                group.paths.append(
                    Path((move_to(start.x, start.y), quad_to(control.x, control.y, end.x, end.y)))
                )
            elif style == "double":
                gap = span * (0.4 + bulge * 0.5)
                start = _offset(base, ray.direction, -span)
                end = _offset(base, ray.direction, span)
                for sign in (1, -1):
                    a = _offset(start, ray.normal, sign * gap)
                    b = _offset(end, ray.normal, sign * gap)
                    group.paths.append(line_path(a.x, a.y, b.x, b.y))

    return group if group.paths else None


def create_line_diamonds_node(width_ratio: float, vertices: list[Vec2]) -> OrnamentNode | None:
    """A diamond spanning each polygon edge, its short axis ``width_ratio × edge length``."""
    if width_ratio <= 0 or len(vertices) < 2:
        return None

    group = _node("line-diamonds", NodeType.OVERLAY, "line-diamonds", 4, width_ratio=width_ratio)
    for start, end in zip(vertices, vertices[1:] + vertices[:1]):
        ex = end.x - start.x
        ey = end.y - start.y
        length = math.hypot(ex, ey)
        if length == 0:
            continue
        normal = Vec2(-ey / length, ex / length)
        mid = Vec2((start.x + end.x) / 2, (start.y + end.y) / 2)
        offset = length * width_ratio
        group.paths.append(
            polygon_path([start, _offset(mid, normal, offset), end, _offset(mid, normal, -offset)])
        )

    return group if group.paths else None


# ── Extent ────────────────────────────────────────────────────────────────


def compute_extent(
    circle_radius: float,
    push_amount: float,
    sub_center_depth: int,
    sub_center_ratio: float,
    node_size: float,
    edge_bulge: float,
    line_diamond_width: float,
) -> float:
    """Largest of several reach estimates, floored at MIN_EXTENT."""
    estimates = [
        circle_radius * (1.1 + node_size * 0.8),
        circle_radius * (1 + edge_bulge * 0.5),
        circle_radius * (1 + line_diamond_width),
        circle_radius * (1 + push_amount * 0.6),
    ]

    if sub_center_depth > 0 and sub_center_ratio > 0:
        offset = circle_radius
        current = circle_radius * sub_center_ratio
        for _ in range(sub_center_depth):
            offset += current
            current *= SUB_CENTER_RATIO
        estimates.append(offset)

    return max(max(estimates), MIN_EXTENT)


def snap_polygon_rotation(
    value: float,
    sides: int,
    radial_multiplier: int = 1,
    low: float = 0.0,
    high: float = 90.0,
) -> float:
    """Snap a rotation (degrees) to the nearest multiple of the flow's symmetry increment.

    The increment is 360 / round(sides * radial_multiplier), so a hexagon with
    a single ray per side snaps in 60 degree steps. The result is clamped to
    [low, high].
    """
    axis_count = max(1, round_half_up(sides * radial_multiplier))
    increment = 360 / axis_count
    snapped = round_half_up(value / increment) * increment
    return min(max(snapped, low), high)


# ── Generator ─────────────────────────────────────────────────────────────


@generator(
    id="radial-flow",
    params=RadialFlowSettings,
    description="Radial flow: circle, polygon, energy lines, sub-centers and ornament layer",
    tags={"flow"},
)
def generate_radial_flow(settings: RadialFlowSettings) -> OrnamentResult:
    radius = settings.circle_radius
    sides = settings.polygon_sides
    rotation = deg_to_rad(settings.polygon_rotation)
    radial_count = clamp_int(sides * settings.radial_multiplier, sides, MAX_RADIALS)
    rays = build_rays(radial_count, rotation, radius)
    vertices = polygon_vertices(radius, sides, rotation)

    extent = compute_extent(
        radius,
        settings.push_amount,
        settings.sub_center_depth,
        settings.sub_center_radius,
        settings.node_size,
        settings.edge_bulge,
        settings.line_diamond_width if settings.line_diamonds_enabled else 0.0,
    )

    root = _node("radial-flow-root", NodeType.CONTAINER, "radial-flow", 0)
    structure = _node(
        "flow-structure",
        NodeType.CONTAINER,
        "structure-layer",
        0,
        enabled=settings.show_structural_layer,
    )
    ornament = _node(
        "flow-ornament",
        NodeType.CONTAINER,
        "ornament-layer",
        0,
        enabled=settings.show_ornament_layer,
    )

    if settings.show_structural_layer:
        if settings.show_base_circle:
            structure.paths.append(ellipse_path(radius, radius))
        if settings.show_cross:
            structure.children.append(create_cross_node(radius))
        if settings.show_polygon:
            structure.children.append(create_polygon_node(vertices))
        if settings.show_radials:
            structure.children.append(create_radials_node(radius, radial_count, rotation))

        sub_centers = create_sub_center_group(
            settings.sub_center_depth,
            radius * settings.sub_center_radius,
            radius,
            radial_count,
            rotation,
            settings.sub_center_sides,
            settings.radiate_sub_centers,
        )
        if sub_centers is not None:
            structure.children.append(sub_centers)

    if settings.show_ornament_layer:
        if settings.enable_push and settings.push_amount > 0:
            ornament.children.append(
                create_push_motif_node(
                    radius, radial_count, rotation, settings.push_amount, settings.push_motif
                )
            )
        if settings.enable_pull and settings.pull_amount > 0:
            ornament.children.append(
                create_pull_motif_node(radius, radial_count, rotation, settings.pull_amount)
            )

        optional = [
            create_node_decoration_node(
                settings.node_decoration_type, settings.node_size, rays, radius
            ),
            create_edge_decoration_node(
                settings.edge_decoration_style,
                settings.edge_repeat,
                settings.edge_bulge,
                rays,
                radius,
                settings.node_size,
            ),
        ]
        if settings.line_diamonds_enabled:
            optional.append(create_line_diamonds_node(settings.line_diamond_width, vertices))
        ornament.children.extend(node for node in optional if node is not None)

    for layer in (structure, ornament):
        if not layer.is_empty:
            root.children.append(layer)

    logger.debug(
        "Radial flow: %d radials, extent %.3f, %d nodes", radial_count, extent, count_nodes(root)
    )
    return OrnamentResult(root=root, bounds=square_bounds(extent))
