"""Path primitives — points, rects, the path-command union, transforms.

All path geometry in a scene is authored with these value types. Commands are
immutable so a single motif path can be attached to many nodes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from sullivan.errors import ConstructionError

# Control-point offset for the 4-cubic circle approximation: 4/3 * (sqrt(2) - 1).
KAPPA = 0.5522847498307936


@dataclass(frozen=True, slots=True)
class Vec2:
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ConstructionError(f"Rect dimensions must be >= 0, got {self.width}x{self.height}")


@dataclass(frozen=True, slots=True)
class MoveTo:
    p: Vec2


@dataclass(frozen=True, slots=True)
class LineTo:
    p: Vec2


@dataclass(frozen=True, slots=True)
class QuadTo:
    p1: Vec2
    p: Vec2


@dataclass(frozen=True, slots=True)
class CubicTo:
    p1: Vec2
    p2: Vec2
    p: Vec2


@dataclass(frozen=True, slots=True)
class ClosePath:
    pass


PathCommand = Union[MoveTo, LineTo, QuadTo, CubicTo, ClosePath]


@dataclass(frozen=True, slots=True)
class Path:
    """Ordered command sequence. ``closed`` is kept independently of a trailing ClosePath."""

    commands: tuple[PathCommand, ...]
    closed: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.commands, tuple):
            object.__setattr__(self, "commands", tuple(self.commands))
        if not self.commands or not isinstance(self.commands[0], MoveTo):
            raise ConstructionError("Path must start with a MoveTo command")

    @property
    def has_close_command(self) -> bool:
        return isinstance(self.commands[-1], ClosePath)


@dataclass(frozen=True, slots=True)
class Transform:
    """Local affine placement: scale, then rotate (radians), then translate."""

    tx: float = 0.0
    ty: float = 0.0
    rotation: float = 0.0
    scale_x: float = 1.0
    scale_y: float = 1.0


def identity_transform() -> Transform:
    return Transform()


def translate(tx: float, ty: float, rotation: float = 0.0) -> Transform:
    return Transform(tx=tx, ty=ty, rotation=rotation)


# ── Command constructors ──────────────────────────────────────────────────


def move_to(x: float, y: float) -> MoveTo:
    return MoveTo(Vec2(x, y))


def line_to(x: float, y: float) -> LineTo:
    return LineTo(Vec2(x, y))


def quad_to(cx: float, cy: float, x: float, y: float) -> QuadTo:
    return QuadTo(Vec2(cx, cy), Vec2(x, y))


def cubic_to(x1: float, y1: float, x2: float, y2: float, x: float, y: float) -> CubicTo:
    return CubicTo(Vec2(x1, y1), Vec2(x2, y2), Vec2(x, y))


def close_path() -> ClosePath:
    return ClosePath()


# ── Path constructors ─────────────────────────────────────────────────────


def line_path(x0: float, y0: float, x1: float, y1: float) -> Path:
    """Open two-point segment."""
    return Path((move_to(x0, y0), line_to(x1, y1)), closed=False)


def rect_path(x: float, y: float, width: float, height: float) -> Path:
    """Axis-aligned rectangle starting at (x, y)."""
    return Path(
        (
            move_to(x, y),
            line_to(x + width, y),
            line_to(x + width, y + height),
            line_to(x, y + height),
            close_path(),
        ),
        closed=True,
    )


def ellipse_path(rx: float, ry: float) -> Path:
    """Origin-centred axis-aligned ellipse from four cubic segments, starting at (rx, 0)."""
    kx = KAPPA * rx
    ky = KAPPA * ry
    return Path(
        (
            move_to(rx, 0),
            cubic_to(rx, ky, kx, ry, 0, ry),
            cubic_to(-kx, ry, -rx, ky, -rx, 0),
            cubic_to(-rx, -ky, -kx, -ry, 0, -ry),
            cubic_to(kx, -ry, rx, -ky, rx, 0),
            close_path(),
        ),
        closed=True,
    )


def polygon_path(vertices: Iterable[Vec2]) -> Path:
    """Closed polygon through the given vertices."""
    commands: list[PathCommand] = []
    for index, vertex in enumerate(vertices):
        if index == 0:
            commands.append(move_to(vertex.x, vertex.y))
        else:
            commands.append(line_to(vertex.x, vertex.y))
    commands.append(close_path())
    return Path(tuple(commands), closed=True)


def command_points(cmd: PathCommand) -> tuple[Vec2, ...]:
    """All coordinates carried by a command, control points first."""
    if isinstance(cmd, (MoveTo, LineTo)):
        return (cmd.p,)
    if isinstance(cmd, QuadTo):
        return (cmd.p1, cmd.p)
    if isinstance(cmd, CubicTo):
        return (cmd.p1, cmd.p2, cmd.p)
    if isinstance(cmd, ClosePath):
        return ()
    raise TypeError(f"Unknown path command: {cmd!r}")
