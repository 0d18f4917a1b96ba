"""Tests for path primitives and curve helpers."""

import math

import pytest

from sullivan.errors import ConstructionError
from sullivan.geometry.curves import (
    clamp,
    clamp_int,
    normalize,
    quad_point,
    quad_tangent,
    round_half_up,
)
from sullivan.geometry.primitives import (
    KAPPA,
    ClosePath,
    CubicTo,
    LineTo,
    MoveTo,
    Path,
    Rect,
    Vec2,
    command_points,
    ellipse_path,
    line_path,
    polygon_path,
    rect_path,
)


def test_line_path_is_open():
    path = line_path(0, 0, 1, 2)
    assert not path.closed
    assert path.commands == (MoveTo(Vec2(0, 0)), LineTo(Vec2(1, 2)))
    assert not path.has_close_command


def test_rect_path_corners():
    path = rect_path(0, 0, 2, 1)
    assert path.closed
    assert len(path.commands) == 5
    assert [c.p for c in path.commands[:4]] == [Vec2(0, 0), Vec2(2, 0), Vec2(2, 1), Vec2(0, 1)]
    assert isinstance(path.commands[-1], ClosePath)


def test_ellipse_path_four_cubics():
    path = ellipse_path(2, 1)
    assert path.commands[0] == MoveTo(Vec2(2, 0))
    cubics = [c for c in path.commands if isinstance(c, CubicTo)]
    assert len(cubics) == 4
    assert cubics[0].p1 == Vec2(2, KAPPA)
    assert cubics[0].p == Vec2(0, 1)
    assert cubics[-1].p == Vec2(2, 0)
    assert path.has_close_command


def test_polygon_path():
    path = polygon_path([Vec2(0, 0), Vec2(1, 0), Vec2(0, 1)])
    kinds = [type(c) for c in path.commands]
    assert kinds == [MoveTo, LineTo, LineTo, ClosePath]
    assert path.closed


def test_path_must_start_with_move():
    with pytest.raises(ConstructionError):
        Path((LineTo(Vec2(1, 1)),))
    with pytest.raises(ConstructionError):
        Path(())


def test_path_accepts_list_commands():
    path = Path([MoveTo(Vec2(0, 0)), LineTo(Vec2(1, 0))])
    assert isinstance(path.commands, tuple)


def test_rect_rejects_negative_size():
    with pytest.raises(ConstructionError):
        Rect(0, 0, -1, 1)
    assert Rect(0, 0, 0, 0).width == 0


def test_command_points():
    cubic = CubicTo(Vec2(1, 1), Vec2(2, 2), Vec2(3, 3))
    assert command_points(cubic) == (Vec2(1, 1), Vec2(2, 2), Vec2(3, 3))
    assert command_points(ClosePath()) == ()
    with pytest.raises(TypeError):
        command_points("M 0 0")


def test_clamp_helpers():
    assert clamp(5, 0, 1) == 1
    assert clamp(-5, 0, 1) == 0
    assert clamp_int(3.7, 0, 10) == 3
    assert clamp_int(-2.5, 0, 10) == 0
    assert clamp_int(99, 0, 10) == 10


def test_round_half_up():
    assert round_half_up(6.5) == 7
    assert round_half_up(5.5) == 6
    assert round_half_up(7.25) == 7
    assert round_half_up(-0.5) == 0


def test_quad_point_endpoints():
    p0, c, p1 = Vec2(0, 0), Vec2(1, 2), Vec2(2, 0)
    assert quad_point(p0, c, p1, 0) == p0
    assert quad_point(p0, c, p1, 1) == p1
    mid = quad_point(p0, c, p1, 0.5)
    assert mid.x == pytest.approx(1.0)
    assert mid.y == pytest.approx(1.0)


def test_quad_tangent():
    p0, c, p1 = Vec2(0, 0), Vec2(1, 2), Vec2(2, 0)
    assert quad_tangent(p0, c, p1, 0) == Vec2(2, 4)
    assert quad_tangent(p0, c, p1, 1) == Vec2(2, -4)


def test_normalize_zero_vector():
    assert normalize(Vec2(0, 0)) == Vec2(0, 0)
    unit = normalize(Vec2(3, 4))
    assert math.hypot(unit.x, unit.y) == pytest.approx(1.0)
