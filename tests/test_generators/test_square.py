"""Tests for the inorganic square generator."""

import math

import pytest

from sullivan.engine.scene import NodeType
from sullivan.generators.square import generate_square
from sullivan.geometry.primitives import Rect
from sullivan.models.params import SquareSettings
from sullivan.svg.serializer import SvgRenderOptions, ornament_to_svg


def test_defaults_outer_frame_only():
    result = generate_square(SquareSettings())
    assert result.root.id == "inorganic-square-root"
    assert len(result.root.paths) == 1
    assert result.root.children == []
    assert result.bounds == Rect(-1, -1, 2, 2)


def test_step_zero_draws_nothing():
    root = generate_square(SquareSettings.from_step(0)).root
    assert root.is_empty


def test_all_elements():
    root = generate_square(SquareSettings.from_step(7)).root
    assert len(root.paths) == 2
    assert [c.id for c in root.children] == [
        "center-cross",
        "diagonals",
        "subdivision-grid",
        "inscribed-circle",
        "diamond-square",
        "quarter-arcs",
    ]
    assert all(c.type is NodeType.AUXILIARY for c in root.children)
    assert len(root.find("subdivision-grid").paths) == 10
    assert root.find("subdivision-grid").role == "grid"
    assert len(root.find("quarter-arcs").paths) == 4


@pytest.mark.parametrize(
    "toggle, node_id",
    [
        ("show_center_cross", "center-cross"),
        ("show_diagonals", "diagonals"),
        ("show_subdivision_grid", "subdivision-grid"),
        ("show_inscribed_circle", "inscribed-circle"),
        ("show_diamond_square", "diamond-square"),
        ("show_quarter_arcs", "quarter-arcs"),
    ],
)
def test_each_toggle_gates_one_child(toggle, node_id):
    root = generate_square(SquareSettings(**{toggle: True})).root
    assert [c.id for c in root.children] == [node_id]


def test_inner_frame_margin():
    root = generate_square(SquareSettings(show_inner_frame=True, inner_margin=0.25)).root
    inner = root.paths[1]
    assert inner.commands[0].p.x == pytest.approx(-0.75)
    assert inner.commands[2].p.x == pytest.approx(0.75)


def test_inscribed_circle_follows_inner_frame():
    framed = generate_square(SquareSettings(show_inner_frame=True, show_inscribed_circle=True)).root
    assert framed.find("inscribed-circle").paths[0].commands[0].p.x == pytest.approx(0.82)

    bare = generate_square(SquareSettings(show_inscribed_circle=True)).root
    assert bare.find("inscribed-circle").paths[0].commands[0].p.x == 1.0


def test_diamond_vertices():
    diamond = generate_square(SquareSettings(show_diamond_square=True)).root.find("diamond-square")
    first = diamond.paths[0].commands[0].p
    assert first.y == pytest.approx(-1 / math.sqrt(2))


def test_margin_and_subdivisions_clamped():
    settings = SquareSettings(inner_margin=5, subdivisions=1)
    assert settings.inner_margin == 0.9
    assert settings.subdivisions == 2


def test_construction_excluded():
    svg = ornament_to_svg(
        generate_square(SquareSettings.from_step(7)),
        SvgRenderOptions(include_construction=False),
    )
    assert svg.count("<path") == 2


def test_from_step_progression():
    three = SquareSettings.from_step(3)
    assert three.show_outer_frame and three.show_inner_frame and three.show_center_cross
    assert not three.show_diagonals
    assert not three.show_subdivision_grid
    assert SquareSettings.from_step(3, show_diagonals=True).show_diagonals
