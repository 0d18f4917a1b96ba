"""Tests for stems with leaves."""

import math

import pytest

from sullivan.engine.scene import NodeType, OrnamentNode
from sullivan.errors import ConstructionError
from sullivan.generators.leaf import LeafParams, leaf_params_to_path, morph_leaf_params
from sullivan.generators.stem import create_stem_with_leaves
from sullivan.geometry.primitives import MoveTo, Path, QuadTo, Vec2, line_path, line_to, move_to, quad_to

LEAF_A = LeafParams(length=0.3, width=0.15)
LEAF_B = LeafParams(length=0.5, width=0.25, tip_sharpness=0.8)


def _axis(*paths):
    return OrnamentNode(id="axis", type=NodeType.AXIS, paths=list(paths))


def test_stem_control_point():
    stem = create_stem_with_leaves("s", _axis(line_path(0, 0, 1, 0)), LEAF_A, LEAF_B, 0, curve_amount=0.5)
    start, curve = stem.paths[0].commands
    assert start == MoveTo(Vec2(0, 0))
    assert isinstance(curve, QuadTo)
    assert curve.p1.x == pytest.approx(0.5)
    assert curve.p1.y == pytest.approx(0.25)
    assert curve.p == Vec2(1, 0)


def test_stem_side_flips_bow():
    stem = create_stem_with_leaves(
        "s", _axis(line_path(0, 0, 1, 0)), LEAF_A, LEAF_B, 0, curve_amount=0.5, side=-1
    )
    assert stem.paths[0].commands[1].p1.y == pytest.approx(-0.25)


def test_leaves_spaced_evenly():
    stem = create_stem_with_leaves("s", _axis(line_path(0, 0, 1, 0)), LEAF_A, LEAF_B, 3)
    assert [leaf.id for leaf in stem.children] == ["s-leaf-1", "s-leaf-2", "s-leaf-3"]
    assert [leaf.params["t"] for leaf in stem.children] == [0.25, 0.5, 0.75]
    assert all(leaf.type is NodeType.LEAF for leaf in stem.children)


def test_leaf_placement_on_straight_stem():
    stem = create_stem_with_leaves(
        "s", _axis(line_path(0, 0, 1, 0)), LEAF_A, LEAF_B, 1, curve_amount=0, leaf_offset=0.04
    )
    leaf = stem.children[0]
    assert leaf.transform.tx == pytest.approx(0.5)
    assert leaf.transform.ty == pytest.approx(0.04)
    assert leaf.transform.rotation == pytest.approx(-math.pi / 2)


def test_leaf_shapes_morph_along_stem():
    stem = create_stem_with_leaves("s", _axis(line_path(0, 0, 1, 0)), LEAF_A, LEAF_B, 3)
    first = stem.children[0]
    assert first.paths[0] == leaf_params_to_path(morph_leaf_params(LEAF_A, LEAF_B, 0.25))


def test_provenance_defaults():
    stem = create_stem_with_leaves("s", _axis(line_path(0, 0, 1, 0)), LEAF_A, LEAF_B, 2)
    assert stem.role == "flowing-stem"
    assert stem.plate_origin == 1
    assert stem.step_in_plate == 3
    assert [leaf.step_in_plate for leaf in stem.children] == [1, 2]


def test_negative_leaf_count():
    stem = create_stem_with_leaves("s", _axis(line_path(0, 0, 1, 0)), LEAF_A, LEAF_B, -2)
    assert stem.children == []


def test_curved_axis_rejected():
    axis = _axis(Path((move_to(0, 0), quad_to(1, 1, 2, 0))))
    with pytest.raises(ConstructionError):
        create_stem_with_leaves("s", axis, LEAF_A, LEAF_B, 3)


def test_polyline_axis_rejected():
    axis = _axis(Path((move_to(0, 0), line_to(1, 0), line_to(1, 1))))
    with pytest.raises(ConstructionError):
        create_stem_with_leaves("s", axis, LEAF_A, LEAF_B, 3)


def test_multi_path_axis_rejected():
    axis = _axis(line_path(0, 0, 1, 0), line_path(1, 0, 2, 0))
    with pytest.raises(ConstructionError):
        create_stem_with_leaves("s", axis, LEAF_A, LEAF_B, 3)


def test_axis_without_segment_rejected():
    with pytest.raises(ConstructionError):
        create_stem_with_leaves("s", _axis(), LEAF_A, LEAF_B, 3)
    with pytest.raises(ConstructionError):
        create_stem_with_leaves("s", _axis(Path((move_to(0, 0),))), LEAF_A, LEAF_B, 3)
