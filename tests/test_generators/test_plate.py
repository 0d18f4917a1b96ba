"""Tests for the Plate 1 generator."""

import math

import pytest

from sullivan.engine.scene import NodeType
from sullivan.generators.plate import axis_path, create_stems_node, generate_plate
from sullivan.geometry.primitives import Rect
from sullivan.models.params import PlateParams
from tests.conftest import PLATE_SCENARIO


def _plate(**params):
    return generate_plate(PlateParams(**params))


def test_scenario_elements():
    result = generate_plate(PlateParams.model_validate(PLATE_SCENARIO))
    root = result.root

    grid = root.find("grid")
    assert grid.type is NodeType.AUXILIARY
    assert len(grid.paths) == 6

    assert len(root.find("axes-diagonal").paths) == 2
    assert len(root.find("axes-secondary").paths) == 2

    medallion = root.find("medallion")
    assert medallion.role == "central-medallion"
    assert [c.id for c in medallion.children] == [
        "medallion-petal-right",
        "medallion-petal-top",
        "medallion-petal-left",
        "medallion-petal-bottom",
    ]
    right = medallion.children[0]
    assert right.transform.tx == pytest.approx(0.4)
    assert right.transform.ty == pytest.approx(0.0)
    top = medallion.children[1]
    assert top.transform.rotation == pytest.approx(math.pi / 2)


def test_root_maps_unit_square_to_canvas():
    result = _plate(width=600, height=400)
    root = result.root
    assert root.id == "root-container"
    assert root.role == "panel"
    assert root.transform.tx == 300
    assert root.transform.scale_y == 200
    assert result.bounds == Rect(0, 0, 600, 400)


@pytest.mark.parametrize(
    "step, children",
    [
        (0, []),
        (1, ["grid"]),
        (2, ["grid", "axes-diagonal", "axes-secondary"]),
        (3, ["grid", "axes-diagonal", "axes-secondary", "radiating-stems", "medallion"]),
        (7, ["grid", "axes-diagonal", "axes-secondary", "radiating-stems", "medallion"]),
    ],
)
def test_steps_add_elements(step, children):
    root = _plate(step=step).root
    assert [c.id for c in root.children] == children
    assert len(root.paths) == 1


def test_optional_groups_omitted():
    root = _plate(secondary_axis_pairs=0, stem_count=0).root
    assert root.find("axes-secondary") is None
    assert root.find("radiating-stems") is None
    assert root.find("medallion") is not None


def test_stems_carry_leaves():
    stems = _plate().root.find("radiating-stems")
    assert len(stems.children) == 4
    for stem in stems.children:
        assert stem.role == "flowing-stem"
        # stem length 0.85 → 3 + 0.85 * 5 rounded
        assert len(stem.children) == 7
        assert all(leaf.role == "stem-leaf" for leaf in stem.children)


def test_leaf_count_rounds_half_up():
    stems = create_stems_node(2, 0.5, 0.0)
    assert len(stems.children[0].children) == 6


def test_stems_alternate_sides():
    stems = _plate(stem_count=4).root.find("radiating-stems")
    assert [s.params["side"] for s in stems.children] == [-1, 1, -1, 1]


def test_axis_path_reach():
    path = axis_path(math.pi / 4, 1.05)
    end = path.commands[1].p
    assert max(abs(end.x), abs(end.y)) == pytest.approx(1.05)


def test_params_clamped():
    params = PlateParams(subdivisions=1, step=99, medallion_radius=5, stem_count=-3)
    assert params.subdivisions == 2
    assert params.step == 7
    assert params.medallion_radius == 0.9
    assert params.stem_count == 0
    assert PlateParams(subdivisions=3.9).subdivisions == 3
