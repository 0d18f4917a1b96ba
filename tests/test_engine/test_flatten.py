"""Tests for flattening scene trees into world-space paths."""

import pytest

from sullivan.engine.flatten import FlattenedPath, flatten, flattened_extent, map_command
from sullivan.engine.scene import NodeType, OrnamentNode
from sullivan.geometry import affine
from sullivan.geometry.primitives import ClosePath, LineTo, MoveTo, Vec2, line_path, rect_path


def test_document_order(two_level_result):
    paths = flatten(two_level_result)
    assert [fp.node_id for fp in paths] == ["root", "child", "guide"]
    assert [fp.node_type for fp in paths] == [NodeType.CONTAINER, NodeType.LEAF, NodeType.AUXILIARY]
    assert paths[1].role == "leaf-outline"


def test_transforms_compose(two_level_tree):
    paths = flatten(two_level_tree)

    root_rect = paths[0]
    assert root_rect.commands[0].p == Vec2(10, 0)
    assert root_rect.closed
    assert isinstance(root_rect.commands[-1], ClosePath)

    # Child rotated a quarter turn inside the translated root.
    end = paths[1].commands[1].p
    assert end.x == pytest.approx(10)
    assert end.y == pytest.approx(1)

    guide_start = paths[2].commands[0].p
    assert guide_start.x == pytest.approx(9)


def test_identity_transform_keeps_coordinates():
    path = rect_path(0.25, -0.5, 1.5, 2)
    node = OrnamentNode(id="n", type=NodeType.CONTAINER, paths=[path])
    [fp] = flatten(node)
    assert fp.commands == path.commands
    assert fp.closed == path.closed


def test_nothing_filtered():
    node = OrnamentNode(
        id="grid",
        type=NodeType.AUXILIARY,
        paths=[line_path(0, 0, 1, 0), line_path(0, 1, 1, 1)],
    )
    assert len(flatten(node)) == 2


def test_map_command_close_passthrough():
    close = ClosePath()
    assert map_command(affine.IDENTITY, close) is close
    with pytest.raises(TypeError):
        map_command(affine.IDENTITY, "Z")


def test_flattened_path_close_flag():
    fp = FlattenedPath(
        commands=(MoveTo(Vec2(0, 0)), LineTo(Vec2(1, 0))),
        closed=True,
        node_type=NodeType.OVERLAY,
        node_id="x",
    )
    assert fp.closed
    assert not fp.has_close_command


def test_flattened_extent(two_level_tree):
    extent = flattened_extent(flatten(two_level_tree))
    assert extent.x == pytest.approx(9)
    assert extent.y == pytest.approx(0)
    assert extent.width == pytest.approx(2)
    assert extent.height == pytest.approx(1)
    assert flattened_extent([]) is None
