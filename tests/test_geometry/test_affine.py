"""Tests for affine matrix helpers."""

import math

import numpy as np
import pytest
from numpy.testing import assert_allclose

from sullivan.geometry import affine
from sullivan.geometry.primitives import Transform, Vec2


def test_identity_transform_is_identity_matrix():
    assert_allclose(affine.matrix_from_transform(Transform()), np.eye(3))


def test_identity_is_read_only():
    with pytest.raises(ValueError):
        affine.IDENTITY[0, 0] = 2.0


def test_rotate_then_translate():
    m = affine.matrix_from_transform(Transform(tx=1, rotation=math.pi / 2))
    p = affine.apply(m, Vec2(1, 0))
    assert p.x == pytest.approx(1.0)
    assert p.y == pytest.approx(1.0)


def test_scale_before_rotation():
    m = affine.matrix_from_transform(Transform(rotation=math.pi / 2, scale_x=2, scale_y=3))
    p = affine.apply(m, Vec2(1, 1))
    # (2, 3) rotated a quarter turn
    assert p.x == pytest.approx(-3.0)
    assert p.y == pytest.approx(2.0)


def test_compose_parent_then_child():
    parent = affine.matrix_from_transform(Transform(tx=10))
    child = affine.matrix_from_transform(Transform(scale_x=2, scale_y=2))
    p = affine.apply(affine.compose(parent, child), Vec2(1, 0))
    assert p == Vec2(12.0, 0.0)


def test_compose_with_identity():
    m = affine.matrix_from_transform(Transform(tx=3, ty=-2, rotation=0.3, scale_x=1.5))
    assert_allclose(affine.compose(affine.IDENTITY, m), m)
    assert_allclose(affine.compose(m, affine.IDENTITY), m)
