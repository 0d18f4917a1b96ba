"""2D affine matrices in homogeneous 3×3 form.

    | a  c  e |       a = cosθ·sx   c = -sinθ·sy   e = tx
    | b  d  f |       b = sinθ·sx   d =  cosθ·sy   f = ty
    | 0  0  1 |

Composition is ``parent @ child`` so child-local points land in parent space.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from sullivan.geometry.primitives import Transform, Vec2

IDENTITY: NDArray[np.float64] = np.eye(3, dtype=np.float64)
IDENTITY.setflags(write=False)


def matrix_from_transform(t: Transform) -> NDArray[np.float64]:
    """Rotation and anisotropic scale combined, then translated."""
    cos = math.cos(t.rotation)
    sin = math.sin(t.rotation)
    return np.array(
        [
            [cos * t.scale_x, -sin * t.scale_y, t.tx],
            [sin * t.scale_x, cos * t.scale_y, t.ty],
            [0.0, 0.0, 1.0],
        ],
        dtype=np.float64,
    )


def compose(parent: NDArray[np.float64], child: NDArray[np.float64]) -> NDArray[np.float64]:
    return parent @ child


def apply(m: NDArray[np.float64], p: Vec2) -> Vec2:
    return Vec2(
        float(m[0, 0] * p.x + m[0, 1] * p.y + m[0, 2]),
        float(m[1, 0] * p.x + m[1, 1] * p.y + m[1, 2]),
    )
