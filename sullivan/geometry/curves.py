"""Scalar and curve helpers — clamps, lerp, quadratic Bézier evaluation. No engine imports."""

from __future__ import annotations

import math

from sullivan.geometry.primitives import Vec2


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def clamp01(value: float) -> float:
    return clamp(value, 0.0, 1.0)


def clamp_int(value: float, lo: int, hi: int) -> int:
    """Floor, then clamp into [lo, hi]."""
    return max(lo, min(hi, math.floor(value)))


def deg_to_rad(degrees: float) -> float:
    return degrees * math.pi / 180


def polar(radius: float, angle: float) -> Vec2:
    return Vec2(math.cos(angle) * radius, math.sin(angle) * radius)


def quad_point(p0: Vec2, c: Vec2, p1: Vec2, t: float) -> Vec2:
    """B(t) = (1-t)²·p0 + 2(1-t)t·c + t²·p1"""
    u = 1 - t
    uu = u * u
    tt = t * t
    return Vec2(
        uu * p0.x + 2 * u * t * c.x + tt * p1.x,
        uu * p0.y + 2 * u * t * c.y + tt * p1.y,
    )


def quad_tangent(p0: Vec2, c: Vec2, p1: Vec2, t: float) -> Vec2:
    """B'(t) = 2(1-t)(c-p0) + 2t(p1-c). Not normalized."""
    u = 1 - t
    return Vec2(
        2 * u * (c.x - p0.x) + 2 * t * (p1.x - c.x),
        2 * u * (c.y - p0.y) + 2 * t * (p1.y - c.y),
    )


def normalize(v: Vec2) -> Vec2:
    """Unit vector; a zero vector is treated as length 1."""
    length = math.hypot(v.x, v.y) or 1.0
    return Vec2(v.x / length, v.y / length)


def round_half_up(value: float) -> int:
    """Nearest integer, .5 rounds toward +inf (not to even)."""
    return math.floor(value + 0.5)
