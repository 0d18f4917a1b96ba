"""Leaf width profiles — piecewise-linear width along a leaf's length.

A profile maps normalized position t (0 = base, 1 = tip) to a relative
half-width. ``morph_leaf`` blends two profiles over the union of their stops.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from sullivan.geometry.curves import clamp01, lerp

# Stop positions are rounded before de-duplication so that 0.1 + 0.2 and 0.3
# collapse to one key.
_KEY_DECIMALS = 4


class WidthStop(BaseModel):
    model_config = ConfigDict(frozen=True)

    t: float
    width: float


class LeafProfile(BaseModel):
    """Control widths at normalized positions plus base/tip pinch strengths (0..1)."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str
    widths: tuple[WidthStop, ...] = Field(min_length=1)
    base_pull: float = 0.0
    tip_pull: float = 0.0

    def sorted_stops(self) -> list[WidthStop]:
        return sorted(self.widths, key=lambda s: s.t)


def _profile(id: str, stops: list[tuple[float, float]], base_pull: float, tip_pull: float) -> LeafProfile:
    return LeafProfile(
        id=id,
        widths=tuple(WidthStop(t=t, width=w) for t, w in stops),
        base_pull=base_pull,
        tip_pull=tip_pull,
    )


OVATE = _profile(
    "ovate",
    [(0.0, 0.15), (0.15, 0.55), (0.45, 0.75), (0.75, 0.5), (1.0, 0.0)],
    base_pull=0.35,
    tip_pull=0.45,
)

LANCEOLATE = _profile(
    "lanceolate",
    [(0.0, 0.18), (0.25, 0.48), (0.55, 0.52), (0.85, 0.32), (1.0, 0.0)],
    base_pull=0.15,
    tip_pull=0.65,
)

CORDATE = _profile(
    "cordate",
    [(0.0, 0.22), (0.12, 0.68), (0.35, 0.8), (0.65, 0.58), (1.0, 0.0)],
    base_pull=0.6,
    tip_pull=0.35,
)

LEAF_PROFILES: dict[str, LeafProfile] = {
    "ovate": OVATE,
    "lanceolate": LANCEOLATE,
    "cordate": CORDATE,
}


def get_profile(name: str) -> LeafProfile:
    try:
        return LEAF_PROFILES[name]
    except KeyError:
        raise ValueError(f"Unknown leaf profile {name!r}; expected one of {sorted(LEAF_PROFILES)}") from None


def sample_width_at(profile: LeafProfile, t: float) -> float:
    """Linear interpolation between the two stops bracketing t; t is clamped to [0, 1]."""
    t = clamp01(t)
    stops = profile.sorted_stops()

    for a, b in zip(stops, stops[1:]):
        if a.t <= t <= b.t:
            local = (t - a.t) / ((b.t - a.t) or 1)
            return lerp(a.width, b.width, local)

    # Outside the stop range: nearest endpoint.
    if t < stops[0].t:
        return stops[0].width
    return stops[-1].width


def profile_keys(*profiles: LeafProfile) -> list[float]:
    """Union of stop positions, clamped, rounded, de-duplicated, ascending."""
    keys = {round(clamp01(stop.t), _KEY_DECIMALS) for p in profiles for stop in p.widths}
    return sorted(keys)


def morph_leaf(a: LeafProfile, b: LeafProfile, alpha: float) -> LeafProfile:
    """Blend profile a into b by alpha (0 = a, 1 = b)."""
    widths = tuple(
        WidthStop(t=t, width=lerp(sample_width_at(a, t), sample_width_at(b, t), alpha))
        for t in profile_keys(a, b)
    )
    return LeafProfile(
        id=f"{a.id}-to-{b.id}-{alpha:.2f}",
        widths=widths,
        base_pull=lerp(a.base_pull, b.base_pull, alpha),
        tip_pull=lerp(a.tip_pull, b.tip_pull, alpha),
    )
