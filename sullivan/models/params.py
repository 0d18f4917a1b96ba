"""Generator parameter models.

Out-of-range numbers are clamped into their documented range, never rejected,
so the models stay usable behind free-running sliders. Integer fields are
floored after clamping. JSON field names are the camelCase aliases.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from sullivan.geometry.curves import clamp, clamp_int
from sullivan.geometry.profile import LEAF_PROFILES, LeafProfile, get_profile, morph_leaf


def Clamped(lo: float, hi: float) -> AfterValidator:
    """Float clamped into [lo, hi]."""
    return AfterValidator(lambda v: clamp(v, lo, hi))


def FlooredInt(lo: int, hi: int) -> BeforeValidator:
    """Any number, clamped into [lo, hi] then floored."""

    def _coerce(v: Any) -> int:
        if isinstance(v, str):
            v = v.strip()
        return clamp_int(clamp(float(v), lo, hi), lo, hi)

    return BeforeValidator(_coerce)


PushMotif = Literal["square", "diamond", "lobe", "pyramid"]
NodeDecorationType = Literal["none", "circle", "square", "petal", "custom"]
EdgeDecorationStyle = Literal["straight", "arched", "double"]


class ParamsModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    def to_json_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class PlateParams(ParamsModel):
    """Plate 1: container → grid → axes → radiating stems + medallion."""

    subdivisions: Annotated[int, FlooredInt(2, 64)] = 4
    # 0: container only, 1: + grid, 2: + diagonal/secondary axes, 3+: + stems and medallion
    step: Annotated[int, FlooredInt(0, 7)] = 3
    # Relative to half the container size.
    medallion_radius: Annotated[float, Clamped(0.1, 0.9)] = 0.5
    secondary_axis_pairs: Annotated[int, FlooredInt(0, 3)] = 1
    stem_count: Annotated[int, FlooredInt(0, 32)] = 4
    # Relative to the plate half-width.
    stem_length: Annotated[float, Clamped(0.2, 1.35)] = 0.85
    # 0 = perfectly mirrored axes and stems.
    symmetry_bias: Annotated[float, Clamped(0.0, 1.0)] = 0.0
    width: Annotated[float, Clamped(1.0, 10000.0)] = 800.0
    height: Annotated[float, Clamped(1.0, 10000.0)] = 800.0


class RadialFlowSettings(ParamsModel):
    """Circle → polygon → energy lines → sub-centers → ornament layer."""

    show_base_circle: bool = False
    show_cross: bool = False
    show_polygon: bool = False
    show_radials: bool = False
    circle_radius: Annotated[float, Clamped(0.25, 0.98)] = 0.65
    polygon_sides: Annotated[int, FlooredInt(3, 18)] = 6
    # Degrees.
    polygon_rotation: Annotated[float, Clamped(0.0, 360.0)] = 0.0
    radial_multiplier: Annotated[int, FlooredInt(1, 4)] = 1

    enable_push: bool = False
    push_amount: Annotated[float, Clamped(0.0, 1.0)] = 0.0
    push_motif: PushMotif = "square"
    enable_pull: bool = False
    pull_amount: Annotated[float, Clamped(0.0, 1.0)] = 0.0

    sub_center_depth: Annotated[int, FlooredInt(0, 4)] = 0
    # Relative to the base circle radius.
    sub_center_radius: Annotated[float, Clamped(0.05, 0.85)] = 0.35
    sub_center_sides: Annotated[int, FlooredInt(3, 12)] = 4
    radiate_sub_centers: bool = False

    node_decoration_type: NodeDecorationType = "none"
    node_size: Annotated[float, Clamped(0.01, 0.6)] = 0.18
    edge_decoration_style: EdgeDecorationStyle = "straight"
    edge_bulge: Annotated[float, Clamped(0.0, 1.0)] = 0.3
    edge_repeat: Annotated[int, FlooredInt(0, 16)] = 0

    # Presentation hint for pixel previews (stroke width in px).
    line_weight: Annotated[float, Clamped(0.4, 4.0)] = 1.4
    show_structural_layer: bool = True
    show_ornament_layer: bool = True
    line_diamonds_enabled: bool = False
    line_diamond_width: Annotated[float, Clamped(0.01, 0.8)] = 0.2


class LeafSceneParams(ParamsModel):
    """Single leaf outline + midrib, optionally morphed between two profiles."""

    profile: str | LeafProfile = "ovate"
    morph_target: str | LeafProfile | None = None
    morph_alpha: Annotated[float, Clamped(0.0, 1.0)] = 0.0
    length: Annotated[float, Clamped(0.01, 10.0)] = 1.0
    max_width: Annotated[float, Clamped(0.0, 2.0)] = 0.6
    # Negative bends left, positive bends right.
    curvature: Annotated[float, Clamped(-0.85, 0.85)] = 0.0
    pull_bias: Annotated[float, Clamped(0.0, 1.0)] = 0.6
    resolution: Annotated[int, FlooredInt(6, 512)] = 48
    width: Annotated[float, Clamped(1.0, 10000.0)] = 800.0
    height: Annotated[float, Clamped(1.0, 10000.0)] = 800.0

    @field_validator("profile", "morph_target")
    @classmethod
    def _known_profile(cls, v: str | LeafProfile | None) -> str | LeafProfile | None:
        if isinstance(v, str) and v not in LEAF_PROFILES:
            raise ValueError(f"unknown leaf profile {v!r}; expected one of {sorted(LEAF_PROFILES)}")
        return v

    def resolved_profile(self) -> LeafProfile:
        """The profile to draw: ``profile``, morphed toward ``morph_target`` when given."""
        base = get_profile(self.profile) if isinstance(self.profile, str) else self.profile
        if self.morph_target is None:
            return base
        target = get_profile(self.morph_target) if isinstance(self.morph_target, str) else self.morph_target
        return morph_leaf(base, target, self.morph_alpha)


class SquareSettings(ParamsModel):
    """Inorganic square study over the fixed [-1, 1]² canvas."""

    show_outer_frame: bool = True
    show_inner_frame: bool = False
    inner_margin: Annotated[float, Clamped(0.0, 0.9)] = 0.18
    show_center_cross: bool = False
    show_diagonals: bool = False
    show_subdivision_grid: bool = False
    subdivisions: Annotated[int, FlooredInt(2, 64)] = 6
    show_inscribed_circle: bool = False
    # Square rotated 45°, centred on the origin.
    show_diamond_square: bool = False
    show_quarter_arcs: bool = False

    @classmethod
    def from_step(cls, step: int, **overrides: Any) -> SquareSettings:
        """Progressive toggles: each step enables one more construction element."""
        toggles = {
            "show_outer_frame": step >= 1,
            "show_inner_frame": step >= 2,
            "show_center_cross": step >= 3,
            "show_diagonals": step >= 4,
            "show_inscribed_circle": step >= 5,
            "show_diamond_square": step >= 6,
            "show_quarter_arcs": step >= 7,
            "show_subdivision_grid": step >= 7,
        }
        toggles.update(overrides)
        return cls(**toggles)
