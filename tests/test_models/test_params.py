"""Tests for generator parameter models."""

import pytest
from pydantic import ValidationError

from sullivan.models.params import PlateParams, RadialFlowSettings, SquareSettings
from sullivan.models.requests import RenderRequest, Viewport


def test_camel_and_snake_names():
    assert PlateParams.model_validate({"medallionRadius": 0.3}).medallion_radius == 0.3
    assert PlateParams.model_validate({"medallion_radius": 0.3}).medallion_radius == 0.3


def test_unknown_fields_ignored():
    params = PlateParams.model_validate({"bogus": 1, "step": 2})
    assert params.step == 2


def test_numeric_strings():
    assert PlateParams.model_validate({"subdivisions": "4.9"}).subdivisions == 4
    assert PlateParams.model_validate({"stemLength": "0.5"}).stem_length == 0.5


def test_non_numeric_rejected():
    with pytest.raises(ValidationError):
        PlateParams.model_validate({"subdivisions": "many"})


def test_infinite_values_clamped():
    settings = RadialFlowSettings(circle_radius=float("inf"), edge_repeat=float("-inf"))
    assert settings.circle_radius == 0.98
    assert settings.edge_repeat == 0


@pytest.mark.parametrize(
    "field, value",
    [
        ("pushMotif", "star"),
        ("nodeDecorationType", "hexagon"),
        ("edgeDecorationStyle", "wavy"),
    ],
)
def test_invalid_enum_rejected(field, value):
    with pytest.raises(ValidationError):
        RadialFlowSettings.model_validate({field: value})


def test_ranges_clamped():
    settings = RadialFlowSettings(
        circle_radius=0.01,
        radial_multiplier=9,
        sub_center_depth=12,
        sub_center_sides=2,
        node_size=5,
        line_weight=0,
    )
    assert settings.circle_radius == 0.25
    assert settings.radial_multiplier == 4
    assert settings.sub_center_depth == 4
    assert settings.sub_center_sides == 3
    assert settings.node_size == 0.6
    assert settings.line_weight == 0.4


def test_to_json_dict_uses_aliases():
    data = SquareSettings().to_json_dict()
    assert data["showOuterFrame"] is True
    assert data["innerMargin"] == 0.18
    assert "show_outer_frame" not in data


def test_render_request_options():
    request = RenderRequest.model_validate(
        {
            "params": {"step": 1},
            "options": {"includeConstruction": False},
            "viewport": {"width": 10, "height": 20},
        }
    )
    assert request.options.include_construction is False
    assert request.viewport.height == 20
    assert RenderRequest().params == {}


def test_viewport_must_be_positive():
    with pytest.raises(ValidationError):
        Viewport(width=0, height=10)
