"""Shared test fixtures."""

from __future__ import annotations

import pytest

from sullivan.engine.pipeline import Pipeline, create_pipeline
from sullivan.engine.scene import NodeType, OrnamentNode, OrnamentResult, make_bounds
from sullivan.geometry.primitives import Transform, line_path, rect_path


# Parameter sets used across generator, pipeline and API tests

PLATE_SCENARIO = {"subdivisions": 4, "step": 3, "medallionRadius": 0.4}

# Only the base circle visible; every other layer element is off.
FLOW_BASE_CIRCLE = {
    "circleRadius": 0.72,
    "polygonSides": 6,
    "radialMultiplier": 1,
    "showBaseCircle": True,
}

FLOW_EVERYTHING = {
    "showBaseCircle": True,
    "showCross": True,
    "showPolygon": True,
    "showRadials": True,
    "polygonSides": 6,
    "radialMultiplier": 2,
    "enablePush": True,
    "pushAmount": 0.5,
    "pushMotif": "lobe",
    "enablePull": True,
    "pullAmount": 0.4,
    "subCenterDepth": 2,
    "subCenterSides": 4,
    "radiateSubCenters": True,
    "nodeDecorationType": "petal",
    "edgeDecorationStyle": "arched",
    "edgeRepeat": 2,
    "lineDiamondsEnabled": True,
}

LEAF_SMALL = {"profile": "ovate", "resolution": 6}


# Hand-written SVGs for the reader

SQUARE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="-1 -1 2 2" width="200" height="200" fill="none" stroke="#333" stroke-width="0.01">
  <g fill="none" stroke="#333">
    <path d="M -1 -1 L 1 -1 L 1 1 L -1 1 Z" />
    <path d="M -1 0 L 1 0" />
  </g>
</svg>'''

CURVE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 10 10">
  <path d="M 0 0 Q 5 10 10 0" />
  <path d="M 2 2 C 2 4 8 4 8 2 Z" />
</svg>'''


def _two_level_tree() -> OrnamentNode:
    child = OrnamentNode(
        id="child",
        type=NodeType.LEAF,
        role="leaf-outline",
        transform=Transform(rotation=1.5707963267948966),
        paths=[line_path(0, 0, 1, 0)],
    )
    guide = OrnamentNode(
        id="guide",
        type=NodeType.AUXILIARY,
        role="grid",
        paths=[line_path(-1, 0, 1, 0)],
    )
    return OrnamentNode(
        id="root",
        type=NodeType.CONTAINER,
        role="panel",
        transform=Transform(tx=10, ty=0),
        paths=[rect_path(0, 0, 1, 1)],
        children=[child, guide],
    )


@pytest.fixture
def pipeline() -> Pipeline:
    return create_pipeline()


@pytest.fixture
def two_level_tree() -> OrnamentNode:
    return _two_level_tree()


@pytest.fixture
def two_level_result() -> OrnamentResult:
    return OrnamentResult(root=_two_level_tree(), bounds=make_bounds(0, 0, 20, 20))
