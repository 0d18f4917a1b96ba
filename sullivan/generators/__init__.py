"""Built-in ornament generators. Importing this package registers all of them."""

from sullivan.generators.leaf import (
    LeafParams,
    create_leaf_geometry,
    create_leaf_node,
    generate_leaf,
    morph_leaf_params,
)
from sullivan.generators.plate import generate_plate
from sullivan.generators.radial_flow import generate_radial_flow, snap_polygon_rotation
from sullivan.generators.square import generate_square
from sullivan.generators.stem import create_stem_with_leaves

__all__ = [
    "LeafParams",
    "create_leaf_geometry",
    "create_leaf_node",
    "create_stem_with_leaves",
    "generate_leaf",
    "generate_plate",
    "generate_radial_flow",
    "generate_square",
    "morph_leaf_params",
    "snap_polygon_rotation",
]
