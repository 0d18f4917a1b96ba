"""Sullivan ornament engine — scene tree, generator registry, flattening."""

from sullivan.engine.flatten import FlattenedPath, flatten
from sullivan.engine.registry import GeneratorSpec, generator, get_registry
from sullivan.engine.scene import NodeType, OrnamentNode, OrnamentResult

__all__ = [
    "FlattenedPath",
    "GeneratorSpec",
    "NodeType",
    "OrnamentNode",
    "OrnamentResult",
    "flatten",
    "generator",
    "get_registry",
]
