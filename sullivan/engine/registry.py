"""Generator registry — every generator is a standalone function registered via decorator.

Usage:
    @generator(id="square", params=SquareSettings, description="Square construction study")
    def generate_square(settings: SquareSettings) -> OrnamentResult:
        ...

Adding a new generator = creating one module with the decorator and importing
it from ``sullivan.generators``. Nothing else changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

from pydantic import BaseModel

from sullivan.errors import UnknownGeneratorError

if TYPE_CHECKING:
    from sullivan.engine.scene import OrnamentResult

logger = logging.getLogger(__name__)


@dataclass
class GeneratorSpec:
    id: str
    fn: Callable[[Any], "OrnamentResult"]
    params: type[BaseModel]
    description: str = ""
    tags: set[str] = field(default_factory=set)

    def validate(self, raw: BaseModel | dict[str, Any] | None = None) -> BaseModel:
        """Coerce raw input into this generator's parameter model (clamping numerics)."""
        if raw is None:
            return self.params()
        if isinstance(raw, self.params):
            return raw
        if isinstance(raw, BaseModel):
            raw = raw.model_dump(by_alias=True)
        return self.params.model_validate(raw)

    def build(self, raw: BaseModel | dict[str, Any] | None = None) -> "OrnamentResult":
        return self.fn(self.validate(raw))

    def defaults(self) -> dict[str, Any]:
        return self.params().model_dump(mode="json", by_alias=True)


class GeneratorRegistry:
    """Registry of scene generators, keyed by id."""

    def __init__(self) -> None:
        self._generators: dict[str, GeneratorSpec] = {}

    def register(self, spec: GeneratorSpec) -> None:
        if spec.id in self._generators:
            raise ValueError(f"Duplicate generator ID: {spec.id}")
        self._generators[spec.id] = spec
        logger.debug("Registered generator %s (%s)", spec.id, spec.params.__name__)

    def get(self, generator_id: str) -> GeneratorSpec:
        try:
            return self._generators[generator_id]
        except KeyError:
            raise UnknownGeneratorError(generator_id) from None

    def __contains__(self, generator_id: str) -> bool:
        return generator_id in self._generators

    def all(self) -> list[GeneratorSpec]:
        return sorted(self._generators.values(), key=lambda s: s.id)

    def ids(self) -> list[str]:
        return [s.id for s in self.all()]

    @property
    def count(self) -> int:
        return len(self._generators)


# Module-level singleton
_registry = GeneratorRegistry()


def get_registry() -> GeneratorRegistry:
    return _registry


def generator(
    *,
    id: str,
    params: type[BaseModel],
    description: str = "",
    tags: set[str] | None = None,
):
    """Decorator to register a generator function."""

    def decorator(fn: Callable[[Any], "OrnamentResult"]):
        spec = GeneratorSpec(
            id=id,
            fn=fn,
            params=params,
            description=description,
            tags=tags or set(),
        )
        _registry.register(spec)
        return fn

    return decorator
