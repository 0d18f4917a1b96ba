"""Exception types raised by the ornament engine."""

from __future__ import annotations


class SullivanError(Exception):
    """Base class for engine errors."""


class ConstructionError(SullivanError, ValueError):
    """Geometry handed to a builder violates its contract. Fatal to the call."""


class UnknownGeneratorError(SullivanError, KeyError):
    """No generator is registered under the requested id."""

    def __init__(self, generator_id: str) -> None:
        super().__init__(generator_id)
        self.generator_id = generator_id

    def __str__(self) -> str:
        return f"Unknown generator: {self.generator_id!r}"
