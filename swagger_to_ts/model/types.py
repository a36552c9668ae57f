"""
Type nodes for the definition model.

A Type is one of five variants. Arrays and maps wrap another Type directly;
cycles only happen through Ref, which is resolved by name when rendering.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PrimitiveKind(Enum):
    """Primitive schema types."""

    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"
    STRING = "string"


@dataclass(frozen=True)
class Empty:
    """Untyped value (any object)."""


@dataclass(frozen=True)
class Primitive:
    """A boolean, integer, number or string."""

    kind: PrimitiveKind = PrimitiveKind.STRING


@dataclass(frozen=True)
class Ref:
    """Reference to a definition, possibly in another package."""

    package: str = ""
    name: str = ""


@dataclass(frozen=True)
class Array:
    """List of items of a single type."""

    items: Type = Empty()


@dataclass(frozen=True)
class Map:
    """String-keyed map."""

    values: Type = Empty()


Type = Empty | Primitive | Ref | Array | Map
