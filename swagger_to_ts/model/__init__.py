"""
Definition model.

In-memory representation of schema definitions, produced by the loader and
consumed by the TypeScript backend.
"""

from __future__ import annotations

from .definitions import (
    Alias,
    Definition,
    DefinitionMeta,
    GroupVersionKind,
    NamedProperty,
    Object,
    type_refs,
)
from .registry import Registry, build_registry, is_kubernetes_object
from .types import Array, Empty, Map, Primitive, PrimitiveKind, Ref, Type

__all__ = [
    "Alias",
    "Array",
    "Definition",
    "DefinitionMeta",
    "Empty",
    "GroupVersionKind",
    "Map",
    "NamedProperty",
    "Object",
    "Primitive",
    "PrimitiveKind",
    "Ref",
    "Registry",
    "Type",
    "build_registry",
    "is_kubernetes_object",
    "type_refs",
]
