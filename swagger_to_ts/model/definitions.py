"""
Definitions: the objects and aliases that become TypeScript declarations.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import assert_never

from .types import Array, Empty, Map, Primitive, Ref, Type


@dataclass(frozen=True)
class GroupVersionKind:
    """Group/Version/Kind identity of a Kubernetes resource."""

    group: str = ""
    version: str = ""
    kind: str = ""

    @property
    def api_version(self) -> str:
        # The core group is empty, so its apiVersion is just the version.
        if not self.group:
            return self.version
        return f"{self.group}/{self.version}"


@dataclass(frozen=True)
class DefinitionMeta:
    """Package and name of a definition."""

    package: str = ""
    name: str = ""

    def to_ref(self) -> Ref:
        return Ref(package=self.package, name=self.name)


@dataclass(frozen=True)
class NamedProperty:
    """A property of an Object."""

    name: str = ""
    type: Type = Empty()
    required: bool = False
    description: str = ""


@dataclass
class Object:
    """A schema object, rendered as a class."""

    name: str = ""
    package: str = ""

    # Names of the enclosing objects for nested types, outermost first
    namespace: list[str] = field(default_factory=list)

    description: str = ""

    # Keyed by property name, in declaration order
    properties: dict[str, NamedProperty] = field(default_factory=dict)

    # Inline object types owned by this object
    nested_types: list[Object] = field(default_factory=list)

    group_version_kinds: list[GroupVersionKind] = field(default_factory=list)

    # Whether instances satisfy the KubernetesObject contract
    is_kubernetes_object: bool = False

    def meta(self) -> DefinitionMeta:
        return DefinitionMeta(package=self.package, name=self.name)

    def named_properties(self) -> list[NamedProperty]:
        """Properties in declaration order."""
        return list(self.properties.values())

    def group_version_kind(self) -> GroupVersionKind | None:
        """The primary GVK: the first one declared, or None."""
        if not self.group_version_kinds:
            return None
        return self.group_version_kinds[0]

    def has_required_fields(self) -> bool:
        return any(p.required for p in self.properties.values())

    def imports(self) -> list[Ref]:
        """All refs used by this object's properties and nested types."""
        refs: list[Ref] = []
        for prop in self.properties.values():
            refs.extend(type_refs(prop.type))
        for nested in self.nested_types:
            refs.extend(nested.imports())
        return refs


@dataclass
class Alias:
    """A named alias for another type."""

    name: str = ""
    package: str = ""
    description: str = ""
    type: Type = Empty()

    def meta(self) -> DefinitionMeta:
        return DefinitionMeta(package=self.package, name=self.name)

    def imports(self) -> list[Ref]:
        return type_refs(self.type)


Definition = Object | Alias


def type_refs(t: Type) -> list[Ref]:
    """
    Collect the refs reachable from a type.

    Args:
        t: The type to walk

    Returns:
        Refs in the order they are encountered
    """
    match t:
        case Empty() | Primitive():
            return []
        case Ref():
            return [t]
        case Array(items=items):
            return type_refs(items)
        case Map(values=values):
            return type_refs(values)
        case _:
            assert_never(t)
