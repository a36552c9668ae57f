"""
Ref resolution registry.

Maps refs to the top-level objects they denote. Built once before rendering
and only read afterwards.
"""

from __future__ import annotations

from collections.abc import Iterable

from .definitions import Definition, Object
from .types import Ref

Registry = dict[Ref, Object]


def build_registry(definitions: Iterable[Definition]) -> Registry:
    """Index every top-level Object by its ref."""
    registry: Registry = {}
    for definition in definitions:
        if isinstance(definition, Object):
            registry[definition.meta().to_ref()] = definition
    return registry


def is_kubernetes_object(registry: Registry, ref: Ref) -> bool:
    """Whether ref resolves to an object carrying Kubernetes identity."""
    obj = registry.get(ref)
    return obj is not None and obj.is_kubernetes_object
