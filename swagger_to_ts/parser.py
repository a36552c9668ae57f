"""
Swagger parser that builds definitions.

Reads the ``definitions`` section of a Swagger 2.0 document (such as the
Kubernetes OpenAPI dump) into Objects and Aliases. Definition keys are dotted
paths whose last segment is the name and whose prefix is the package.
"""

from __future__ import annotations

import logging
from typing import Any

from .config import TypeGenConfig
from .exceptions import SchemaParseError
from .model import (
    Alias,
    Array,
    Definition,
    Empty,
    GroupVersionKind,
    Map,
    NamedProperty,
    Object,
    Primitive,
    PrimitiveKind,
    Ref,
    Type,
)
from .utils import snake_to_pascal_case

logger = logging.getLogger(__name__)


def split_definition_key(key: str) -> tuple[str, str]:
    """Split "io.k8s.api.core.v1.Pod" into ("io.k8s.api.core.v1", "Pod")."""
    package, _, name = key.rpartition(".")
    return package, name


class SwaggerParser:
    """Parses Swagger definitions into the definition model."""

    PRIMITIVE_TYPES = {
        "boolean": PrimitiveKind.BOOLEAN,
        "integer": PrimitiveKind.INTEGER,
        "number": PrimitiveKind.NUMBER,
        "string": PrimitiveKind.STRING,
    }

    REF_PREFIX = "#/definitions/"

    GVK_EXTENSION = "x-kubernetes-group-version-kind"

    # Properties an object needs, together with a GVK, to be a KubernetesObject
    KUBERNETES_OBJECT_FIELDS = ("apiVersion", "kind", "metadata")

    # Name of an inline object whose property name has no letters or digits
    DEFAULT_NESTED_NAME = "Nested"

    # Namespace members emitted for every object with a GVK
    RESERVED_NESTED_NAMES = ("Interface",)

    def __init__(self, config: TypeGenConfig | None = None):
        self.config = config or TypeGenConfig()

    def parse(self, swagger: dict[str, Any]) -> list[Definition]:
        """
        Parse a Swagger document into definitions.

        Args:
            swagger: The Swagger document

        Returns:
            Definitions in document order
        """
        definitions = swagger.get("definitions", {})
        if not isinstance(definitions, dict):
            raise SchemaParseError("#/definitions", "expected a mapping of definitions")

        result: list[Definition] = []
        for key, schema in definitions.items():
            if key in self.config.ignore_definitions:
                logger.debug("Skipping ignored definition %s", key)
                continue
            result.append(self._parse_definition(key, schema))

        logger.debug("Parsed %d definitions", len(result))
        return result

    def _parse_definition(self, key: str, schema: dict[str, Any]) -> Definition:
        path = f"{self.REF_PREFIX}{key}"
        if not isinstance(schema, dict):
            raise SchemaParseError(path, "expected a schema object")

        package, name = split_definition_key(key)
        if self._is_object(schema):
            return self._parse_object(schema, name, package, [], path)

        return Alias(
            name=name,
            package=package,
            description=schema.get("description", ""),
            type=self._parse_type(schema, None, name, path),
        )

    def _is_object(self, schema: dict[str, Any]) -> bool:
        """Whether a definition becomes a class rather than a type alias."""
        if "properties" in schema:
            return True
        return schema.get("type") == "object" and "additionalProperties" not in schema

    def _parse_object(
        self,
        schema: dict[str, Any],
        name: str,
        package: str,
        namespace: list[str],
        path: str,
    ) -> Object:
        """
        Parse an object schema, collecting inline objects as nested types.

        Args:
            schema: The object schema
            name: Object name
            package: Package of the object
            namespace: Names of the enclosing objects
            path: Current path in the document (for error messages)

        Returns:
            The parsed Object
        """
        obj = Object(
            name=name,
            package=package,
            namespace=list(namespace),
            description=schema.get("description", ""),
        )

        required = set(schema.get("required") or [])
        for prop_name, prop_schema in (schema.get("properties") or {}).items():
            prop_path = f"{path}/properties/{prop_name}"
            if not isinstance(prop_schema, dict):
                raise SchemaParseError(prop_path, "expected a schema object")
            obj.properties[prop_name] = NamedProperty(
                name=prop_name,
                type=self._parse_type(prop_schema, obj, snake_to_pascal_case(prop_name), prop_path),
                required=prop_name in required,
                description=prop_schema.get("description", ""),
            )

        obj.group_version_kinds = [
            GroupVersionKind(
                group=gvk.get("group", ""),
                version=gvk.get("version", ""),
                kind=gvk.get("kind", ""),
            )
            for gvk in schema.get(self.GVK_EXTENSION) or []
        ]
        obj.is_kubernetes_object = bool(obj.group_version_kinds) and all(
            field in obj.properties for field in self.KUBERNETES_OBJECT_FIELDS
        )
        return obj

    def _parse_type(self, schema: dict[str, Any], owner: Object | None, nested_name: str, path: str) -> Type:
        """
        Parse a property schema into a type.

        Args:
            schema: The property schema
            owner: Object that owns inline objects found here, None for aliases
            nested_name: Name given to an inline object found here
            path: Current path in the document (for error messages)

        Returns:
            The parsed type
        """
        if "$ref" in schema:
            return self._parse_ref(schema["$ref"], path)

        type_name = schema.get("type")
        if type_name is not None and not isinstance(type_name, str):
            raise SchemaParseError(path, f"unsupported type {type_name!r}")
        if type_name in self.PRIMITIVE_TYPES:
            return Primitive(kind=self.PRIMITIVE_TYPES[type_name])

        if type_name == "array":
            items = schema.get("items")
            if not isinstance(items, dict):
                return Array(items=Empty())
            return Array(items=self._parse_type(items, owner, f"{nested_name}Item", f"{path}/items"))

        if type_name == "object" or "properties" in schema:
            if "properties" in schema and owner is not None:
                return self._parse_nested_object(schema, owner, nested_name, path)

            additional = schema.get("additionalProperties")
            if isinstance(additional, dict):
                return Map(values=self._parse_type(additional, owner, f"{nested_name}Value", f"{path}/additionalProperties"))
            if additional is True:
                return Map(values=Empty())

        return Empty()

    def _parse_nested_object(self, schema: dict[str, Any], owner: Object, name: str, path: str) -> Ref:
        """Parse an inline object into a nested type of owner and return a ref to it."""
        namespace = [*owner.namespace, owner.name]
        name = self._nested_type_name(owner, name)
        nested = self._parse_object(schema, name, owner.package, namespace, path)
        owner.nested_types.append(nested)
        # Nested types are referenced through the enclosing namespaces.
        return Ref(package=owner.package, name=".".join([*namespace, name]))

    def _nested_type_name(self, owner: Object, name: str) -> str:
        """
        Turn a name derived from a property into a class name unique within owner's namespace.

        Names that are empty get DEFAULT_NESTED_NAME, names starting with a digit
        get a leading underscore. A name already taken gets the first free
        numeric suffix, starting at 2, in property order.
        """
        if not name:
            name = self.DEFAULT_NESTED_NAME
        elif name[0].isdigit():
            name = f"_{name}"

        taken = {nested.name for nested in owner.nested_types}
        taken.update(self.RESERVED_NESTED_NAMES)
        candidate = name
        suffix = 2
        while candidate in taken:
            candidate = f"{name}{suffix}"
            suffix += 1
        return candidate

    def _parse_ref(self, ref: str, path: str) -> Ref:
        if not ref.startswith(self.REF_PREFIX):
            raise SchemaParseError(path, f"unsupported $ref '{ref}'")
        package, name = split_definition_key(ref[len(self.REF_PREFIX) :])
        return Ref(package=package, name=name)
