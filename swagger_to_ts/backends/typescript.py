"""
TypeScript code generation backend.

Renders definitions as TypeScript classes, interfaces, namespaces and type
aliases. Objects become classes whose constructor takes a plain "descriptor"
value and builds typed fields from it; objects with a Group/Version/Kind also
get a type guard and a companion namespace holding their identity constants.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import assert_never

import jinja2

from ..config import TypeGenConfig
from ..model import (
    Alias,
    Array,
    Definition,
    Empty,
    Map,
    NamedProperty,
    Object,
    Primitive,
    PrimitiveKind,
    Ref,
    Registry,
    Type,
    is_kubernetes_object,
)
from ..utils import indent, package_alias, print_description

logger = logging.getLogger(__name__)

# Integer and number both map to number; precision is not kept.
PRIMITIVE_TYPES = {
    PrimitiveKind.BOOLEAN: "boolean",
    PrimitiveKind.INTEGER: "number",
    PrimitiveKind.NUMBER: "number",
    PrimitiveKind.STRING: "string",
}

# Fields supplied by the type itself when it has a GVK
IDENTITY_FIELDS = ("apiVersion", "kind")

# Required fields that named() can satisfy
NAMED_FIELDS = ("metadata", "apiVersion", "kind")


def render_type(current_package: str, t: Type) -> str:
    """
    Translate a model type to a TypeScript type expression.

    Args:
        current_package: Package of the file being generated
        t: The type

    Returns:
        TypeScript type string
    """
    match t:
        case Empty():
            return "object"
        case Primitive(kind=kind):
            return PRIMITIVE_TYPES[kind]
        case Ref(package=package, name=name):
            # Packages sharing their last three segments get the same alias; not detected.
            if package == current_package:
                return name
            return f"{package_alias(package)}.{name}"
        case Array(items=items):
            return f"{render_type(current_package, items)}[]"
        case Map(values=values):
            return f"{{[key: string]: {render_type(current_package, values)}}}"
        case _:
            assert_never(t)


def print_class_field(current_package: str, prop: NamedProperty) -> str:
    """Field declaration inside a class body."""
    optional = "" if prop.required else "?"
    return f"{print_description(prop.description)}public {prop.name}{optional}: {render_type(current_package, prop.type)};"


def print_interface_field(current_package: str, prop: NamedProperty) -> str:
    """Member declaration inside an interface body."""
    optional = "" if prop.required else "?"
    return f"{print_description(prop.description)}{prop.name}{optional}: {render_type(current_package, prop.type)};"


class TypeScriptBackend:
    """TypeScript code generation backend."""

    TEMPLATE_LANG = "typescript"
    FILE_EXTENSION = "ts"

    def __init__(self, registry: Registry, config: TypeGenConfig | None = None):
        """
        Initialize the backend.

        Args:
            registry: Top-level objects by ref, used to decide which refs are constructed
            config: Code generation configuration
        """
        self.registry = registry
        self.config = config or TypeGenConfig()
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=True,
        )
        self.prefix_template = self.jinja_env.get_template(f"prefix.{self.FILE_EXTENSION}.jinja2")
        self.file_template = self.jinja_env.get_template(f"file.{self.FILE_EXTENSION}.jinja2")

    def file_name(self, definition: Definition) -> str:
        """Name of the file a definition is written to: one file per package."""
        return f"{definition.meta().package}.{self.FILE_EXTENSION}"

    def print_header(self, definitions: Sequence[Definition]) -> str:
        """
        Render the import block for definitions sharing one file.

        All definitions are assumed to be in the package of the first one.

        Args:
            definitions: Definitions of one output file

        Returns:
            Import lines, or an empty string when nothing is imported
        """
        if not definitions:
            return ""
        current_package = definitions[0].meta().package

        packages = {ref.package for definition in definitions for ref in definition.imports()}
        packages.discard(current_package)

        # KubernetesObject is only imported when this file defines one.
        has_kubernetes_object = any(is_kubernetes_object(self.registry, d.meta().to_ref()) for d in definitions)

        header = self.prefix_template.render(
            kubernetes_object_module=self.config.kubernetes_object_module if has_kubernetes_object else None,
            imports=[(package_alias(package), package) for package in sorted(packages)],
        )
        return header.removesuffix("\n")

    def print_file(self, definitions: Sequence[Definition], generation_comment: str = "") -> str:
        """Render a whole file: header then every definition, separated by blank lines."""
        sections = []
        header = self.print_header(definitions)
        if header:
            sections.append(header)
        sections.extend(self.print_definition(d) for d in definitions)
        return self.file_template.render(generation_comment=generation_comment, sections=sections)

    def print_definition(self, definition: Definition) -> str:
        """Render one object or alias."""
        match definition:
            case Object():
                logger.debug("Rendering class %s.%s", definition.package, definition.name)
                return self.print_object(definition)
            case Alias():
                return self.print_alias(definition)
            case _:
                assert_never(definition)

    def print_alias(self, alias: Alias) -> str:
        return f"{print_description(alias.description)}export type {alias.name} = {render_type(alias.package, alias.type)};"

    def print_object(self, obj: Object) -> str:
        """
        Render an object as a class, followed by its type guard and namespace.

        Args:
            obj: The object to render

        Returns:
            TypeScript source for the class
        """
        fields = []
        constructors = []
        for prop in obj.named_properties():
            fields.append(print_class_field(obj.package, prop))

            override = None
            if obj.group_version_kinds and prop.name in IDENTITY_FIELDS:
                override = f"{obj.name}.{prop.name}"
            constructors.append(indent(self.constructor_line(obj.package, prop, override)))

        desc_type = ".".join([*obj.namespace, obj.name])
        if obj.is_kubernetes_object:
            desc_type += ".Interface"

        constructor = ""
        if obj.has_required_fields():
            optional_desc = "" if obj.has_required_fields() else "?"
            constructor = indent(f"\n\nconstructor(desc{optional_desc}: {desc_type}) {{{''.join(constructors)}\n}}")

        type_guard = ""
        if obj.group_version_kind() is not None:
            type_guard = (
                f"\n\nexport function is{obj.name}(o: any): o is {obj.name} {{\n"
                f"  return o && o.apiVersion === {obj.name}.apiVersion && o.kind === {obj.name}.kind;\n"
                "}"
            )

        implements = " implements KubernetesObject" if obj.is_kubernetes_object else ""
        body = indent("\n\n".join(fields))

        return (
            f"{print_description(obj.description)}export class {obj.name}{implements} {{\n"
            f"{body}{constructor}\n"
            f"}}{type_guard}{self.print_namespace(obj)}"
        )

    def print_namespace(self, obj: Object) -> str:
        """Render the namespace merged with an object's class, or nothing if it would be empty."""
        gvk = obj.group_version_kind()
        if not obj.nested_types and not obj.is_kubernetes_object and gvk is None:
            return ""

        classes = []
        if gvk is not None:
            classes.append(indent(self.print_interface(obj)))
        for nested in sorted(obj.nested_types, key=lambda t: t.name):
            classes.append(indent(self.print_object(nested)))

        constants = ""
        if gvk is not None:
            constants = indent(
                f"export const apiVersion = {json.dumps(gvk.api_version, ensure_ascii=False)};\n"
                f"export const group = {json.dumps(gvk.group, ensure_ascii=False)};\n"
                f"export const version = {json.dumps(gvk.version, ensure_ascii=False)};\n"
                f"export const kind = {json.dumps(gvk.kind, ensure_ascii=False)};\n\n"
            )

        named = ""
        if obj.is_kubernetes_object and self._only_metadata_required(obj):
            named = indent(
                f"// named constructs a {obj.name} with metadata.name set to name.\n"
                f"export function named(name: string): {obj.name} {{\n"
                f"  return new {obj.name}({{metadata: {{name}}}});\n"
                "}\n"
            )

        members = "\n".join(classes)
        return f"\n\nexport namespace {obj.name} {{\n{constants}{named}{members}\n}}"

    def print_interface(self, obj: Object) -> str:
        """Render the structural interface of an object, without apiVersion and kind."""
        has_gvk = obj.group_version_kind() is not None
        properties = [
            print_interface_field(obj.package, prop)
            for prop in obj.named_properties()
            if not (has_gvk and prop.name in IDENTITY_FIELDS)
        ]
        body = indent("\n\n".join(properties))
        return f"{print_description(obj.description)}export interface Interface {{\n{body}\n}}"

    def _only_metadata_required(self, obj: Object) -> bool:
        return not any(p.required and name not in NAMED_FIELDS for name, p in obj.properties.items())

    def constructor_line(self, current_package: str, prop: NamedProperty, override: str | None = None) -> str:
        """
        Render the constructor statement assigning one field.

        Args:
            current_package: Package of the object being rendered
            prop: The property to assign
            override: Expression used instead of reading the descriptor

        Returns:
            The statement, preceded by a newline
        """
        if override is not None:
            value = override
        else:
            value = self.constructor_expression(current_package, prop.type, f"desc.{prop.name}")
            if not prop.required and self._is_object_array(prop.type):
                value = f"(desc.{prop.name} !== undefined) ? {value} : undefined"
        return f"\nthis.{prop.name} = {value};"

    def constructor_expression(self, current_package: str, t: Type, field: str) -> str:
        """
        Build the expression converting a raw descriptor value to a typed field.

        Args:
            current_package: Package of the object being rendered
            t: Declared type of the field
            field: Expression reading the raw value

        Returns:
            TypeScript expression producing the field value
        """
        match t:
            case Empty() | Primitive():
                return field
            case Ref():
                if is_kubernetes_object(self.registry, t):
                    return f"new {render_type(current_package, t)}({field})"
                return field
            case Array(items=items):
                # Only one level deep: arrays of arrays of objects keep raw values.
                if isinstance(items, Ref) and is_kubernetes_object(self.registry, items):
                    return f"{field}.map((i) => {self.constructor_expression(current_package, items, 'i')})"
                return field
            case Map():
                # Map values are kept raw even when they are objects.
                return field
            case _:
                assert_never(t)

    def _is_object_array(self, t: Type) -> bool:
        return isinstance(t, Array) and isinstance(t.items, Ref) and is_kubernetes_object(self.registry, t.items)
