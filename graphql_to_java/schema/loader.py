"""
Loading of GraphQL SDL documents into the schema model.

Documents are parsed with graphql-core but not validated as an executable
schema, so the generator directives (``@javaName``, ``@constraint``...) can be
used without being declared. Type extensions are merged into the type they
extend.
"""

from __future__ import annotations

import glob
import logging
import os
from typing import Iterable, Sequence

from graphql import GraphQLSyntaxError, Source, parse
from graphql.language import ast

from ..errors import Location, ParseError
from .model import (
    ArgumentDefinition,
    Directive,
    DirectiveValue,
    DirectiveValueKind,
    EnumValueDefinition,
    FieldDefinition,
    Schema,
    TypeDefinition,
    TypeKind,
    TypeReference,
)

logger = logging.getLogger(__name__)

BUILTIN_TYPE_NAMES = frozenset({"String", "Int", "Float", "Boolean", "ID"})

_DEFINITION_KINDS: dict[type, TypeKind] = {
    ast.ObjectTypeDefinitionNode: TypeKind.OBJECT,
    ast.ObjectTypeExtensionNode: TypeKind.OBJECT,
    ast.InterfaceTypeDefinitionNode: TypeKind.INTERFACE,
    ast.InterfaceTypeExtensionNode: TypeKind.INTERFACE,
    ast.InputObjectTypeDefinitionNode: TypeKind.INPUT_OBJECT,
    ast.InputObjectTypeExtensionNode: TypeKind.INPUT_OBJECT,
    ast.EnumTypeDefinitionNode: TypeKind.ENUM,
    ast.EnumTypeExtensionNode: TypeKind.ENUM,
    ast.UnionTypeDefinitionNode: TypeKind.UNION,
    ast.UnionTypeExtensionNode: TypeKind.UNION,
    ast.ScalarTypeDefinitionNode: TypeKind.SCALAR,
    ast.ScalarTypeExtensionNode: TypeKind.SCALAR,
}


def _description(node) -> str:
    description = getattr(node, "description", None)
    return description.value if description is not None else ""


def convert_value(node: ast.ValueNode | None) -> DirectiveValue:
    """Convert a literal from the document to a DirectiveValue."""
    if node is None or isinstance(node, (ast.NullValueNode, ast.VariableNode)):
        return DirectiveValue(DirectiveValueKind.NULL)
    if isinstance(node, ast.StringValueNode):
        return DirectiveValue(DirectiveValueKind.STRING, node.value)
    if isinstance(node, ast.IntValueNode):
        return DirectiveValue(DirectiveValueKind.INT, int(node.value))
    if isinstance(node, ast.FloatValueNode):
        return DirectiveValue(DirectiveValueKind.FLOAT, float(node.value))
    if isinstance(node, ast.BooleanValueNode):
        return DirectiveValue(DirectiveValueKind.BOOLEAN, node.value)
    if isinstance(node, ast.EnumValueNode):
        return DirectiveValue(DirectiveValueKind.ENUM, node.value)
    if isinstance(node, ast.ListValueNode):
        return DirectiveValue(DirectiveValueKind.LIST, tuple(convert_value(v) for v in node.values))
    if isinstance(node, ast.ObjectValueNode):
        return DirectiveValue(
            DirectiveValueKind.OBJECT, {f.name.value: convert_value(f.value) for f in node.fields}
        )
    raise ParseError(f"unsupported value node: {type(node).__name__}")


def convert_type(node: ast.TypeNode) -> TypeReference:
    if isinstance(node, ast.NonNullTypeNode):
        inner = convert_type(node.type)
        inner.non_null = True
        return inner
    if isinstance(node, ast.ListTypeNode):
        return TypeReference.list_of(convert_type(node.type))
    return TypeReference.named(node.name.value)


def convert_directives(nodes: Iterable[ast.DirectiveNode] | None) -> list[Directive]:
    return [
        Directive(node.name.value, {arg.name.value: convert_value(arg.value) for arg in node.arguments or ()})
        for node in nodes or ()
    ]


def _convert_default(node: ast.ValueNode | None):
    if node is None:
        return None
    return convert_value(node).to_python()


def _convert_field(node: ast.FieldDefinitionNode | ast.InputValueDefinitionNode) -> FieldDefinition:
    arguments = [
        ArgumentDefinition(
            name=arg.name.value,
            type=convert_type(arg.type),
            description=_description(arg),
            default_value=_convert_default(arg.default_value),
        )
        for arg in getattr(node, "arguments", None) or ()
    ]
    return FieldDefinition(
        name=node.name.value,
        type=convert_type(node.type),
        description=_description(node),
        directives=convert_directives(node.directives),
        default_value=_convert_default(getattr(node, "default_value", None)),
        arguments=arguments,
    )


def _convert_type_definition(node: ast.TypeSystemDefinitionNode, kind: TypeKind) -> TypeDefinition:
    type_def = TypeDefinition(
        name=node.name.value,
        kind=kind,
        description=_description(node),
        directives=convert_directives(node.directives),
    )
    _merge_members(type_def, node)
    return type_def


def _merge_members(type_def: TypeDefinition, node) -> None:
    for field_node in getattr(node, "fields", None) or ():
        type_def.fields.append(_convert_field(field_node))
    for value_node in getattr(node, "values", None) or ():
        type_def.enum_values.append(
            EnumValueDefinition(
                name=value_node.name.value,
                description=_description(value_node),
                directives=convert_directives(value_node.directives),
            )
        )
    for interface in getattr(node, "interfaces", None) or ():
        if interface.name.value not in type_def.interfaces:
            type_def.interfaces.append(interface.name.value)


def _location(source: Source, node) -> Location:
    if node.loc is None:
        return Location(file=source.name)
    loc = source.get_location(node.loc.start)
    return Location(file=source.name, line=loc.line, column=loc.column)


def _parse_document(source: Source) -> ast.DocumentNode:
    try:
        return parse(source)
    except GraphQLSyntaxError as e:
        location = Location(file=source.name)
        if e.locations:
            location = Location(file=source.name, line=e.locations[0].line, column=e.locations[0].column)
        raise ParseError("failed to parse GraphQL schema", cause=e, location=location) from e


def _build_schema(sources: Sequence[Source]) -> Schema:
    schema = Schema()
    extensions: list[tuple[Source, ast.TypeExtensionNode, TypeKind]] = []

    for source in sources:
        document = _parse_document(source)
        for definition in document.definitions:
            kind = _DEFINITION_KINDS.get(type(definition))
            if kind is None:
                # schema, directive and operation definitions carry no types
                continue
            if isinstance(definition, ast.TypeExtensionNode):
                extensions.append((source, definition, kind))
                continue
            name = definition.name.value
            if name in BUILTIN_TYPE_NAMES or name.startswith("__"):
                continue
            if name in schema:
                raise ParseError(
                    f"type {name} is defined more than once",
                    location=_location(source, definition),
                    type_name=name,
                )
            schema.add(_convert_type_definition(definition, kind))

    for source, extension, kind in extensions:
        name = extension.name.value
        type_def = schema.get_type(name)
        if type_def is None:
            raise ParseError(
                f"cannot extend undefined type {name}", location=_location(source, extension), type_name=name
            )
        if type_def.kind != kind:
            raise ParseError(
                f"cannot extend {type_def.kind.value} type {name} as {kind.value}",
                location=_location(source, extension),
                type_name=name,
            )
        type_def.directives.extend(convert_directives(extension.directives))
        _merge_members(type_def, extension)

    logger.debug("Loaded %d types from %d source(s)", len(schema), len(sources))
    return schema


def parse_schema(text: str, source_name: str = "schema.graphql") -> Schema:
    """Parse SDL text into a Schema."""
    return _build_schema([Source(text, source_name)])


def _read_source(path: str | os.PathLike) -> Source:
    try:
        with open(path, encoding="utf-8") as f:
            return Source(f.read(), str(path))
    except OSError as e:
        raise ParseError("failed to read schema file", cause=e, location=Location(file=str(path))) from e


def parse_schema_file(path: str | os.PathLike) -> Schema:
    return _build_schema([_read_source(path)])


def parse_schema_files(paths: Sequence[str | os.PathLike]) -> Schema:
    """Parse several files as one schema."""
    return _build_schema([_read_source(path) for path in paths])


def parse_with_includes(main_path: str | os.PathLike, include_patterns: Sequence[str] = ()) -> Schema:
    """Parse ``main_path`` plus every file matched by the glob ``include_patterns``."""
    paths = [str(main_path)]
    for pattern in include_patterns:
        paths.extend(sorted(glob.glob(pattern)))

    seen = set()
    unique_paths = []
    for path in paths:
        absolute = os.path.abspath(path)
        if absolute not in seen:
            seen.add(absolute)
            unique_paths.append(path)
    return parse_schema_files(unique_paths)
