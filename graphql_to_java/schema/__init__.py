"""
GraphQL schema model, directive extraction and SDL loading.
"""

from .loader import parse_schema, parse_schema_file, parse_schema_files, parse_with_includes
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

__all__ = [
    "ArgumentDefinition",
    "Directive",
    "DirectiveValue",
    "DirectiveValueKind",
    "EnumValueDefinition",
    "FieldDefinition",
    "Schema",
    "TypeDefinition",
    "TypeKind",
    "TypeReference",
    "parse_schema",
    "parse_schema_file",
    "parse_schema_files",
    "parse_with_includes",
]
