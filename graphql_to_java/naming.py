"""
Java identifiers for schema types, fields and enum values.
"""

from __future__ import annotations

from .config import FIELD_CASE_SNAKE, NamingConfig
from .schema.directives import extract_java_name
from .schema.model import EnumValueDefinition, FieldDefinition, TypeDefinition, TypeKind
from .utils import capitalize_first, to_camel_case, to_snake_case

JAVA_KEYWORDS = frozenset(
    {
        "abstract", "assert", "boolean", "break", "byte", "case", "catch", "char",
        "class", "const", "continue", "default", "do", "double", "else", "enum",
        "extends", "final", "finally", "float", "for", "goto", "if", "implements",
        "import", "instanceof", "int", "interface", "long", "native", "new", "package",
        "private", "protected", "public", "return", "short", "static", "strictfp", "super",
        "switch", "synchronized", "this", "throw", "throws", "transient", "try", "void",
        "volatile", "while",
        # literals
        "true", "false", "null",
        # contextual keywords
        "var", "yield", "record", "sealed", "permits", "non-sealed",
    }
)  # fmt: skip

KEYWORD_ESCAPE = "_"


def is_java_keyword(word: str) -> bool:
    return word in JAVA_KEYWORDS


def escape_java_keyword(name: str) -> str:
    """Prefix reserved words with an underscore; no keyword starts with one, so this is idempotent."""
    if is_java_keyword(name):
        return KEYWORD_ESCAPE + name
    return name


class NamingHelper:
    """Applies the configured naming conventions and ``@javaName`` renames."""

    def __init__(self, config: NamingConfig | None = None):
        self.config = config or NamingConfig()

    def type_name(self, type_def: TypeDefinition) -> str:
        java_name = extract_java_name(type_def.directives)
        if java_name is not None:
            return java_name.name

        if type_def.kind == TypeKind.INTERFACE:
            return self.config.interface_prefix + type_def.name
        if type_def.kind in (TypeKind.OBJECT, TypeKind.INPUT_OBJECT):
            return type_def.name + self.config.class_suffix
        return type_def.name

    def interface_name(self, name: str) -> str:
        """Decorate an interface referenced by name only."""
        return self.config.interface_prefix + name

    def field_name(self, field_def: FieldDefinition) -> str:
        java_name = extract_java_name(field_def.directives)
        if java_name is not None:
            return escape_java_keyword(java_name.name)

        if self.config.field_case == FIELD_CASE_SNAKE:
            name = to_snake_case(field_def.name)
        else:
            name = to_camel_case(field_def.name)
        return escape_java_keyword(name)

    def enum_value_name(self, enum_value: EnumValueDefinition) -> str:
        java_name = extract_java_name(enum_value.directives)
        if java_name is not None:
            return escape_java_keyword(java_name.name)
        return escape_java_keyword(enum_value.name)

    def getter_name(self, field_name: str, is_boolean: bool = False) -> str:
        prefix = "get"
        if is_boolean and not field_name.lower().startswith("is"):
            prefix = "is"
        return prefix + capitalize_first(field_name)

    def setter_name(self, field_name: str) -> str:
        return "set" + capitalize_first(field_name)
