"""
Java types for GraphQL scalars.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ScalarInfo:
    """Java representation of a scalar.

    ``primitive_type`` is the unboxed form, used for non-null fields when the
    scalar has one (``int`` for ``Integer``).
    """

    java_type: str
    primitive_type: str = ""
    imports: tuple[str, ...] = field(default_factory=tuple)


# GraphQL built-in scalars
BUILTIN_SCALARS: dict[str, ScalarInfo] = {
    "String": ScalarInfo("String"),
    "Int": ScalarInfo("Integer", "int"),
    "Float": ScalarInfo("Double", "double"),
    "Boolean": ScalarInfo("Boolean", "boolean"),
    "ID": ScalarInfo("String"),
}

# Custom scalars found in most real-world schemas
COMMON_SCALARS: dict[str, ScalarInfo] = {
    "DateTime": ScalarInfo("LocalDateTime", imports=("java.time.LocalDateTime",)),
    "Date": ScalarInfo("LocalDate", imports=("java.time.LocalDate",)),
    "Time": ScalarInfo("LocalTime", imports=("java.time.LocalTime",)),
    "Instant": ScalarInfo("Instant", imports=("java.time.Instant",)),
    "UUID": ScalarInfo("UUID", imports=("java.util.UUID",)),
    "BigDecimal": ScalarInfo("BigDecimal", imports=("java.math.BigDecimal",)),
    "BigInteger": ScalarInfo("BigInteger", imports=("java.math.BigInteger",)),
    "Long": ScalarInfo("Long", "long"),
    "Short": ScalarInfo("Short", "short"),
    "Byte": ScalarInfo("Byte", "byte"),
    "Char": ScalarInfo("Character", "char"),
    "JSON": ScalarInfo("JsonNode", imports=("com.fasterxml.jackson.databind.JsonNode",)),
    "JSONObject": ScalarInfo("ObjectNode", imports=("com.fasterxml.jackson.databind.node.ObjectNode",)),
    "JSONArray": ScalarInfo("ArrayNode", imports=("com.fasterxml.jackson.databind.node.ArrayNode",)),
    "URL": ScalarInfo("URL", imports=("java.net.URL",)),
    "URI": ScalarInfo("URI", imports=("java.net.URI",)),
}

PRIMITIVE_TO_BOXED: dict[str, str] = {
    "int": "Integer",
    "long": "Long",
    "short": "Short",
    "byte": "Byte",
    "float": "Float",
    "double": "Double",
    "boolean": "Boolean",
    "char": "Character",
}

BOXED_TO_PRIMITIVE: dict[str, str] = {boxed: primitive for primitive, boxed in PRIMITIVE_TO_BOXED.items()}


def is_primitive(java_type: str) -> bool:
    return java_type in PRIMITIVE_TO_BOXED


def is_boxed(java_type: str) -> bool:
    return java_type in BOXED_TO_PRIMITIVE


def box_type(java_type: str) -> str:
    """Return the wrapper class of a primitive; any other type is returned unchanged."""
    return PRIMITIVE_TO_BOXED.get(java_type, java_type)


def unbox_type(java_type: str) -> str:
    """Return the primitive of a wrapper class; any other type is returned unchanged."""
    return BOXED_TO_PRIMITIVE.get(java_type, java_type)
