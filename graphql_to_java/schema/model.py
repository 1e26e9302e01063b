"""
In-memory model of a GraphQL schema.

The loader produces these objects from SDL text; the generator only reads
them. Directive arguments are stored as DirectiveValue, a small tagged value
covering the GraphQL literal grammar.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator


class TypeKind(str, Enum):
    OBJECT = "OBJECT"
    INTERFACE = "INTERFACE"
    INPUT_OBJECT = "INPUT_OBJECT"
    ENUM = "ENUM"
    UNION = "UNION"
    SCALAR = "SCALAR"


class DirectiveValueKind(str, Enum):
    STRING = "STRING"
    INT = "INT"
    FLOAT = "FLOAT"
    BOOLEAN = "BOOLEAN"
    ENUM = "ENUM"
    LIST = "LIST"
    OBJECT = "OBJECT"
    NULL = "NULL"


@dataclass(frozen=True)
class DirectiveValue:
    """A directive argument literal.

    The typed accessors return None when the value is of another kind, so
    callers can degrade to a default without inspecting ``kind`` themselves.
    """

    kind: DirectiveValueKind
    value: Any = None

    @staticmethod
    def wrap(value: Any) -> DirectiveValue:
        """Build a DirectiveValue from a plain Python value."""
        if isinstance(value, DirectiveValue):
            return value
        if value is None:
            return DirectiveValue(DirectiveValueKind.NULL)
        # bool is a subclass of int, check it first
        if isinstance(value, bool):
            return DirectiveValue(DirectiveValueKind.BOOLEAN, value)
        if isinstance(value, int):
            return DirectiveValue(DirectiveValueKind.INT, value)
        if isinstance(value, float):
            return DirectiveValue(DirectiveValueKind.FLOAT, value)
        if isinstance(value, str):
            return DirectiveValue(DirectiveValueKind.STRING, value)
        if isinstance(value, (list, tuple)):
            return DirectiveValue(DirectiveValueKind.LIST, tuple(DirectiveValue.wrap(v) for v in value))
        if isinstance(value, dict):
            return DirectiveValue(
                DirectiveValueKind.OBJECT, {str(k): DirectiveValue.wrap(v) for k, v in value.items()}
            )
        raise TypeError(f"Unsupported directive argument value: {value!r}")

    def as_string(self) -> str | None:
        if self.kind in (DirectiveValueKind.STRING, DirectiveValueKind.ENUM):
            return self.value
        return None

    def as_int(self) -> int | None:
        if self.kind == DirectiveValueKind.INT:
            return self.value
        if self.kind == DirectiveValueKind.FLOAT:
            # inf and nan have no integer value
            return int(self.value) if math.isfinite(self.value) else None
        return None

    def as_float(self) -> float | None:
        if self.kind in (DirectiveValueKind.INT, DirectiveValueKind.FLOAT):
            return float(self.value)
        return None

    def as_bool(self) -> bool | None:
        if self.kind == DirectiveValueKind.BOOLEAN:
            return self.value
        return None

    def as_list(self) -> tuple[DirectiveValue, ...] | None:
        if self.kind == DirectiveValueKind.LIST:
            return self.value
        return None

    def as_object(self) -> dict[str, DirectiveValue] | None:
        if self.kind == DirectiveValueKind.OBJECT:
            return self.value
        return None

    def to_python(self) -> Any:
        if self.kind == DirectiveValueKind.LIST:
            return [v.to_python() for v in self.value]
        if self.kind == DirectiveValueKind.OBJECT:
            return {k: v.to_python() for k, v in self.value.items()}
        return self.value


@dataclass
class Directive:
    name: str
    arguments: dict[str, DirectiveValue] = field(default_factory=dict)

    @staticmethod
    def of(name: str, /, **arguments: Any) -> Directive:
        """Build a directive from plain Python argument values."""
        return Directive(name, {k: DirectiveValue.wrap(v) for k, v in arguments.items()})

    def argument(self, name: str) -> DirectiveValue | None:
        return self.arguments.get(name)

    def get_string(self, name: str) -> str:
        value = self.arguments.get(name)
        return (value.as_string() if value is not None else None) or ""

    def get_int(self, name: str) -> int | None:
        value = self.arguments.get(name)
        return value.as_int() if value is not None else None

    def get_bool(self, name: str) -> bool:
        value = self.arguments.get(name)
        return bool(value.as_bool()) if value is not None else False

    def get_string_list(self, name: str) -> list[str]:
        value = self.arguments.get(name)
        if value is None:
            return []
        items = value.as_list()
        if items is None:
            # A single string is accepted where a list is expected
            single = value.as_string()
            return [single] if single else []
        return [item.as_string() for item in items if item.as_string() is not None]


@dataclass
class TypeReference:
    """A named type, or a list of another reference, with a non-null flag per level."""

    name: str | None = None
    element: TypeReference | None = None
    non_null: bool = False

    @staticmethod
    def named(name: str, non_null: bool = False) -> TypeReference:
        return TypeReference(name=name, non_null=non_null)

    @staticmethod
    def list_of(element: TypeReference, non_null: bool = False) -> TypeReference:
        return TypeReference(element=element, non_null=non_null)

    def is_list(self) -> bool:
        return self.element is not None

    def is_named(self) -> bool:
        return self.element is None and bool(self.name)

    def innermost_named_type(self) -> str:
        if self.element is not None:
            return self.element.innermost_named_type()
        return self.name or ""

    def __str__(self) -> str:
        text = f"[{self.element}]" if self.element is not None else (self.name or "?")
        return text + ("!" if self.non_null else "")


@dataclass
class ArgumentDefinition:
    name: str
    type: TypeReference
    description: str = ""
    default_value: Any = None


@dataclass
class FieldDefinition:
    name: str
    type: TypeReference | None
    description: str = ""
    directives: list[Directive] = field(default_factory=list)
    default_value: Any = None
    arguments: list[ArgumentDefinition] = field(default_factory=list)


@dataclass
class EnumValueDefinition:
    name: str
    description: str = ""
    directives: list[Directive] = field(default_factory=list)


@dataclass
class TypeDefinition:
    """One declared schema type. ``kind`` cannot change once set."""

    name: str
    kind: TypeKind
    description: str = ""
    fields: list[FieldDefinition] = field(default_factory=list)
    enum_values: list[EnumValueDefinition] = field(default_factory=list)
    interfaces: list[str] = field(default_factory=list)
    directives: list[Directive] = field(default_factory=list)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "kind" and "kind" in self.__dict__:
            raise AttributeError(f"kind of type {self.name} is immutable")
        super().__setattr__(name, value)


@dataclass
class Schema:
    """Ordered collection of type definitions keyed by name."""

    types: dict[str, TypeDefinition] = field(default_factory=dict)

    @staticmethod
    def of(*type_defs: TypeDefinition) -> Schema:
        return Schema({t.name: t for t in type_defs})

    def add(self, type_def: TypeDefinition) -> None:
        self.types[type_def.name] = type_def

    def get_type(self, name: str) -> TypeDefinition | None:
        return self.types.get(name)

    def types_by_kind(self, kind: TypeKind) -> list[TypeDefinition]:
        return [t for t in self.types.values() if t.kind == kind]

    def __iter__(self) -> Iterator[TypeDefinition]:
        return iter(self.types.values())

    def __len__(self) -> int:
        return len(self.types)

    def __contains__(self, name: object) -> bool:
        return name in self.types
