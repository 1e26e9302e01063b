"""
Mapping of GraphQL type references to Java types.

Resolution order for a named type:
    1. scalar mappings from the configuration
    2. GraphQL built-in scalars
    3. common custom scalars (DateTime, UUID, ...)
    4. types declared in the schema, with their Java name decoration
    5. anything else is passed through unchanged (reported by ``validate``)

Nullable top-level named references follow the configured nullable handling;
non-null top-level scalars use their primitive form when they have one.
Lists are never wrapped in Optional and their elements are always boxed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from ..config import NULLABLE_OPTIONAL, GeneratorConfig
from ..errors import TypeMappingError, TypeMappingWarning
from ..naming import NamingHelper
from ..schema.directives import extract_collection, extract_java_type, extract_skip, is_skipped_field
from ..schema.model import FieldDefinition, Schema, TypeDefinition, TypeKind, TypeReference
from .collections import OPTIONAL_IMPORTS, format_collection_type, format_optional_type, get_collection_info
from .scalars import BUILTIN_SCALARS, COMMON_SCALARS, ScalarInfo, box_type, is_primitive

logger = logging.getLogger(__name__)


@dataclass
class MappingResult:
    """Java type chosen for one type reference."""

    java_type: str
    imports: list[str] = field(default_factory=list)
    is_primitive: bool = False
    is_collection: bool = False
    is_optional: bool = False
    # Element type of a collection, boxed
    element_type: str = ""


class TypeMapper:
    """Maps GraphQL type references to Java types for one generation run."""

    def __init__(self, config: GeneratorConfig, naming: NamingHelper | None = None):
        self.config = config
        self.naming = naming or NamingHelper(config.java.naming)
        self.custom_scalars: dict[str, ScalarInfo] = {
            name: ScalarInfo(mapping.java_type, mapping.primitive_type, tuple(mapping.imports))
            for name, mapping in config.type_mappings.scalars.items()
            if mapping.java_type
        }
        self.schema_types: dict[str, TypeDefinition] = {}

    def set_schema_types(self, types: dict[str, TypeDefinition] | Schema) -> None:
        if isinstance(types, Schema):
            types = types.types
        self.schema_types = types

    def lookup_scalar(self, name: str) -> ScalarInfo | None:
        """Return the scalar entry for ``name``, honouring configuration overrides."""
        for table in (self.custom_scalars, BUILTIN_SCALARS, COMMON_SCALARS):
            if name in table:
                return table[name]
        return None

    def is_known(self, name: str) -> bool:
        return self.lookup_scalar(name) is not None or name in self.schema_types

    def map_type(self, type_ref: TypeReference | None) -> MappingResult:
        """Map a field-level type reference."""
        if type_ref is None:
            return MappingResult(java_type="Object")
        return self._map_type(type_ref, top_level=True)

    def _map_type(self, type_ref: TypeReference, top_level: bool) -> MappingResult:
        if type_ref.element is not None and type_ref.name:
            raise TypeMappingError("type reference is both a list and a named type", source_type=str(type_ref))

        if type_ref.element is not None:
            return self._map_list(type_ref)

        if not type_ref.name:
            raise TypeMappingError("type reference has neither a name nor an element type")

        result = self._map_named(type_ref.name)

        if top_level and not type_ref.non_null:
            self._apply_nullability(result)
        elif top_level:
            scalar = self.lookup_scalar(type_ref.name)
            if scalar is not None and scalar.primitive_type:
                result.java_type = scalar.primitive_type
                result.is_primitive = True
        return result

    def _map_list(self, type_ref: TypeReference) -> MappingResult:
        try:
            element = self._map_type(type_ref.element, top_level=False)
        except TypeMappingError as e:
            raise TypeMappingError(
                "failed to map list element type", cause=e, source_type=type_ref.element.innermost_named_type()
            ) from e

        element_type = box_type(element.java_type) if element.is_primitive else element.java_type
        collection_type = self.config.java.collection_type
        return MappingResult(
            java_type=format_collection_type(collection_type, element_type),
            imports=list(get_collection_info(collection_type).imports) + element.imports,
            is_collection=True,
            element_type=element_type,
        )

    def _map_named(self, name: str) -> MappingResult:
        if name in self.custom_scalars:
            scalar = self.custom_scalars[name]
            return MappingResult(
                java_type=scalar.java_type,
                imports=list(scalar.imports),
                is_primitive=is_primitive(scalar.java_type),
            )

        # Built-in and common scalars default to their wrapper class
        for table in (BUILTIN_SCALARS, COMMON_SCALARS):
            if name in table:
                return MappingResult(java_type=table[name].java_type, imports=list(table[name].imports))

        type_def = self.schema_types.get(name)
        if type_def is not None:
            return MappingResult(java_type=self.naming.type_name(type_def))

        return MappingResult(java_type=name)

    def _apply_nullability(self, result: MappingResult) -> None:
        if self.config.java.nullable_handling == NULLABLE_OPTIONAL:
            result.java_type = format_optional_type(result.java_type)
            result.imports.extend(OPTIONAL_IMPORTS)
            result.is_optional = True
            result.is_primitive = False
            return

        # Wrapper and annotation handling both need a nullable Java type
        if result.is_primitive:
            result.java_type = box_type(result.java_type)
            result.is_primitive = False

    def map_field(self, field_def: FieldDefinition) -> MappingResult:
        """Map a field, honouring its ``@javaType`` and ``@collection`` directives."""
        java_type = extract_java_type(field_def.directives)
        if java_type is not None:
            return MappingResult(java_type=java_type.type, imports=list(java_type.imports))

        result = self.map_type(field_def.type)

        collection = extract_collection(field_def.directives)
        if collection is not None and result.is_collection:
            element = self._map_type(field_def.type.element, top_level=False)
            result.java_type = format_collection_type(collection.type, result.element_type)
            result.imports = list(get_collection_info(collection.type).imports) + element.imports
        return result

    def validate(self, type_ref: TypeReference | None) -> TypeMappingWarning | None:
        """Return a warning for the first leaf type that no known source resolves."""
        if type_ref is None:
            return None
        if type_ref.element is not None:
            return self.validate(type_ref.element)
        if type_ref.name and not self.is_known(type_ref.name):
            return TypeMappingWarning(type_name=type_ref.name)
        return None

    def validate_schema(self, types: Iterable[TypeDefinition]) -> list[TypeMappingWarning]:
        """Collect warnings for the emitted fields of ``types`` that reference an unknown type."""
        warnings = []
        for type_def in types:
            if type_def.kind == TypeKind.SCALAR or extract_skip(type_def.directives) is not None:
                continue
            for field_def in type_def.fields:
                if is_skipped_field(field_def) or extract_java_type(field_def.directives) is not None:
                    continue
                warning = self.validate(field_def.type)
                if warning is not None:
                    warning.message = f"unknown type in {type_def.name}.{field_def.name}, will use as-is"
                    logger.debug("%s", warning)
                    warnings.append(warning)
        return warnings
