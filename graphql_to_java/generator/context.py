"""
Contexts shared by the per-type generators.

A GenerationContext is built once per run and only read afterwards. Each
generated type gets its own TypeContext, holding the imports collected while
its body is produced.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..annotations import CustomAnnotationGenerator, LombokGenerator, ValidationGenerator
from ..config import (
    VISIBILITY_PACKAGE,
    VISIBILITY_PRIVATE,
    VISIBILITY_PROTECTED,
    VISIBILITY_PUBLIC,
    GeneratorConfig,
)
from ..naming import NamingHelper
from ..schema.directives import extract_skip
from ..schema.model import FieldDefinition, Schema, TypeDefinition
from ..typemap import MappingResult, TypeMapper
from .imports import ImportManager

_VISIBILITY_KEYWORDS = {
    VISIBILITY_PRIVATE: "private",
    VISIBILITY_PROTECTED: "protected",
    # package-private has no keyword
    VISIBILITY_PACKAGE: "",
    VISIBILITY_PUBLIC: "public",
}


@dataclass(frozen=True)
class GenerationContext:
    config: GeneratorConfig
    schema: Schema
    type_mapper: TypeMapper
    naming: NamingHelper
    lombok: LombokGenerator
    validation: ValidationGenerator
    custom: CustomAnnotationGenerator

    @staticmethod
    def create(config: GeneratorConfig, schema: Schema) -> GenerationContext:
        naming = NamingHelper(config.java.naming)
        type_mapper = TypeMapper(config, naming)
        type_mapper.set_schema_types(schema)
        return GenerationContext(
            config=config,
            schema=schema,
            type_mapper=type_mapper,
            naming=naming,
            lombok=LombokGenerator(config.features.lombok),
            validation=ValidationGenerator(config.features.validation, config.java.nullable_handling),
            custom=CustomAnnotationGenerator(config.features.jackson),
        )

    @property
    def package(self) -> str:
        return self.config.output.package

    @property
    def visibility(self) -> str:
        return _VISIBILITY_KEYWORDS.get(self.config.java.field_visibility, "private")

    def interface_reference(self, name: str) -> str:
        """Java name of an interface referenced from an implements/extends list."""
        type_def = self.schema.get_type(name)
        if type_def is not None:
            return self.naming.type_name(type_def)
        return self.naming.interface_name(name)


@dataclass
class TypeContext:
    context: GenerationContext
    type_def: TypeDefinition
    type_name: str
    imports: ImportManager = field(default_factory=ImportManager)

    @staticmethod
    def create(context: GenerationContext, type_def: TypeDefinition) -> TypeContext:
        return TypeContext(
            context=context,
            type_def=type_def,
            type_name=context.naming.type_name(type_def),
            imports=ImportManager(context.package),
        )

    def should_skip(self) -> bool:
        return extract_skip(self.type_def.directives) is not None


@dataclass
class FieldContext:
    type_context: TypeContext
    field_def: FieldDefinition
    field_name: str
    mapping: MappingResult

    @staticmethod
    def create(type_context: TypeContext, field_def: FieldDefinition) -> FieldContext:
        """Map the field type; raises TypeMappingError when the reference is malformed."""
        context = type_context.context
        return FieldContext(
            type_context=type_context,
            field_def=field_def,
            field_name=context.naming.field_name(field_def),
            mapping=context.type_mapper.map_field(field_def),
        )

    @property
    def java_type(self) -> str:
        return self.mapping.java_type

    @property
    def imports(self) -> list[str]:
        return self.mapping.imports

    @property
    def is_non_null(self) -> bool:
        return self.field_def.type is not None and self.field_def.type.non_null

    def is_boolean(self) -> bool:
        return self.java_type in ("boolean", "Boolean")

