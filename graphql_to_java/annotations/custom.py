"""
Annotations written verbatim from ``@annotation`` and ``@deprecated`` directives.
"""

from __future__ import annotations

from typing import Sequence

from ..config import JacksonConfig
from ..schema.directives import extract_annotations, extract_deprecated
from ..schema.model import Directive, EnumValueDefinition, FieldDefinition, TypeDefinition
from .base import AnnotationList

DEPRECATED_ANNOTATION = "@Deprecated"
JSON_PROPERTY_IMPORT = "com.fasterxml.jackson.annotation.JsonProperty"


class CustomAnnotationGenerator:
    def __init__(self, jackson: JacksonConfig | None = None):
        self.jackson = jackson or JacksonConfig()

    def _pass_through(self, directives: Sequence[Directive]) -> AnnotationList:
        result = AnnotationList()
        for info in extract_annotations(directives):
            result.add(info.value, info.imports)
        return result

    def type_annotations(self, type_def: TypeDefinition) -> AnnotationList:
        return self._pass_through(type_def.directives)

    def field_annotations(self, field_def: FieldDefinition) -> AnnotationList:
        return self._pass_through(field_def.directives)

    def enum_value_annotations(self, enum_value: EnumValueDefinition) -> AnnotationList:
        return self._pass_through(enum_value.directives)

    def deprecated_annotation(self, directives: Sequence[Directive]) -> AnnotationList:
        """``@Deprecated`` when the element carries ``@deprecated``, whatever the reason."""
        result = AnnotationList()
        if extract_deprecated(directives) is not None:
            result.add(DEPRECATED_ANNOTATION)
        return result

    def json_property_annotation(self, field_def: FieldDefinition, java_name: str) -> AnnotationList:
        """Keep the GraphQL name on the wire when Jackson is enabled and the Java name differs."""
        result = AnnotationList()
        if self.jackson.enabled and java_name != field_def.name:
            result.add(f'@JsonProperty("{field_def.name}")', [JSON_PROPERTY_IMPORT])
        return result
