"""
Java classes for GraphQL object and input types.
"""

from __future__ import annotations

from ..errors import GenerateError, GeneratorError
from ..schema.directives import is_skipped_field
from .base import TypeGenerator
from .context import FieldContext, TypeContext
from .fields import FieldRenderer


class ClassGenerator(TypeGenerator):
    TEMPLATE = "class.java.jinja2"

    def __init__(self):
        super().__init__()
        self.fields = FieldRenderer()

    def generate_body(self, tc: TypeContext) -> str:
        context = tc.context
        type_def = tc.type_def

        header = self.header_lines(
            tc,
            [
                context.custom.deprecated_annotation(type_def.directives),
                context.lombok.type_annotations(type_def),
                context.validation.type_annotations(type_def),
                context.custom.type_annotations(type_def),
            ],
        )

        field_contexts = []
        members = []
        for field_def in type_def.fields:
            if is_skipped_field(field_def):
                continue
            try:
                fc = FieldContext.create(tc, field_def)
            except GeneratorError as e:
                raise GenerateError(
                    "failed to create field context", cause=e, type_name=type_def.name, field_name=field_def.name
                ) from e
            field_contexts.append(fc)
            members.append(self.fields.render_field(fc))

        # Lombok generates the accessors itself when @Data or @Getter/@Setter are on
        if context.lombok.needs_accessors(type_def):
            for fc in field_contexts:
                members.append(self.fields.render_getter(fc))
                members.append(self.fields.render_setter(fc))

        return self.type_template.render(
            header=header,
            name=tc.type_name,
            interfaces=[context.interface_reference(name) for name in type_def.interfaces],
            members=members,
        )
