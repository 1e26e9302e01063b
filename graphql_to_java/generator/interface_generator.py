"""
Java interfaces for GraphQL interface types.
"""

from __future__ import annotations

from ..errors import GenerateError, GeneratorError
from ..schema.directives import is_skipped_field
from .base import TypeGenerator
from .context import FieldContext, TypeContext
from .fields import FieldRenderer


class InterfaceGenerator(TypeGenerator):
    TEMPLATE = "interface.java.jinja2"

    def __init__(self):
        super().__init__()
        self.fields = FieldRenderer()

    def generate_body(self, tc: TypeContext) -> str:
        context = tc.context
        type_def = tc.type_def

        # No Lombok on interfaces
        header = self.header_lines(
            tc,
            [
                context.custom.deprecated_annotation(type_def.directives),
                context.custom.type_annotations(type_def),
            ],
        )

        members = []
        for field_def in type_def.fields:
            if is_skipped_field(field_def):
                continue
            try:
                fc = FieldContext.create(tc, field_def)
            except GeneratorError as e:
                raise GenerateError(
                    "failed to generate interface method",
                    cause=e,
                    type_name=type_def.name,
                    field_name=field_def.name,
                ) from e
            members.append(self.fields.render_interface_method(fc))

        return self.type_template.render(
            header=header,
            name=tc.type_name,
            interfaces=[context.interface_reference(name) for name in type_def.interfaces],
            members=members,
        )
