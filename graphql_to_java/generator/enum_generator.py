"""
Java enums for GraphQL enum types.
"""

from __future__ import annotations

from ..annotations import AnnotationList
from ..schema.directives import extract_skip
from .base import TypeGenerator, javadoc_lines
from .context import TypeContext


class EnumGenerator(TypeGenerator):
    TEMPLATE = "enum.java.jinja2"

    def generate_body(self, tc: TypeContext) -> str:
        context = tc.context
        type_def = tc.type_def

        header = self.header_lines(
            tc,
            [
                context.custom.deprecated_annotation(type_def.directives),
                context.custom.type_annotations(type_def),
            ],
        )

        # The template puts ";" after the last retained constant, so skipped
        # values are filtered out before rendering.
        constants = []
        for value in type_def.enum_values:
            if extract_skip(value.directives) is not None:
                continue
            annotations = AnnotationList()
            annotations.extend(context.custom.deprecated_annotation(value.directives))
            annotations.extend(context.custom.enum_value_annotations(value))
            tc.imports.add_all(annotations.imports)
            constants.append(
                {
                    "name": context.naming.enum_value_name(value),
                    "doc": javadoc_lines(value.description),
                    "annotations": annotations.annotations,
                }
            )

        return self.type_template.render(header=header, name=tc.type_name, constants=constants)
