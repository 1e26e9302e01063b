"""
Marker interfaces for GraphQL union types.

Member types are not listed; a union becomes an empty interface.
"""

from __future__ import annotations

from .base import TypeGenerator
from .context import TypeContext

DEFAULT_UNION_DOC = ["/**", " * Union type marker interface.", " */"]


class UnionGenerator(TypeGenerator):
    TEMPLATE = "union.java.jinja2"

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
        if not type_def.description:
            header = DEFAULT_UNION_DOC + header

        return self.type_template.render(header=header, name=tc.type_name)
