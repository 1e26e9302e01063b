"""
Rendering of fields, accessors and interface methods.
"""

from __future__ import annotations

from ..annotations import AnnotationList
from .base import java_environment, javadoc_lines
from .context import FieldContext


class FieldRenderer:
    """Renders the members generated for one schema field."""

    def __init__(self):
        env = java_environment()
        self.field_template = env.get_template("field.java.jinja2")
        self.getter_template = env.get_template("getter.java.jinja2")
        self.setter_template = env.get_template("setter.java.jinja2")
        self.method_template = env.get_template("interface_method.java.jinja2")

    def field_annotations(self, fc: FieldContext) -> AnnotationList:
        context = fc.type_context.context
        field_def = fc.field_def
        annotations = AnnotationList()
        annotations.extend(context.custom.deprecated_annotation(field_def.directives))
        annotations.extend(context.validation.field_annotations(field_def, fc.is_non_null))
        annotations.extend(context.custom.json_property_annotation(field_def, fc.field_name))
        annotations.extend(context.custom.field_annotations(field_def))
        return annotations

    def render_field(self, fc: FieldContext) -> str:
        imports = fc.type_context.imports
        imports.add_all(fc.imports)
        annotations = self.field_annotations(fc)
        imports.add_all(annotations.imports)

        visibility = fc.type_context.context.visibility
        return self.field_template.render(
            doc=javadoc_lines(fc.field_def.description),
            annotations=annotations.annotations,
            modifier=f"{visibility} " if visibility else "",
            java_type=fc.java_type,
            name=fc.field_name,
        )

    def render_getter(self, fc: FieldContext) -> str:
        naming = fc.type_context.context.naming
        return self.getter_template.render(
            java_type=fc.java_type,
            method=naming.getter_name(fc.field_name, fc.is_boolean()),
            name=fc.field_name,
        )

    def render_setter(self, fc: FieldContext) -> str:
        naming = fc.type_context.context.naming
        return self.setter_template.render(
            java_type=fc.java_type,
            method=naming.setter_name(fc.field_name),
            name=fc.field_name,
        )

    def render_interface_method(self, fc: FieldContext) -> str:
        """Abstract getter declared by an interface for one of its fields."""
        context = fc.type_context.context
        imports = fc.type_context.imports
        imports.add_all(fc.imports)

        annotations = AnnotationList()
        annotations.extend(context.custom.deprecated_annotation(fc.field_def.directives))
        annotations.extend(context.custom.field_annotations(fc.field_def))
        imports.add_all(annotations.imports)

        return self.method_template.render(
            doc=javadoc_lines(fc.field_def.description),
            annotations=annotations.annotations,
            java_type=fc.java_type,
            method=context.naming.getter_name(fc.field_name, fc.is_boolean()),
        )
