"""
Base class for the per-type Java generators.

Generation of a type happens in two phases: the body is rendered first,
collecting the imports it needs into the type's ImportManager, then the import
block is formatted and the compilation unit is assembled around the body.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from functools import lru_cache
from pathlib import Path
from typing import Iterable

import jinja2

from ..annotations import AnnotationList
from ..schema.model import TypeDefinition
from .context import GenerationContext, TypeContext

TEMPLATE_DIR = Path(__file__).parent.parent / "templates" / "java"


@lru_cache(maxsize=None)
def java_environment() -> jinja2.Environment:
    """Jinja2 environment for the Java templates."""
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        lstrip_blocks=True,
        trim_blocks=True,
        keep_trailing_newline=True,
    )


def javadoc_lines(description: str | None) -> list[str]:
    """Javadoc comment lines for a description, without indentation."""
    if not description:
        return []
    lines = ["/**"]
    for line in description.split("\n"):
        # A description must not close the comment early
        text = line.strip().replace("*/", "*&#47;")
        lines.append(f" * {text}" if text else " *")
    lines.append(" */")
    return lines


class TypeGenerator(ABC):
    """Generates the Java compilation unit of one schema type."""

    TEMPLATE: str = ""

    def __init__(self):
        self.jinja_env = java_environment()
        self.unit_template = self.jinja_env.get_template("unit.java.jinja2")
        self.type_template = self.jinja_env.get_template(self.TEMPLATE)

    def generate(self, context: GenerationContext, type_def: TypeDefinition) -> str:
        """Return the Java source of ``type_def``, or an empty string when it is skipped."""
        tc = TypeContext.create(context, type_def)
        if tc.should_skip():
            return ""
        body = self.generate_body(tc)
        return self.render_unit(tc, body)

    @abstractmethod
    def generate_body(self, tc: TypeContext) -> str:
        """Render the type declaration, registering the imports it needs."""

    def render_unit(self, tc: TypeContext, body: str) -> str:
        return self.unit_template.render(
            package=tc.context.package,
            imports=tc.imports.import_block(),
            body=body,
        )

    def header_lines(self, tc: TypeContext, annotation_lists: Iterable[AnnotationList]) -> list[str]:
        """Javadoc and annotation lines put before the declaration."""
        lines = javadoc_lines(tc.type_def.description)
        for annotations in annotation_lists:
            tc.imports.add_all(annotations.imports)
            lines.extend(annotations.annotations)
        return lines
