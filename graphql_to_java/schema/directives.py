"""
Extraction of the generator directives attached to schema elements.

Each extractor returns a typed info record, or None when the directive is
absent. Extractors never raise: arguments that are missing or of the wrong
kind degrade to their zero value.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from .model import Directive, FieldDefinition

SKIP = "skip"
JAVA_NAME = "javaName"
JAVA_TYPE = "javaType"
DEPRECATED = "deprecated"
ANNOTATION = "annotation"
CONSTRAINT = "constraint"
LOMBOK = "lombok"
COLLECTION = "collection"


@dataclass(frozen=True)
class SkipDirectiveInfo:
    applied: bool = True


@dataclass(frozen=True)
class JavaNameDirectiveInfo:
    name: str


@dataclass(frozen=True)
class JavaTypeDirectiveInfo:
    type: str
    imports: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class DeprecatedDirectiveInfo:
    reason: str = ""


@dataclass(frozen=True)
class AnnotationDirectiveInfo:
    value: str
    imports: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ConstraintDirectiveInfo:
    """Bean validation constraints declared on a field."""

    min_length: int | None = None
    max_length: int | None = None
    min: int | None = None
    max: int | None = None
    pattern: str = ""
    not_null: bool = False
    not_blank: bool = False
    email: bool = False


@dataclass(frozen=True)
class LombokDirectiveInfo:
    exclude: list[str] = field(default_factory=list)
    include: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class CollectionDirectiveInfo:
    type: str


def _find(directives: Sequence[Directive], name: str) -> Directive | None:
    for d in directives:
        if d.name == name:
            return d
    return None


def extract_skip(directives: Sequence[Directive]) -> SkipDirectiveInfo | None:
    if _find(directives, SKIP) is not None:
        return SkipDirectiveInfo(applied=True)
    return None


def extract_java_name(directives: Sequence[Directive]) -> JavaNameDirectiveInfo | None:
    """Return the rename requested by the first ``@javaName(name: ...)``; an empty name is ignored."""
    d = _find(directives, JAVA_NAME)
    name = d.get_string("name") if d is not None else ""
    if not name:
        return None
    return JavaNameDirectiveInfo(name=name)


def extract_java_type(directives: Sequence[Directive]) -> JavaTypeDirectiveInfo | None:
    d = _find(directives, JAVA_TYPE)
    type_str = d.get_string("type") if d is not None else ""
    if not type_str:
        return None
    return JavaTypeDirectiveInfo(type=type_str, imports=d.get_string_list("imports"))


def extract_deprecated(directives: Sequence[Directive]) -> DeprecatedDirectiveInfo | None:
    d = _find(directives, DEPRECATED)
    if d is None:
        return None
    return DeprecatedDirectiveInfo(reason=d.get_string("reason"))


def extract_annotations(directives: Sequence[Directive]) -> list[AnnotationDirectiveInfo]:
    """Return every ``@annotation`` occurrence that carries a value, in declaration order."""
    result = []
    for d in directives:
        if d.name == ANNOTATION:
            value = d.get_string("value")
            if value:
                result.append(AnnotationDirectiveInfo(value=value, imports=d.get_string_list("imports")))
    return result


def extract_constraint(directives: Sequence[Directive]) -> ConstraintDirectiveInfo | None:
    d = _find(directives, CONSTRAINT)
    if d is None:
        return None
    return ConstraintDirectiveInfo(
        min_length=d.get_int("minLength"),
        max_length=d.get_int("maxLength"),
        min=d.get_int("min"),
        max=d.get_int("max"),
        pattern=d.get_string("pattern"),
        not_null=d.get_bool("notNull"),
        not_blank=d.get_bool("notBlank"),
        email=d.get_bool("email"),
    )


def extract_lombok(directives: Sequence[Directive]) -> LombokDirectiveInfo | None:
    d = _find(directives, LOMBOK)
    if d is None:
        return None
    return LombokDirectiveInfo(exclude=d.get_string_list("exclude"), include=d.get_string_list("include"))


def extract_collection(directives: Sequence[Directive]) -> CollectionDirectiveInfo | None:
    d = _find(directives, COLLECTION)
    type_str = d.get_string("type") if d is not None else ""
    if not type_str:
        return None
    return CollectionDirectiveInfo(type=type_str)


def is_skipped_field(field_def: FieldDefinition) -> bool:
    """Fields with ``@skip`` and fields of introspection types produce no code."""
    if extract_skip(field_def.directives) is not None:
        return True
    return field_def.type is not None and field_def.type.innermost_named_type().startswith("__")
