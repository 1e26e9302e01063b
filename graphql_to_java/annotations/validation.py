"""
Bean validation annotations for generated fields.

Each constraint facet of the ``@constraint`` directive is handled by one rule
object that knows whether it applies and how to render its annotation. The
annotations are imported from ``jakarta.validation.constraints`` or
``javax.validation.constraints`` depending on the configuration.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..config import NULLABLE_ANNOTATION, NULLABLE_WRAPPER, VALIDATION_JAVAX, ValidationConfig
from ..schema.directives import ConstraintDirectiveInfo, extract_constraint
from ..schema.model import FieldDefinition, TypeDefinition
from .base import AnnotationList

JAKARTA_CONSTRAINTS = "jakarta.validation.constraints"
JAVAX_CONSTRAINTS = "javax.validation.constraints"


class ConstraintRule(ABC):
    """Base class for a single constraint annotation"""

    # Simple name of the annotation class
    annotation_name: str = ""

    @abstractmethod
    def applies(self, constraint: ConstraintDirectiveInfo) -> bool:
        pass

    def parameters(self, constraint: ConstraintDirectiveInfo) -> str:
        return ""

    def render(self, constraint: ConstraintDirectiveInfo) -> str:
        params = self.parameters(constraint)
        if params:
            return f"@{self.annotation_name}({params})"
        return f"@{self.annotation_name}"


class SizeRule(ConstraintRule):
    """@Size with only the bounds that were given"""

    annotation_name = "Size"

    def applies(self, constraint):
        return constraint.min_length is not None or constraint.max_length is not None

    def parameters(self, constraint):
        params = []
        if constraint.min_length is not None:
            params.append(f"min = {constraint.min_length}")
        if constraint.max_length is not None:
            params.append(f"max = {constraint.max_length}")
        return ", ".join(params)


class MinRule(ConstraintRule):
    annotation_name = "Min"

    def applies(self, constraint):
        return constraint.min is not None

    def parameters(self, constraint):
        return str(constraint.min)


class MaxRule(ConstraintRule):
    annotation_name = "Max"

    def applies(self, constraint):
        return constraint.max is not None

    def parameters(self, constraint):
        return str(constraint.max)


class PatternRule(ConstraintRule):
    annotation_name = "Pattern"

    def applies(self, constraint):
        return bool(constraint.pattern)

    def parameters(self, constraint):
        escaped = constraint.pattern.replace("\\", "\\\\").replace('"', '\\"')
        return f'regexp = "{escaped}"'


class NotNullRule(ConstraintRule):
    annotation_name = "NotNull"

    def applies(self, constraint):
        return constraint.not_null


class NotBlankRule(ConstraintRule):
    annotation_name = "NotBlank"

    def applies(self, constraint):
        return constraint.not_blank


class EmailRule(ConstraintRule):
    annotation_name = "Email"

    def applies(self, constraint):
        return constraint.email


CONSTRAINT_RULES: tuple[ConstraintRule, ...] = (
    SizeRule(),
    MinRule(),
    MaxRule(),
    PatternRule(),
    NotNullRule(),
    NotBlankRule(),
    EmailRule(),
)


class ValidationGenerator:
    """Generates validation annotations for fields."""

    def __init__(self, config: ValidationConfig | None = None, nullable_handling: str = NULLABLE_WRAPPER):
        self.config = config or ValidationConfig()
        self.nullable_handling = nullable_handling

    @property
    def base_package(self) -> str:
        if self.config.package == VALIDATION_JAVAX:
            return JAVAX_CONSTRAINTS
        return JAKARTA_CONSTRAINTS

    @property
    def nullable_import(self) -> str:
        root = "javax" if self.config.package == VALIDATION_JAVAX else "jakarta"
        return f"{root}.annotation.Nullable"

    def field_annotations(self, field_def: FieldDefinition, non_null: bool) -> AnnotationList:
        result = AnnotationList()

        if not non_null and self.nullable_handling == NULLABLE_ANNOTATION:
            result.add("@Nullable", [self.nullable_import])

        if not self.config.enabled:
            return result

        base = self.base_package
        if non_null and self.config.not_null_on_non_null:
            result.add("@NotNull", [f"{base}.NotNull"])

        constraint = extract_constraint(field_def.directives)
        if constraint is None:
            return result

        for rule in CONSTRAINT_RULES:
            if not rule.applies(constraint):
                continue
            annotation = rule.render(constraint)
            if annotation in result:
                continue
            result.add(annotation, [f"{base}.{rule.annotation_name}"])
        return result

    def type_annotations(self, type_def: TypeDefinition) -> AnnotationList:
        # No type-level constraints are derived from the schema
        return AnnotationList()
