"""
Annotation generators.

Annotations of an element are always concatenated in this order: deprecation
marker, Lombok, validation, custom.
"""

from .base import AnnotationList
from .custom import CustomAnnotationGenerator
from .lombok import LOMBOK_ANNOTATIONS, LombokGenerator
from .validation import CONSTRAINT_RULES, ConstraintRule, ValidationGenerator

__all__ = [
    "AnnotationList",
    "CustomAnnotationGenerator",
    "LOMBOK_ANNOTATIONS",
    "LombokGenerator",
    "CONSTRAINT_RULES",
    "ConstraintRule",
    "ValidationGenerator",
]
