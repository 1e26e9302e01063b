"""
Java source generation.
"""

from .base import TypeGenerator
from .class_generator import ClassGenerator
from .context import FieldContext, GenerationContext, TypeContext
from .enum_generator import EnumGenerator
from .generator import GeneratedUnit, GenerationResult, GenerationStats, JavaGenerator, get_stats
from .imports import ImportManager
from .interface_generator import InterfaceGenerator
from .union_generator import UnionGenerator

__all__ = [
    "ClassGenerator",
    "EnumGenerator",
    "FieldContext",
    "GeneratedUnit",
    "GenerationContext",
    "GenerationResult",
    "GenerationStats",
    "ImportManager",
    "InterfaceGenerator",
    "JavaGenerator",
    "TypeContext",
    "TypeGenerator",
    "UnionGenerator",
    "get_stats",
]
