"""
GraphQL to Java type mapping.
"""

from .collections import (
    COLLECTION_TYPES,
    CollectionInfo,
    format_collection_type,
    format_optional_type,
    get_collection_info,
)
from .mapper import MappingResult, TypeMapper
from .scalars import (
    BUILTIN_SCALARS,
    COMMON_SCALARS,
    PRIMITIVE_TO_BOXED,
    ScalarInfo,
    box_type,
    is_boxed,
    is_primitive,
    unbox_type,
)

__all__ = [
    "BUILTIN_SCALARS",
    "COLLECTION_TYPES",
    "COMMON_SCALARS",
    "CollectionInfo",
    "MappingResult",
    "PRIMITIVE_TO_BOXED",
    "ScalarInfo",
    "TypeMapper",
    "box_type",
    "format_collection_type",
    "format_optional_type",
    "get_collection_info",
    "is_boxed",
    "is_primitive",
    "unbox_type",
]
