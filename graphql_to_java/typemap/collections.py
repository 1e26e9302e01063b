"""
Java collection shapes used for GraphQL list types.
"""

from __future__ import annotations

from dataclasses import dataclass

from .scalars import box_type


@dataclass(frozen=True)
class CollectionInfo:
    interface: str
    implementation: str
    imports: tuple[str, ...]


DEFAULT_COLLECTION = "List"

COLLECTION_TYPES: dict[str, CollectionInfo] = {
    "List": CollectionInfo("List", "ArrayList", ("java.util.List", "java.util.ArrayList")),
    "Set": CollectionInfo("Set", "HashSet", ("java.util.Set", "java.util.HashSet")),
    "Collection": CollectionInfo("Collection", "ArrayList", ("java.util.Collection", "java.util.ArrayList")),
    "SortedSet": CollectionInfo("SortedSet", "TreeSet", ("java.util.SortedSet", "java.util.TreeSet")),
    "LinkedList": CollectionInfo("List", "LinkedList", ("java.util.List", "java.util.LinkedList")),
}

OPTIONAL_TYPE = "Optional"
OPTIONAL_IMPORTS = ("java.util.Optional",)


def get_collection_info(collection_type: str) -> CollectionInfo:
    """Look up a collection shape; unknown names fall back to List."""
    return COLLECTION_TYPES.get(collection_type, COLLECTION_TYPES[DEFAULT_COLLECTION])


def format_collection_type(collection_type: str, element_type: str) -> str:
    return f"{get_collection_info(collection_type).interface}<{element_type}>"


def format_optional_type(element_type: str) -> str:
    return f"{OPTIONAL_TYPE}<{box_type(element_type)}>"
