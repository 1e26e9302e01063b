"""
Common result type of the annotation generators.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable


@dataclass
class AnnotationList:
    """Annotation source lines plus the imports they need."""

    annotations: list[str] = field(default_factory=list)
    imports: list[str] = field(default_factory=list)

    def add(self, annotation: str, imports: Iterable[str] = ()) -> None:
        self.annotations.append(annotation)
        self.imports.extend(imp for imp in imports if imp)

    def extend(self, other: AnnotationList) -> AnnotationList:
        self.annotations.extend(other.annotations)
        self.imports.extend(other.imports)
        return self

    def __contains__(self, annotation: object) -> bool:
        return annotation in self.annotations

    def __iter__(self):
        return iter(self.annotations)

    def __len__(self) -> int:
        return len(self.annotations)

    def __bool__(self) -> bool:
        return bool(self.annotations)
