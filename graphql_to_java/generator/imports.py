"""
Import statements of one generated Java file.
"""

from __future__ import annotations

from typing import Iterable


def import_group(imp: str) -> str:
    """Imports are grouped by their first two package segments."""
    return ".".join(imp.split(".")[:2])


class ImportManager:
    """Collects, deduplicates and formats the imports of one compilation unit."""

    def __init__(self, package: str = ""):
        self.package = package
        self._imports: set[str] = set()

    def add(self, imp: str) -> None:
        if not imp:
            return
        # java.lang classes are implicitly imported, its subpackages are not
        if imp.startswith("java.lang.") and "." not in imp[len("java.lang.") :]:
            return
        if self._is_same_package(imp):
            return
        self._imports.add(imp)

    def add_all(self, imports: Iterable[str]) -> None:
        for imp in imports:
            self.add(imp)

    def has(self, imp: str) -> bool:
        return imp in self._imports

    def __len__(self) -> int:
        return len(self._imports)

    def sorted(self) -> list[str]:
        return sorted(self._imports)

    def grouped(self) -> list[list[str]]:
        groups: list[list[str]] = []
        current_prefix = None
        for imp in self.sorted():
            prefix = import_group(imp)
            if prefix != current_prefix:
                groups.append([])
                current_prefix = prefix
            groups[-1].append(imp)
        return groups

    def import_block(self) -> str:
        """Render the import statements, with a blank line between groups."""
        return "\n".join("".join(f"import {imp};\n" for imp in group) for group in self.grouped())

    def _is_same_package(self, imp: str) -> bool:
        if not self.package or "." not in imp:
            return False
        return imp.rsplit(".", 1)[0] == self.package
