"""
Writes generated Java units to disk.

Files are written atomically: content goes to a temporary file in the target
directory which then replaces the destination, so an interrupted run never
leaves a truncated source file behind.
"""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from ..errors import ErrorCollection, OutputError
from ..generator.generator import JAVA_FILE_EXTENSION, GeneratedUnit

logger = logging.getLogger(__name__)


@dataclass
class WriteResult:
    written: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    errors: list[OutputError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


class Writer:
    """Writes one file per generated unit into a single output directory."""

    def __init__(self, output_dir: str | Path, overwrite: bool = True):
        self.output_dir = Path(output_dir)
        self.overwrite = overwrite

    def output_path(self, file_name: str) -> Path:
        return self.output_dir / file_name

    def exists(self) -> bool:
        return self.output_dir.is_dir()

    def ensure_dir(self) -> None:
        """Create the output directory and its parents.

        Raises:
            OutputError: If the directory cannot be created
        """
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputError("failed to create output directory", file_path=str(self.output_dir), cause=e) from e

    def write_file(self, unit: GeneratedUnit) -> Path:
        """Write a single unit.

        Args:
            unit: The generated unit

        Returns:
            The path of the written file

        Raises:
            OutputError: If the file exists and overwrite is disabled, or the write fails
        """
        path = self.output_path(unit.file_name)
        if not self.overwrite and path.exists():
            raise OutputError("file already exists and overwrite is disabled", file_path=str(path))

        try:
            self._write_atomic(path, unit.content)
        except OSError as e:
            raise OutputError("failed to write file", file_path=str(path), cause=e) from e

        logger.debug("Wrote %s", path)
        return path

    def write_all(self, units: Iterable[GeneratedUnit]) -> list[Path]:
        """Write every unit, continuing past failures.

        Raises:
            OutputError: Carrying every failure once all units were attempted
        """
        self.ensure_dir()
        written = []
        errors = ErrorCollection()
        for unit in units:
            try:
                written.append(self.write_file(unit))
            except OutputError as e:
                errors.add(e)

        error = errors.to_error()
        if isinstance(error, OutputError):
            raise error
        if error is not None:
            raise OutputError("failed to write generated files", file_path=str(self.output_dir), cause=error)
        return written

    def write_all_with_result(self, units: Iterable[GeneratedUnit]) -> WriteResult:
        result = WriteResult()
        try:
            self.ensure_dir()
        except OutputError as e:
            result.errors.append(e)
            return result

        for unit in units:
            path = self.output_path(unit.file_name)
            if not self.overwrite and path.exists():
                result.skipped.append(str(path))
                continue
            try:
                result.written.append(str(self.write_file(unit)))
            except OutputError as e:
                result.errors.append(e)
        return result

    def clean(self) -> int:
        """Remove the ``.java`` files at the top of the output directory.

        Other files and sub-directories are left untouched. Returns the number
        of files removed.
        """
        if not self.exists():
            return 0

        removed = 0
        for path in sorted(self.output_dir.iterdir()):
            if not path.is_file() or path.suffix != JAVA_FILE_EXTENSION:
                continue
            try:
                path.unlink()
            except OSError as e:
                raise OutputError("failed to remove file", file_path=str(path), cause=e) from e
            removed += 1

        logger.debug("Removed %d files from %s", removed, self.output_dir)
        return removed

    def _write_atomic(self, path: Path, content: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory so the final replace stays on one filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", text=True)
        temp_path = Path(temp_path_str)
        try:
            with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)
            temp_path.replace(path)
        except OSError:
            if temp_path.exists():
                temp_path.unlink()
            raise
