"""
Error types raised by the Java generator.

Every error carries a short code identifying the stage that failed, a
message, an optional underlying cause and free-form context (type name,
field name, file path...). Errors raised while generating a single type are
collected by the orchestrator instead of aborting the whole run.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stage at which an error occurred."""

    CONFIG = "CONFIG"
    PARSE = "PARSE"
    GENERATE = "GENERATE"
    OUTPUT = "OUTPUT"
    TYPEMAP = "TYPEMAP"


@dataclass
class Location:
    """Position inside a source file."""

    file: str = ""
    line: int = 0
    column: int = 0

    def __str__(self) -> str:
        if self.file and self.line > 0:
            return f"{self.file}:{self.line}:{self.column}"
        if self.line > 0:
            return f"line {self.line}, column {self.column}"
        return self.file


class GeneratorError(Exception):
    """Base class for all generator errors."""

    code: ErrorCode = ErrorCode.GENERATE

    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        location: Location | None = None,
        **context: Any,
    ):
        self.message = message
        self.cause = cause
        self.location = location
        self.context: dict[str, Any] = {k: v for k, v in context.items() if v is not None}
        super().__init__(message)

    def __str__(self) -> str:
        text = f"[{self.code.value}] {self.message}"
        if self.location is not None and str(self.location):
            text += f" at {self.location}"
        if self.cause is not None:
            text += f": {self.cause}"
        return text

    def with_context(self, key: str, value: Any) -> GeneratorError:
        self.context[key] = value
        return self


class ConfigError(GeneratorError):
    """Invalid configuration value."""

    code = ErrorCode.CONFIG

    def __init__(self, message: str, field: str | None = None, cause: BaseException | None = None):
        super().__init__(message, cause=cause, field=field)
        self.field = field


class ParseError(GeneratorError):
    """The schema text could not be parsed."""

    code = ErrorCode.PARSE

    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        location: Location | None = None,
        type_name: str | None = None,
    ):
        super().__init__(message, cause=cause, location=location, type_name=type_name)
        self.type_name = type_name


class TypeMappingError(GeneratorError):
    """A type reference could not be mapped to a Java type."""

    code = ErrorCode.TYPEMAP

    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        source_type: str | None = None,
        target_type: str | None = None,
    ):
        super().__init__(message, cause=cause, source_type=source_type, target_type=target_type)
        self.source_type = source_type
        self.target_type = target_type


class GenerateError(GeneratorError):
    """Source generation failed for one type."""

    code = ErrorCode.GENERATE

    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        type_name: str | None = None,
        field_name: str | None = None,
    ):
        super().__init__(message, cause=cause, type_name=type_name, field_name=field_name)
        self.type_name = type_name
        self.field_name = field_name

    def __str__(self) -> str:
        text = f"[{self.code.value}] {self.message}"
        if self.type_name:
            text += f" (type {self.type_name}"
            if self.field_name:
                text += f", field {self.field_name}"
            text += ")"
        if self.cause is not None:
            text += f": {self.cause}"
        return text


class OutputError(GeneratorError):
    """A generated file could not be written."""

    code = ErrorCode.OUTPUT

    def __init__(self, message: str, file_path: str | None = None, cause: BaseException | None = None):
        super().__init__(message, cause=cause, file_path=file_path)
        self.file_path = file_path

    def __str__(self) -> str:
        text = f"[{self.code.value}] {self.message}"
        if self.file_path:
            text += f" ({self.file_path})"
        if self.cause is not None:
            text += f": {self.cause}"
        return text


@dataclass
class TypeMappingWarning:
    """An unresolved type name that will be emitted as-is."""

    type_name: str
    message: str = "unknown type, will use as-is"

    def __str__(self) -> str:
        return f"{self.message}: {self.type_name}"


class ErrorCollection(Exception):
    """Several errors reported together."""

    def __init__(self, errors: list[Exception] | None = None):
        self.errors: list[Exception] = list(errors or [])
        super().__init__()

    def add(self, error: Exception | None) -> None:
        if error is not None:
            self.errors.append(error)

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def __len__(self) -> int:
        return len(self.errors)

    def __str__(self) -> str:
        if not self.errors:
            return "no errors"
        if len(self.errors) == 1:
            return str(self.errors[0])
        lines = [f"{len(self.errors)} error(s) occurred:"]
        for i, error in enumerate(self.errors, 1):
            lines.append(f"  {i}. {error}")
        return "\n".join(lines)

    def to_error(self) -> Exception | None:
        """Return None, the single error, or the collection itself."""
        if not self.errors:
            return None
        if len(self.errors) == 1:
            return self.errors[0]
        return self
