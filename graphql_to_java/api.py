"""
Programmatic entry points.

    result = generate(schema_text=sdl, package="com.acme.model")
    for unit in result.units:
        print(unit.file_name)
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from .config import GeneratorConfig, load_config
from .errors import ConfigError
from .generator.generator import GenerationResult, JavaGenerator
from .output.writer import Writer
from .schema.loader import parse_schema, parse_with_includes
from .schema.model import Schema

logger = logging.getLogger(__name__)

OVERRIDE_KEYS = (
    "output_dir",
    "package",
    "java_version",
    "enable_lombok",
    "enable_validation",
    "validation_package",
)


def apply_overrides(config: GeneratorConfig, **overrides: Any) -> GeneratorConfig:
    """Apply flag-style overrides; ``None`` values leave the config untouched."""
    unknown = set(overrides) - set(OVERRIDE_KEYS)
    if unknown:
        raise ConfigError(f"unknown overrides: {', '.join(sorted(unknown))}")

    if overrides.get("output_dir") is not None:
        config.output.directory = str(overrides["output_dir"])
    if overrides.get("package") is not None:
        config.output.package = overrides["package"]
    if overrides.get("java_version") is not None:
        config.java.version = int(overrides["java_version"])
        config.apply_version_overrides()
    if overrides.get("enable_lombok") is not None:
        config.features.lombok.enabled = bool(overrides["enable_lombok"])
    if overrides.get("enable_validation") is not None:
        config.features.validation.enabled = bool(overrides["enable_validation"])
    # Applied last so an explicit package beats the Java 8 override
    if overrides.get("validation_package") is not None:
        config.features.validation.package = overrides["validation_package"]
    return config


def _load_schema(
    schema_text: str | None, schema_path: str | os.PathLike | None, include_patterns: Sequence[str]
) -> Schema:
    if schema_text is not None:
        return parse_schema(schema_text)
    if schema_path is not None:
        return parse_with_includes(schema_path, include_patterns)
    raise ConfigError("no schema provided", field="schema.path")


def _resolve_config(
    config: GeneratorConfig | None, config_path: str | os.PathLike | None, overrides: dict[str, Any]
) -> GeneratorConfig:
    if config is not None:
        config = config.copy()
    elif config_path is not None:
        config = load_config(config_path)
        config.resolve_paths(Path(config_path).resolve().parent)
    else:
        config = GeneratorConfig()
        config.apply_version_overrides()

    apply_overrides(config, **overrides)
    config.check()
    return config


def generate(
    schema_text: str | None = None,
    schema_path: str | os.PathLike | None = None,
    include_patterns: Sequence[str] = (),
    config: GeneratorConfig | None = None,
    config_path: str | os.PathLike | None = None,
    max_workers: int = 1,
    **overrides: Any,
) -> GenerationResult:
    """Generate Java sources in memory.

    The schema is taken from ``schema_text``, then ``schema_path``, then the
    ``schema.path`` of the configuration.

    Raises:
        ConfigError: If no schema is given or the configuration is invalid
        ParseError: If the schema cannot be parsed
    """
    resolved = _resolve_config(config, config_path, overrides)
    if schema_text is None and schema_path is None and resolved.schema.path:
        schema_path = resolved.schema.path
        include_patterns = include_patterns or resolved.schema.includes

    schema = _load_schema(schema_text, schema_path, include_patterns)
    return JavaGenerator(resolved, max_workers=max_workers).generate(schema)


def generate_to_dir(
    schema_text: str | None = None,
    schema_path: str | os.PathLike | None = None,
    include_patterns: Sequence[str] = (),
    config: GeneratorConfig | None = None,
    config_path: str | os.PathLike | None = None,
    clean: bool = False,
    max_workers: int = 1,
    **overrides: Any,
) -> GenerationResult:
    """Generate Java sources and write them to the configured output directory.

    Write failures are appended to ``result.errors``.
    """
    resolved = _resolve_config(config, config_path, overrides)
    result = generate(
        schema_text=schema_text,
        schema_path=schema_path,
        include_patterns=include_patterns,
        config=resolved,
        max_workers=max_workers,
    )

    writer = Writer(resolved.output.directory)
    if clean:
        writer.clean()
    write_result = writer.write_all_with_result(result.units)
    result.errors.extend(write_result.errors)
    logger.info("Wrote %d files to %s", len(write_result.written), resolved.output.directory)
    return result
