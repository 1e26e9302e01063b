"""
Configuration for the GraphQL to Java generator.

The configuration is a tree of dataclasses. Files may be written in YAML or
JSON; keys are accepted both in the camelCase spelling used by configuration
files (``fieldVisibility``) and in the snake_case attribute spelling
(``field_visibility``).
"""

from __future__ import annotations

import copy
import json
import logging
import os
import re
from dataclasses import dataclass, field, fields, is_dataclass
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError, ErrorCollection
from .utils import to_camel_case, to_snake_case

logger = logging.getLogger(__name__)

VISIBILITY_PRIVATE = "private"
VISIBILITY_PROTECTED = "protected"
VISIBILITY_PACKAGE = "package"
VISIBILITY_PUBLIC = "public"
VISIBILITIES = (VISIBILITY_PRIVATE, VISIBILITY_PROTECTED, VISIBILITY_PACKAGE, VISIBILITY_PUBLIC)

COLLECTION_LIST = "List"
COLLECTION_SET = "Set"
COLLECTION_COLLECTION = "Collection"
COLLECTION_TYPES = (COLLECTION_LIST, COLLECTION_SET, COLLECTION_COLLECTION)

NULLABLE_WRAPPER = "wrapper"
NULLABLE_OPTIONAL = "optional"
NULLABLE_ANNOTATION = "annotation"
NULLABLE_HANDLINGS = (NULLABLE_WRAPPER, NULLABLE_OPTIONAL, NULLABLE_ANNOTATION)

FIELD_CASE_CAMEL = "camelCase"
FIELD_CASE_SNAKE = "snake_case"

VALIDATION_JAKARTA = "jakarta"
VALIDATION_JAVAX = "javax"
VALIDATION_PACKAGES = (VALIDATION_JAKARTA, VALIDATION_JAVAX)

SUPPORTED_JAVA_VERSIONS = (8, 11, 17, 21)

_JAVA_PACKAGE_PATTERN = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*(\.[A-Za-z_$][A-Za-z0-9_$]*)*$")


def _apply_dict(target: Any, d: dict | None) -> Any:
    """Copy matching keys of ``d`` onto the dataclass ``target``, recursing into nested dataclasses."""
    if not d:
        return target
    for key, value in d.items():
        name = to_snake_case(str(key))
        if not hasattr(target, name):
            logger.debug("Ignoring unknown configuration key %r on %s", key, type(target).__name__)
            continue
        current = getattr(target, name)
        if is_dataclass(current) and isinstance(value, dict):
            _apply_dict(current, value)
        elif value is not None:
            setattr(target, name, value)
    return target


def _to_dict(obj: Any) -> Any:
    """Render a dataclass tree with camelCase keys."""
    if is_dataclass(obj):
        return {to_camel_case(f.name): _to_dict(getattr(obj, f.name)) for f in fields(obj)}
    if isinstance(obj, dict):
        return {k: _to_dict(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_to_dict(v) for v in obj]
    return obj


@dataclass
class SchemaConfig:
    """Where to read the GraphQL schema from."""

    path: str = ""
    includes: list[str] = field(default_factory=list)


@dataclass
class OutputConfig:
    """Where to write the generated sources."""

    directory: str = "./generated"
    package: str = "com.example.model"


@dataclass
class NamingConfig:
    # "camelCase" or "snake_case"
    field_case: str = FIELD_CASE_CAMEL
    class_suffix: str = ""
    interface_prefix: str = ""


@dataclass
class JavaConfig:
    """Java language settings."""

    version: int = 17
    field_visibility: str = VISIBILITY_PRIVATE
    collection_type: str = COLLECTION_LIST
    nullable_handling: str = NULLABLE_WRAPPER
    naming: NamingConfig = field(default_factory=NamingConfig)


@dataclass
class ScalarMapping:
    """Java type used for a custom GraphQL scalar."""

    java_type: str = ""
    imports: list[str] = field(default_factory=list)
    # Unboxed form used for non-null fields, e.g. "long" for "Long"
    primitive_type: str = ""

    @staticmethod
    def from_dict(d: dict) -> ScalarMapping:
        return _apply_dict(ScalarMapping(), d)


@dataclass
class TypeMappingsConfig:
    scalars: dict[str, ScalarMapping] = field(default_factory=dict)


@dataclass
class LombokConfig:
    """Lombok annotations to put on generated classes."""

    enabled: bool = False
    data: bool = True
    builder: bool = False
    no_args_constructor: bool = True
    all_args_constructor: bool = False
    getter: bool = False
    setter: bool = False


@dataclass
class ValidationConfig:
    """Bean validation annotations to put on generated fields."""

    enabled: bool = False
    package: str = VALIDATION_JAKARTA
    not_null_on_non_null: bool = True


@dataclass
class JacksonConfig:
    enabled: bool = False


@dataclass
class FeaturesConfig:
    lombok: LombokConfig = field(default_factory=LombokConfig)
    validation: ValidationConfig = field(default_factory=ValidationConfig)
    jackson: JacksonConfig = field(default_factory=JacksonConfig)


@dataclass
class JavaVersionOverride:
    """Settings forced for a given Java version."""

    validation_package: str = ""

    @staticmethod
    def from_dict(d: dict) -> JavaVersionOverride:
        override = JavaVersionOverride()
        if "validation_package" in d or "validationPackage" in d:
            override.validation_package = d.get("validation_package") or d.get("validationPackage") or ""
            return override
        validation = (d.get("features") or {}).get("validation") or {}
        override.validation_package = validation.get("package", "")
        return override

    def to_dict(self) -> dict:
        return {"features": {"validation": {"package": self.validation_package}}}


def _default_version_overrides() -> dict[int, JavaVersionOverride]:
    return {8: JavaVersionOverride(validation_package=VALIDATION_JAVAX)}


@dataclass
class GeneratorConfig:
    """Complete configuration of a generation run."""

    schema: SchemaConfig = field(default_factory=SchemaConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    java: JavaConfig = field(default_factory=JavaConfig)
    type_mappings: TypeMappingsConfig = field(default_factory=TypeMappingsConfig)
    features: FeaturesConfig = field(default_factory=FeaturesConfig)
    java_version_overrides: dict[int, JavaVersionOverride] = field(default_factory=_default_version_overrides)

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        """Create a config from a dictionary, starting from the defaults."""
        config = GeneratorConfig()
        d = dict(d or {})
        type_mappings = d.pop("typeMappings", None) or {}
        type_mappings = d.pop("type_mappings", None) or type_mappings
        overrides = d.pop("javaVersionOverrides", None)
        overrides = d.pop("java_version_overrides", None) or overrides
        _apply_dict(config, d)

        for name, mapping in (type_mappings.get("scalars") or {}).items():
            if isinstance(mapping, str):
                config.type_mappings.scalars[name] = ScalarMapping(java_type=mapping)
            else:
                config.type_mappings.scalars[name] = ScalarMapping.from_dict(mapping or {})

        if overrides:
            for version, override in overrides.items():
                config.java_version_overrides[int(version)] = JavaVersionOverride.from_dict(override or {})
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary using the configuration file spelling."""
        d = _to_dict(self)
        d["javaVersionOverrides"] = {v: o.to_dict() for v, o in self.java_version_overrides.items()}
        return d

    def copy(self) -> GeneratorConfig:
        return copy.deepcopy(self)

    def validate(self) -> list[ConfigError]:
        """Return every problem found in the configuration."""
        errors: list[ConfigError] = []

        if self.java.version not in SUPPORTED_JAVA_VERSIONS:
            errors.append(
                ConfigError(
                    f"unsupported Java version: {self.java.version} (supported: 8, 11, 17, 21)",
                    field="java.version",
                )
            )
        if self.java.field_visibility not in VISIBILITIES:
            errors.append(
                ConfigError(
                    f"invalid field visibility: {self.java.field_visibility} "
                    "(valid: private, protected, package, public)",
                    field="java.fieldVisibility",
                )
            )
        if self.java.collection_type not in COLLECTION_TYPES:
            errors.append(
                ConfigError(
                    f"invalid collection type: {self.java.collection_type} (valid: List, Set, Collection)",
                    field="java.collectionType",
                )
            )
        if self.java.nullable_handling not in NULLABLE_HANDLINGS:
            errors.append(
                ConfigError(
                    f"invalid nullable handling: {self.java.nullable_handling} "
                    "(valid: wrapper, optional, annotation)",
                    field="java.nullableHandling",
                )
            )
        if self.java.naming.field_case not in (FIELD_CASE_CAMEL, FIELD_CASE_SNAKE):
            errors.append(
                ConfigError(
                    f"invalid field case: {self.java.naming.field_case} (valid: camelCase, snake_case)",
                    field="java.naming.fieldCase",
                )
            )
        validation = self.features.validation
        if validation.enabled and validation.package not in VALIDATION_PACKAGES:
            errors.append(
                ConfigError(
                    f"invalid validation package: {validation.package} (valid: jakarta, javax)",
                    field="features.validation.package",
                )
            )
        if self.output.package and not _JAVA_PACKAGE_PATTERN.match(self.output.package):
            errors.append(
                ConfigError(f"invalid Java package name: {self.output.package}", field="output.package")
            )
        return errors

    def check(self) -> None:
        """Raise a ConfigError when the configuration is invalid."""
        errors = self.validate()
        if len(errors) == 1:
            raise errors[0]
        if errors:
            raise ConfigError("invalid configuration", cause=ErrorCollection(list(errors)))

    def apply_version_overrides(self) -> None:
        override = self.java_version_overrides.get(self.java.version)
        if override is not None and override.validation_package:
            logger.debug(
                "Java %d: using validation package %s", self.java.version, override.validation_package
            )
            self.features.validation.package = override.validation_package

    def merge(self, other: GeneratorConfig | None) -> None:
        """Overlay the non-empty values of ``other`` onto this config.

        Feature sections are taken whole from ``other`` when enabled there;
        scalar mappings and Java version overrides are merged by key.
        """
        if other is None:
            return
        if other.schema.path:
            self.schema.path = other.schema.path
        if other.schema.includes:
            self.schema.includes = list(other.schema.includes)
        if other.output.directory:
            self.output.directory = other.output.directory
        if other.output.package:
            self.output.package = other.output.package
        if other.java.version:
            self.java.version = other.java.version
        if other.java.field_visibility:
            self.java.field_visibility = other.java.field_visibility
        if other.java.collection_type:
            self.java.collection_type = other.java.collection_type
        if other.java.nullable_handling:
            self.java.nullable_handling = other.java.nullable_handling
        if other.java.naming.field_case:
            self.java.naming.field_case = other.java.naming.field_case
        if other.java.naming.class_suffix:
            self.java.naming.class_suffix = other.java.naming.class_suffix
        if other.java.naming.interface_prefix:
            self.java.naming.interface_prefix = other.java.naming.interface_prefix
        if other.features.lombok.enabled:
            self.features.lombok = copy.deepcopy(other.features.lombok)
        if other.features.validation.enabled:
            self.features.validation = copy.deepcopy(other.features.validation)
        if other.features.jackson.enabled:
            self.features.jackson = copy.deepcopy(other.features.jackson)
        for name, mapping in other.type_mappings.scalars.items():
            self.type_mappings.scalars[name] = mapping
        for version, override in other.java_version_overrides.items():
            self.java_version_overrides[version] = override

    def resolve_paths(self, base: str | os.PathLike) -> None:
        """Make relative schema and output paths relative to ``base``."""
        base = Path(base)
        if self.schema.path and not os.path.isabs(self.schema.path):
            self.schema.path = str(base / self.schema.path)
        self.schema.includes = [
            include if os.path.isabs(include) else str(base / include) for include in self.schema.includes
        ]
        if self.output.directory and not os.path.isabs(self.output.directory):
            self.output.directory = str(base / self.output.directory)


def parse_config(text: str, fmt: str = "yaml") -> GeneratorConfig:
    """Parse, validate and finalize configuration text."""
    try:
        data = json.loads(text) if fmt == "json" else yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"failed to parse config {fmt.upper()}", cause=e) from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("configuration must be a mapping")

    config = GeneratorConfig.from_dict(data)
    config.check()
    config.apply_version_overrides()
    return config


def load_config(path: str | os.PathLike) -> GeneratorConfig:
    """Load a YAML (``.yaml``/``.yml``) or JSON configuration file."""
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        raise ConfigError("failed to read config file", field="path", cause=e) from e

    fmt = "yaml" if path.suffix.lower() in (".yaml", ".yml") else "json"
    logger.debug("Loading %s configuration from %s", fmt, path)
    return parse_config(text, fmt)
