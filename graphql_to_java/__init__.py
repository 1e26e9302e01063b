"""GraphQL to Java Generator

A Python package for generating Java classes, interfaces and enums from
GraphQL SDL schemas. Supports Lombok, Bean Validation and custom annotations
driven by schema directives.
"""

__version__ = "1.0.0"
__author__ = "François Lagunas"

from .api import generate, generate_to_dir
from .config import GeneratorConfig, load_config, parse_config
from .errors import (
    ConfigError,
    ErrorCollection,
    GenerateError,
    GeneratorError,
    OutputError,
    ParseError,
    TypeMappingError,
)
from .generator import GeneratedUnit, GenerationResult, JavaGenerator
from .output import Writer
from .schema import Schema, parse_schema, parse_schema_file

__all__ = [
    "JavaGenerator",
    "GeneratorConfig",
    "GeneratedUnit",
    "GenerationResult",
    "Schema",
    "Writer",
    "generate",
    "generate_to_dir",
    "load_config",
    "parse_config",
    "parse_schema",
    "parse_schema_file",
    "GeneratorError",
    "ConfigError",
    "ParseError",
    "TypeMappingError",
    "GenerateError",
    "OutputError",
    "ErrorCollection",
]
