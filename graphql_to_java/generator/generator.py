"""
Orchestration of Java generation over a whole schema.

Every type is generated independently: a failure in one type is collected and
reported, the other types are still generated.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from ..config import GeneratorConfig
from ..errors import ErrorCollection, GenerateError, GeneratorError
from ..schema.directives import extract_skip
from ..schema.model import Schema, TypeDefinition, TypeKind
from .base import TypeGenerator
from .class_generator import ClassGenerator
from .context import GenerationContext
from .enum_generator import EnumGenerator
from .interface_generator import InterfaceGenerator
from .union_generator import UnionGenerator

logger = logging.getLogger(__name__)

JAVA_FILE_EXTENSION = ".java"


@dataclass(frozen=True)
class GeneratedUnit:
    """One generated Java source file."""

    file_name: str
    content: str
    type_def: TypeDefinition


@dataclass
class GenerationStats:
    total_types: int = 0
    classes: int = 0
    interfaces: int = 0
    enums: int = 0
    skipped: int = 0
    error_count: int = 0


@dataclass
class GenerationResult:
    units: list[GeneratedUnit] = field(default_factory=list)
    errors: list[Exception] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    # Names of types that produced no file because of @skip
    skipped: list[str] = field(default_factory=list)
    stats: GenerationStats = field(default_factory=GenerationStats)

    @property
    def ok(self) -> bool:
        return not self.errors

    def error(self) -> Exception | None:
        """All errors as a single exception, or None."""
        return ErrorCollection(self.errors).to_error()


def get_stats(units: list[GeneratedUnit], errors: list[Exception], skipped: int = 0) -> GenerationStats:
    stats = GenerationStats(total_types=len(units), skipped=skipped, error_count=len(errors))
    for unit in units:
        kind = unit.type_def.kind
        if kind in (TypeKind.OBJECT, TypeKind.INPUT_OBJECT):
            stats.classes += 1
        elif kind in (TypeKind.INTERFACE, TypeKind.UNION):
            # Unions are generated as marker interfaces
            stats.interfaces += 1
        elif kind == TypeKind.ENUM:
            stats.enums += 1
    return stats


class JavaGenerator:
    """Generates one Java file per schema type."""

    def __init__(self, config: GeneratorConfig | None = None, max_workers: int = 1):
        self.config = config or GeneratorConfig()
        self.max_workers = max_workers
        class_generator = ClassGenerator()
        interface_generator = InterfaceGenerator()
        self.generators: dict[TypeKind, TypeGenerator] = {
            TypeKind.OBJECT: class_generator,
            TypeKind.INPUT_OBJECT: class_generator,
            TypeKind.INTERFACE: interface_generator,
            TypeKind.ENUM: EnumGenerator(),
            TypeKind.UNION: UnionGenerator(),
        }

    def create_context(self, schema: Schema) -> GenerationContext:
        return GenerationContext.create(self.config, schema)

    def generate(self, schema: Schema) -> GenerationResult:
        context = self.create_context(schema)
        result = GenerationResult()

        for warning in self.find_name_collisions(context):
            logger.warning("%s", warning)
            result.warnings.append(warning)
        for mapping_warning in context.type_mapper.validate_schema(schema):
            result.warnings.append(str(mapping_warning))

        type_defs = [t for t in schema if t.kind != TypeKind.SCALAR]
        if self.max_workers > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                outcomes = list(executor.map(lambda t: self._generate_isolated(context, t), type_defs))
        else:
            outcomes = [self._generate_isolated(context, t) for t in type_defs]

        for type_def, (unit, error) in zip(type_defs, outcomes):
            if error is not None:
                logger.warning("Failed to generate %s: %s", type_def.name, error)
                result.errors.append(error)
            elif unit is None:
                logger.debug("Skipped %s", type_def.name)
                result.skipped.append(type_def.name)
            else:
                result.units.append(unit)

        result.stats = get_stats(result.units, result.errors, len(result.skipped))
        logger.info(
            "Generated %d files (%d classes, %d interfaces, %d enums), %d skipped, %d errors",
            result.stats.total_types,
            result.stats.classes,
            result.stats.interfaces,
            result.stats.enums,
            result.stats.skipped,
            result.stats.error_count,
        )
        return result

    def generate_type(self, schema: Schema, type_name: str) -> GeneratedUnit | None:
        """Generate a single named type; returns None when the type is skipped."""
        type_def = schema.get_type(type_name)
        if type_def is None:
            raise GenerateError(f"type not found: {type_name}", type_name=type_name)
        return self._generate_type(self.create_context(schema), type_def)

    def _generate_isolated(
        self, context: GenerationContext, type_def: TypeDefinition
    ) -> tuple[GeneratedUnit | None, Exception | None]:
        try:
            return self._generate_type(context, type_def), None
        except GeneratorError as e:
            return None, e
        except Exception as e:  # noqa: BLE001
            return None, GenerateError("unexpected error", cause=e, type_name=type_def.name)

    def _generate_type(self, context: GenerationContext, type_def: TypeDefinition) -> GeneratedUnit | None:
        generator = self.generators.get(type_def.kind)
        if generator is None:
            # Scalars map to existing Java types
            return None

        content = generator.generate(context, type_def)
        if not content:
            return None

        file_name = context.naming.type_name(type_def) + JAVA_FILE_EXTENSION
        return GeneratedUnit(file_name=file_name, content=content, type_def=type_def)

    def find_name_collisions(self, context: GenerationContext) -> list[str]:
        """Report Java names shared by several schema types; their files would overwrite each other."""
        owners: dict[str, list[str]] = {}
        for type_def in context.schema:
            if type_def.kind == TypeKind.SCALAR or extract_skip(type_def.directives) is not None:
                continue
            owners.setdefault(context.naming.type_name(type_def), []).append(type_def.name)
        return [
            f"types {', '.join(names)} all map to Java name {java_name}"
            for java_name, names in owners.items()
            if len(names) > 1
        ]
