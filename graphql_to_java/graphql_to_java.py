import logging
import sys
from pathlib import Path

import click

from . import __version__
from .api import apply_overrides
from .cli_utils import reconstruct_command_line
from .config import VALIDATION_PACKAGES, GeneratorConfig, load_config
from .errors import GeneratorError
from .generator.generator import JavaGenerator
from .output.writer import Writer
from .schema.loader import parse_with_includes

logger = logging.getLogger(__name__)


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option("--output", "-o", default=None, type=click.Path(file_okay=False), help="Output directory")
@click.option("--package", "-p", default=None, type=str, help="Java package of the generated types")
@click.option("--java-version", default=None, type=click.Choice(["8", "11", "17", "21"]))
@click.option("--lombok/--no-lombok", default=None, help="Emit Lombok annotations instead of accessors")
@click.option("--validation/--no-validation", default=None, help="Emit Bean Validation annotations")
@click.option("--validation-package", default=None, type=click.Choice(list(VALIDATION_PACKAGES)))
@click.option("--clean", is_flag=True, default=False, help="Remove existing .java files from the output directory")
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.version_option(version=__version__, prog_name="graphql_to_java")
@click.argument("schema", required=False, default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
def graphql_to_java(
    config, output, package, java_version, lombok, validation, validation_package, clean, verbose, schema
):
    """Generate Java classes from a GraphQL SDL schema."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Command line: %s", reconstruct_command_line(graphql_to_java))

    try:
        if config is not None:
            generator_config = load_config(config)
            generator_config.resolve_paths(Path(config).parent)
        else:
            generator_config = GeneratorConfig()
            generator_config.apply_version_overrides()

        if schema is not None:
            generator_config.schema.path = schema

        apply_overrides(
            generator_config,
            output_dir=output,
            package=package,
            java_version=java_version,
            enable_lombok=lombok,
            enable_validation=validation,
            validation_package=validation_package,
        )
        generator_config.check()

        if not generator_config.schema.path:
            raise click.UsageError("no schema given: pass SCHEMA or set schema.path in the config file")

        parsed = parse_with_includes(generator_config.schema.path, generator_config.schema.includes)
        result = JavaGenerator(generator_config).generate(parsed)

        writer = Writer(generator_config.output.directory)
        if clean:
            removed = writer.clean()
            logger.info("Removed %d existing files", removed)
        write_result = writer.write_all_with_result(result.units)
        result.errors.extend(write_result.errors)
    except GeneratorError as e:
        raise click.ClickException(str(e)) from e

    stats = result.stats
    click.echo(
        f"Generated {len(write_result.written)} files: "
        f"{stats.classes} classes, {stats.interfaces} interfaces, {stats.enums} enums"
    )
    click.echo(f"Output directory: {generator_config.output.directory}")
    for warning in result.warnings:
        click.echo(f"Warning: {warning}", err=True)
    for error in result.errors:
        click.echo(f"Error: {error}", err=True)

    if result.errors:
        sys.exit(1)
