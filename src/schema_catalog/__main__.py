"""CLI entry point for Schema Catalog."""

import json
import sys
from pathlib import Path
from typing import List, Optional

import click

from .config import Config
from .exceptions import SchemaCatalogError
from .loader import import_types
from .schema_gen.definitions_builder import DefinitionsBuilder
from .utils.log_setup import configure_logging


@click.group()
@click.option(
    "--config-file", "-c",
    type=click.Path(exists=True, dir_okay=False, resolve_path=True),
    help="Path to a JSON configuration file.",
    envvar="SCHEMA_CATALOG_CONFIG_FILE"
)
@click.option(
    "--log-level", "-l",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Override the logging level (e.g., DEBUG, INFO).",
    envvar="SCHEMA_CATALOG_LOGGING_LEVEL"
)
@click.option(
    "--log-format",
    type=click.Choice(["console", "json"], case_sensitive=False),
    default=None,
    help="Override logging format.",
    envvar="SCHEMA_CATALOG_LOGGING_FORMAT"
)
@click.pass_context
def cli(ctx: click.Context, config_file: Optional[str], log_level: Optional[str], log_format: Optional[str]) -> None:
    """Schema Catalog - Compiles schema definitions from declared Python types."""
    try:
        cfg = Config.from_file(Path(config_file)) if config_file else Config()
    except Exception as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        sys.exit(1)

    if log_level:
        cfg.logging.level = log_level.upper()
    if log_format:
        cfg.logging.format = log_format.lower()

    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg


@cli.command()
@click.argument("root_types", nargs=-1)
@click.option(
    "--hide", "hide_tags",
    multiple=True,
    help="Tag or fully-qualified type name to leave out. Can be used multiple times; adds to the configured hidden tags."
)
@click.option(
    "--output-file", "-o",
    type=click.Path(dir_okay=False, writable=True, resolve_path=True),
    help="Write the catalog JSON to this file instead of stdout."
)
@click.pass_context
def build(ctx: click.Context, root_types: List[str], hide_tags: List[str], output_file: Optional[str]) -> None:
    """Builds the schema catalog for ROOT_TYPES (e.g. 'shop.models:Order')."""
    config: Config = ctx.obj["config"]
    logger = configure_logging(config)

    import_paths = list(root_types) or config.catalog.root_types
    if not import_paths:
        click.echo("No root types given and none configured in catalog.root_types.", err=True)
        sys.exit(1)

    try:
        types_to_walk = import_types(import_paths)
    except SchemaCatalogError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    hidden = config.hidden_tags() | set(hide_tags)
    definitions = DefinitionsBuilder().build(hidden, types_to_walk)
    payload = [d.model_dump(mode="json", by_alias=True, exclude_none=True) for d in definitions]

    if output_file:
        try:
            with open(output_file, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2)
        except OSError as e:
            click.echo(f"Error writing output file {output_file}: {e}", err=True)
            sys.exit(1)
        logger.info("Catalog written.", output_file=output_file)
    else:
        click.echo(json.dumps(payload, indent=2))

    click.echo(f"{len(definitions)} definition(s) from {len(types_to_walk)} root type(s).", err=True)


@cli.command()
def version() -> None:
    """Show version information."""
    from . import __version__
    click.echo(f"Schema Catalog v{__version__}")


@cli.command()
@click.pass_context
def config_show(ctx: click.Context) -> None:
    """Show current configuration."""
    config: Config = ctx.obj["config"]
    click.echo(json.dumps(config.model_dump(mode="json"), indent=2))


if __name__ == "__main__":
    cli()
