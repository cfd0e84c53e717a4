"""Main CLI interface for the implied foreign key tool."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from .config import Config
from .implied_constraints_finder import ImpliedConstraintsFinder
from .report_generator import ReportGenerator, build_relationships
from .schema_loader import SchemaLoader


logger = logging.getLogger(__name__)


# Configure logging
def setup_logging(log_level: str, log_file: Optional[str] = None):
    """Setup logging configuration.

    Args:
        log_level: Logging level
        log_file: Optional log file path
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    # stdout may carry the report itself
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True
    )


@click.command()
@click.option('--schema-file', help='Path to schema JSON document (overrides .env)')
@click.option('--format', 'output_format',
              type=click.Choice(['json', 'mermaid', 'plantuml']),
              help='Output format')
@click.option('--output-file', help='Output file path, stdout if omitted; the format extension is added when missing')
@click.option('--excluded-column', help='Column name left out of implied key detection')
@click.option('--no-excluded-column', is_flag=True, help='Do not exclude any column name')
@click.option('--exclude-implied', help='Regex over table.column excluded from implied relationships')
@click.option('--implied/--no-implied', default=None, help='Detect implied relationships')
@click.option('--show-column-types/--no-show-column-types', default=None,
              help='Show column data types')
@click.option('--env-file', help='Path to .env file')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--dry-run', is_flag=True, help='Show what would be done without executing')
def main(schema_file: Optional[str],
         output_format: Optional[str],
         output_file: Optional[str],
         excluded_column: Optional[str],
         no_excluded_column: bool,
         exclude_implied: Optional[str],
         implied: Optional[bool],
         show_column_types: Optional[bool],
         env_file: Optional[str],
         verbose: bool,
         dry_run: bool):
    """Find implied foreign keys in a schema and report them.

    Reads table and column metadata from a schema document, finds columns
    that look like undeclared foreign keys, and renders declared and implied
    relationships.

    Examples:

        # Mermaid diagram on stdout
        implied-fk --schema-file schema.json

        # JSON report, without excluding LanguageId columns
        implied-fk --schema-file schema.json --format json --no-excluded-column
    """
    try:
        config_manager = Config(env_file)

        # Build configuration overrides
        overrides = {}
        if schema_file:
            overrides['schema_file'] = schema_file
        if output_format:
            overrides['output_format'] = output_format
        if output_file:
            overrides['output_file'] = output_file
        if excluded_column:
            overrides['excluded_column_name'] = excluded_column
        if no_excluded_column:
            overrides['excluded_column_name'] = None
        if exclude_implied:
            overrides['exclude_implied_pattern'] = exclude_implied
        if implied is not None:
            overrides['include_implied'] = implied
        if show_column_types is not None:
            overrides['show_column_types'] = show_column_types

        config = config_manager.get_finder_config(**overrides)

        log_level = 'DEBUG' if verbose else config.log_level
        setup_logging(log_level, config.log_file)
        logger.info(f"Starting implied key detection for schema: {config.schema_file}")

        if dry_run:
            click.echo("DRY RUN - Configuration:")
            click.echo(f"  Schema File: {config.schema_file}")
            click.echo(f"  Excluded Column: {config.excluded_column_name or 'none'}")
            click.echo(f"  Include Implied: {config.include_implied}")
            click.echo(f"  Exclude Pattern: {config.exclude_implied_pattern or 'none'}")
            click.echo(f"  Output Format: {config.output_format.value}")
            click.echo(f"  Output File: {config.output_file or 'stdout'}")
            return

        config_manager.validate_config(config)

        loader = SchemaLoader(config.exclude_implied_pattern)
        tables = loader.load_file(config.schema_file)
        if not tables:
            click.echo("No tables found in schema", err=True)
            return

        implied_constraints = []
        if config.include_implied:
            finder = ImpliedConstraintsFinder(config.excluded_column_name)
            implied_constraints = finder.find(tables)

        relationships = build_relationships(tables, implied_constraints)
        generator = ReportGenerator(config)
        content = generator.generate_report(tables, relationships)

        if config.output_file:
            output_path = Path(config.output_file)
            if not output_path.suffix:
                output_path = output_path.with_suffix(generator.get_file_extension())
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, 'w', encoding='utf-8') as f:
                f.write(content)
            click.echo(f"Report generated successfully: {output_path}", err=True)
        else:
            click.echo(content)

        click.echo(f"  Tables: {len(tables)}", err=True)
        click.echo(f"  Declared Relationships: {len(relationships) - len(implied_constraints)}", err=True)
        click.echo(f"  Implied Relationships: {len(implied_constraints)}", err=True)

    except KeyboardInterrupt:
        click.echo("\nOperation cancelled by user", err=True)
        sys.exit(1)
    except ValueError as e:
        # Covers SchemaLoadError and pydantic validation errors
        logger.error(f"{type(e).__name__}: {e}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
