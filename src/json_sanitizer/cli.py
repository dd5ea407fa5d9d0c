"""Command-line interface for the JSON Schema Sanitizer."""

import json
import logging
import click
from pathlib import Path
from . import __version__
from .json_sanitizer import JSONSanitizer


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )


@click.group()
@click.version_option(version=__version__)
def main():
    """JSON Schema Sanitizer - Move nested inline objects into 'definitions'."""
    pass


@main.command()
@click.argument('schema_files', nargs=-1, type=click.Path(path_type=Path))
@click.option('--suffix', '-s', default='.san', show_default=True,
              help='Suffix appended to each input file name for the output file')
@click.option('--indent', default=2, show_default=True, help='Indentation of the written JSON')
@click.option('--quiet', '-q', is_flag=True, help='Do not print sanitized schemas')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.pass_context
def sanitize(ctx: click.Context, schema_files, suffix: str, indent: int, quiet: bool, verbose: bool):
    """Sanitize one or more JSON schema files."""
    _configure_logging(verbose)

    if not schema_files:
        click.echo("Please provide full path to JSON schema file as argument", err=True)
        ctx.exit(1)

    sanitizer = JSONSanitizer(output_suffix=suffix, indent=indent)

    for result in sanitizer.sanitize_files(schema_files):
        if result.success:
            if not quiet:
                click.echo(result.rendered)
            click.echo(f"✅ {result.source} -> {result.output_path} "
                       f"({result.externalized} definitions externalized)", err=True)
        else:
            click.echo(f"❌ {result.source}:", err=True)
            for error in result.errors or []:
                click.echo(f"   • {error}", err=True)


@main.command()
@click.argument('schema_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.pass_context
def stats(ctx: click.Context, schema_file: Path, verbose: bool):
    """Show nesting statistics of a JSON schema file."""
    _configure_logging(verbose)

    sanitizer = JSONSanitizer(enable_profiling=False)
    document = sanitizer.parser.load_document(schema_file)
    if not document.is_present():
        click.echo(f"❌ No JSON found at path '{schema_file}'", err=True)
        ctx.exit(1)

    statistics = sanitizer.parser.get_structure_statistics(document.root)
    click.echo(json.dumps(statistics, indent=2))


if __name__ == '__main__':
    main()
