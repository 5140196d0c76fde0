"""Command-line interface for rendering tables from YAML or JSON documents."""

from __future__ import annotations

import logging
import sys
from typing import IO, Any

import click
import yaml

from .exceptions import ConfigurationError
from .models import RenderConfig, TableStyle
from .table import TableRenderer

# Implicit scalar types that would rewrite cell text (0123 -> 83, no -> False)
_TYPED_TAGS = {
    "tag:yaml.org,2002:bool",
    "tag:yaml.org,2002:int",
    "tag:yaml.org,2002:float",
    "tag:yaml.org,2002:timestamp",
}


class _TextLoader(yaml.SafeLoader):
    """SafeLoader that reads plain scalars as strings, keeping null."""

    yaml_implicit_resolvers = {
        first: [(tag, regexp) for tag, regexp in resolvers if tag not in _TYPED_TAGS]
        for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
    }


@click.group()
@click.version_option(package_name="tinytable")
def cli() -> None:
    """tinytable text table CLI."""
    pass


@cli.command()
@click.argument("file", type=click.File("r", encoding="utf-8"))
@click.option(
    "--header-row",
    is_flag=True,
    help="Treat the first row as a header and rule it off",
)
@click.option(
    "--separate-rows",
    is_flag=True,
    help="Draw a rule between every row (heavier rule below the header)",
)
@click.option(
    "--top-and-tail",
    is_flag=True,
    help="Skip the top and bottom border lines",
)
@click.option(
    "--ansi",
    is_flag=True,
    help="Cells contain ANSI colour escapes; ignore them when measuring",
)
@click.option("--column-separator", help="Column separator glyph (default: |)")
@click.option("--row-separator", help="Row rule fill glyph (default: -)")
@click.option("--corner-marker", help="Row rule corner glyph (default: +)")
@click.option("--header-row-separator", help="Header rule fill glyph (default: =)")
@click.option("--header-corner-marker", help="Header rule corner glyph (default: O)")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def render(
    file: IO[str],
    header_row: bool,
    separate_rows: bool,
    top_and_tail: bool,
    ansi: bool,
    column_separator: str | None,
    row_separator: str | None,
    corner_marker: str | None,
    header_row_separator: str | None,
    header_corner_marker: str | None,
    verbose: bool,
) -> None:
    """Render a table from FILE (YAML or JSON list of rows, '-' for stdin).

    Glyph defaults can also be set with TINYTABLE_* environment variables.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    rows = _load_rows(file)

    try:
        style = TableStyle.from_environment().replace(
            column_separator=column_separator,
            row_separator=row_separator,
            corner_marker=corner_marker,
            header_row_separator=header_row_separator,
            header_corner_marker=header_corner_marker,
        )
        config = RenderConfig(
            header_row=header_row,
            separate_rows=separate_rows,
            top_and_tail=top_and_tail,
            ansi=ansi,
            style=style,
        )
        click.echo(TableRenderer(config).render(rows), color=True)
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def _load_rows(file: IO[str]) -> list[Any]:
    """Load and validate a list-of-rows document."""
    try:
        data = yaml.load(file, Loader=_TextLoader)
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        click.echo(f"Error: could not parse input: {e}", err=True)
        sys.exit(1)
    if not isinstance(data, list):
        click.echo("Error: document must contain a list of rows", err=True)
        sys.exit(1)
    for i, row in enumerate(data):
        if row is not None and not isinstance(row, list):
            click.echo(f"Error: row {i} must be a list of cells", err=True)
            sys.exit(1)
    return data


if __name__ == "__main__":
    cli()
