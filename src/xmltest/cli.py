"""CLI entry point using Typer."""

import json
import re
from pathlib import Path
from typing import Annotated, Any

import typer

from xmltest.config import Settings
from xmltest.entries import EntriesIndexError, get_entries, is_directory, load_entries
from xmltest.filters import replace_non_text_chars
from xmltest.logging_setup import configure_logging
from xmltest.sax.catalog import CATEGORIES

app = typer.Typer(
    name="xmltest",
    help="Inspect the SAX handler catalog and the xmltest suite entries",
    no_args_is_help=True,
)


def main() -> None:
    """Entry point for the CLI."""
    app()


@app.callback()
def setup(
    verbose: Annotated[
        bool, typer.Option("-v", "--verbose", help="Enable debug logging")
    ] = False,
) -> None:
    """Configure logging before any command runs."""
    settings = Settings.load()
    configure_logging("DEBUG" if verbose else settings.log_level)


@app.command()
def catalog(
    category: Annotated[
        str | None,
        typer.Option("-c", "--category", help="Only list methods of this category"),
    ] = None,
) -> None:
    """List the SAX callback methods every handler implements."""
    if category is not None:
        methods = CATEGORIES.get(category)
        if methods is None:
            typer.echo(f"Unknown category: {category}", err=True)
            typer.echo(f"Valid values: {', '.join(CATEGORIES)}", err=True)
            raise typer.Exit(1)
        for member in methods:
            typer.echo(member.value)
        return

    for name, methods in CATEGORIES.items():
        typer.echo(f"[{name}]")
        for member in methods:
            typer.echo(f"  {member.value}")


@app.command()
def entries(
    filters: Annotated[
        list[str] | None, typer.Argument(help="Substrings (or patterns) the path must contain")
    ] = None,
    index: Annotated[
        Path | None, typer.Option("-i", "--index", help="JSON entries index to read")
    ] = None,
    regex: Annotated[
        bool, typer.Option("--regex", help="Treat filters as regular expressions")
    ] = False,
    files_only: Annotated[
        bool, typer.Option("--files-only", help="Leave out directory entries")
    ] = False,
) -> None:
    """Print the entries matching all filters.

    A single filter matching exactly one entry prints its value, anything else
    prints a JSON object.
    """
    settings = Settings.load()
    index_path = index or settings.index_path
    if index_path is None:
        typer.echo("No entries index given. Use --index or set XMLTEST_INDEX.", err=True)
        raise typer.Exit(1)

    try:
        data = load_entries(index_path)
    except EntriesIndexError as err:
        typer.echo(str(err), err=True)
        raise typer.Exit(1) from err

    if files_only:
        data = {key: value for key, value in data.items() if not is_directory(key)}

    args = list(filters or [])
    if regex:
        try:
            compiled: list[Any] = [re.compile(f) for f in args]
        except re.error as err:
            typer.echo(f"Invalid pattern: {err}", err=True)
            raise typer.Exit(1) from err
        result = get_entries(data, *compiled)
    else:
        result = get_entries(data, *args)

    visible = replace_non_text_chars if settings.visible_control_chars else (lambda v: v)
    if isinstance(result, dict):
        typer.echo(json.dumps({k: visible(v) for k, v in result.items()}, indent=2))
    else:
        typer.echo(visible(result))
