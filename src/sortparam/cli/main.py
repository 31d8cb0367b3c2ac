"""
Main CLI entry point for sortparam.
"""

from __future__ import annotations

import logging
from typing import List

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from sortparam import __version__
from sortparam.exceptions import (
    EXIT_CODE_GENERAL_ERROR,
    EXIT_CODE_INVALID_ARGS,
    MixedSortDirectionError,
    SortConfigurationError,
)
from sortparam.models.sort import Sort
from sortparam.parsers.sort_parser import DEFAULT_PROPERTY_DELIMITER, parse_sort
from sortparam.services.expression_folder import (
    fold_into_expressions,
    legacy_fold_expressions,
)

console = Console()

app = typer.Typer(
    name="sortparam",
    help="Parse and fold sort parameter expressions",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def _configure_logging(verbose: bool) -> None:
    """Send sortparam debug logging to stderr when verbose."""
    if not verbose:
        return

    handler = logging.StreamHandler()
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger = logging.getLogger("sortparam")
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.DEBUG)


def _parse_or_exit(expressions: List[str], delimiter: str) -> Sort:
    try:
        return parse_sort(expressions, delimiter)
    except SortConfigurationError as e:
        console.print(Panel(f"[red]{e.message}[/red]", title="Error", border_style="red"))
        raise typer.Exit(code=EXIT_CODE_INVALID_ARGS)


@app.command()
def parse(
    expressions: List[str] = typer.Argument(
        ..., help="Sort expressions, e.g. 'firstname,lastname,asc'"
    ),
    delimiter: str = typer.Option(
        DEFAULT_PROPERTY_DELIMITER, "--delimiter", "-d", help="Property delimiter"
    ),
) -> None:
    """Parse sort expressions and show the resulting orders."""
    sort = _parse_or_exit(expressions, delimiter)

    if sort.is_unsorted:
        console.print("[yellow]unsorted[/yellow]")
        return

    table = Table(title="Sort")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Property", style="cyan")
    table.add_column("Direction", style="magenta")

    for position, order in enumerate(sort, start=1):
        table.add_row(str(position), order.property, order.direction.name)

    console.print(table)


@app.command()
def fold(
    expressions: List[str] = typer.Argument(
        ..., help="Sort expressions to normalize"
    ),
    delimiter: str = typer.Option(
        DEFAULT_PROPERTY_DELIMITER, "--delimiter", "-d", help="Property delimiter"
    ),
    legacy: bool = typer.Option(
        False, "--legacy", help="Allow a single direction only"
    ),
) -> None:
    """Parse sort expressions and fold them back into compact form."""
    sort = _parse_or_exit(expressions, delimiter)

    try:
        if legacy:
            folded = legacy_fold_expressions(sort, delimiter, owner="sortparam fold")
        else:
            folded = fold_into_expressions(sort, delimiter)
    except MixedSortDirectionError as e:
        console.print(
            Panel(
                f"[red]{e.message}[/red]\n"
                f"Directions found: {', '.join(e.directions)}",
                title="Error",
                border_style="red",
            )
        )
        raise typer.Exit(code=EXIT_CODE_GENERAL_ERROR)

    for expression in folded:
        console.print(expression, markup=False, highlight=False)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(
        Panel(
            f"[bold blue]sortparam[/bold blue] v{__version__}",
            title="Version",
            border_style="blue",
        )
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", help="Enable debug logging"
    ),
) -> None:
    """
    sortparam - Sort parameter codec.

    Parses expressions such as 'firstname,lastname,asc' into ordered sort
    keys and folds sort keys back into expressions.
    """
    if version:
        console.print(f"sortparam v{__version__}")
        raise typer.Exit(code=0)

    _configure_logging(verbose)

    if ctx.invoked_subcommand is None:
        console.print("[yellow]Use 'sortparam --help' for available commands[/yellow]")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
