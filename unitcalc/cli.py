"""
unitcalc command line

    unitcalc                 start the interactive menu
    unitcalc -p 4 --no-color start with 4 decimal places, plain output
    unitcalc rates           show the fixed exchange-rate table
"""

from __future__ import annotations

import logging
import sys

import typer
from rich.console import Console

from . import __version__
from .console import Session, render_rates
from .engine import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

app = typer.Typer(
    name="unitcalc",
    help="Unit converter & calculator for the terminal",
    add_completion=False,
)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=logging.DEBUG if settings.verbose else logging.WARNING,
                        format=LOG_FORMAT, stream=sys.stderr)


@app.callback(invoke_without_command=True)
def _root(
    ctx: typer.Context,
    precision: int = typer.Option(2, "--precision", "-p", min=0, max=10, help="Decimal places for numeric results"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable coloured output"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
):
    """Start the interactive converter when no command is given."""
    settings = Settings(precision=precision, color=not no_color, verbose=verbose)
    settings.validate()
    configure_logging(settings)
    ctx.obj = settings
    if version:
        Console(no_color=no_color).print(f"unitcalc v{__version__}")
        raise typer.Exit(0)
    if ctx.invoked_subcommand is None:
        raise typer.Exit(Session(settings).run())


@app.command()
def rates(ctx: typer.Context):
    """Show the fixed exchange-rate table."""
    settings: Settings = ctx.obj or Settings()
    render_rates(Console(no_color=not settings.color))


def main() -> int:
    try:
        app(prog_name="unitcalc")
    except SystemExit as exc:
        if exc.code is None: return 0
        return exc.code if isinstance(exc.code, int) else 1
    return 0
