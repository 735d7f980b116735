"""Typer application for the matchboard CLI."""

import logging

import typer

from .. import __version__

app = typer.Typer(
    name="matchboard",
    help="Generate memory game boards from rarity-weighted item pools.",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"matchboard {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """matchboard: weighted card selection, pairing and board layout."""
    configure_logging(verbose)


def configure_logging(verbose: bool) -> None:
    """Route package logs to stderr, at DEBUG when verbose."""
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("matchboard").setLevel(logging.DEBUG if verbose else logging.WARNING)


def fail(message: str) -> None:
    """Print an error in red and exit with status 1."""
    typer.secho(f"Error: {message}", fg=typer.colors.RED)
    raise typer.Exit(code=1)
