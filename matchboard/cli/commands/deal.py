"""Deal command: generate and print boards."""

from pathlib import Path

import typer

from ...board import render_board
from ...config import load_config
from ...core.errors import MatchBoardError
from ...game import deal_rounds
from ..app import app, configure_logging, fail


@app.command()
def deal(
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="YAML game configuration."
    ),
    seed: int | None = typer.Option(None, "--seed", "-s", help="Seed for reproducible boards."),
    rounds: int = typer.Option(1, "--rounds", "-n", min=1, help="Number of boards to deal."),
    show_seed: bool = typer.Option(False, "--show-seed", help="Print the seed used."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Deal one or more boards and print them."""
    if verbose:
        configure_logging(True)

    try:
        config = load_config(config_path)
        results = deal_rounds(config, rounds=rounds, seed=seed)
    except MatchBoardError as e:
        fail(str(e))

    if show_seed:
        typer.echo(f"Seed: {results[0].seed}")

    typer.echo("\n\n".join(render_board(r.board) for r in results))
