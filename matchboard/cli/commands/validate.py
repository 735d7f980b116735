"""Validate command: check a YAML game configuration."""

from pathlib import Path

import typer

from ...config import load_config
from ...core.errors import MatchBoardError
from ..app import app, fail


@app.command()
def validate(
    config_path: Path = typer.Argument(..., help="YAML game configuration to check."),
) -> None:
    """Validate a game configuration without dealing."""
    try:
        config = load_config(config_path)
    except MatchBoardError as e:
        fail(str(e))

    typer.secho(
        f"OK: {len(config.tiers)} tiers, {config.total_draws} pairs on a "
        f"{config.board_rows}x{config.board_cols} board",
        fg=typer.colors.GREEN,
    )
