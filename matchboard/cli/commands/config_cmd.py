"""Config command: inspect the effective configuration."""

from pathlib import Path

import typer

from ...config import load_config
from ...core.errors import MatchBoardError
from ..app import app, fail


@app.command("config")
def config_command(
    action: str = typer.Argument("show", help="Action to perform: show"),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="YAML game configuration."
    ),
) -> None:
    """Show the effective game configuration."""
    if action != "show":
        fail(f"Unknown action '{action}'. Available: show")

    try:
        config = load_config(config_path)
    except MatchBoardError as e:
        fail(str(e))

    typer.echo("Board")
    typer.echo(f"  rows: {config.board_rows}")
    typer.echo(f"  cols: {config.board_cols}")
    typer.echo(f"  weights: {config.weight_min}-{config.weight_max}")
    typer.echo("Tiers")
    for tier, (start, end) in zip(config.tiers, config.id_ranges().values()):
        weight = tier.fixed_weight if tier.fixed_weight is not None else "random"
        typer.echo(
            f"  {tier.name.value}: draw {tier.draw_count} of {tier.pool_size} "
            f"(ids {start}-{end}, weight {weight})"
        )
