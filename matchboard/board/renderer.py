"""Plain-text rendering of a board."""

from ..core.models import Board


def render_row(ids: list[int]) -> str:
    return "| " + " | ".join(f"{i:<3}" for i in ids) + " |"


def render_board(board: Board) -> str:
    """Render one line per row, e.g. ``| 204 | 204 | 184 | 202 |``."""
    return "\n".join(render_row(row) for row in board.ids())
