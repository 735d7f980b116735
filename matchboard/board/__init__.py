"""Board layout and rendering."""

from .layout import layout_board
from .renderer import render_board

__all__ = [
    "layout_board",
    "render_board",
]
