"""Weighted sampling of items."""

from .weighted import (
    WeightedRange,
    build_weighted_ranges,
    pick_from_ranges,
    draw_weighted,
)

__all__ = [
    "WeightedRange",
    "build_weighted_ranges",
    "pick_from_ranges",
    "draw_weighted",
]
