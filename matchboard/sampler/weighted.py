"""Weighted single-item draws.

Each item owns a contiguous closed interval of integers whose width equals
its weight. Intervals are laid out in ascending weight order starting at 1,
so for weights 30/45/55/35 (ids 1-4):

    id | range
    ----------
     1 | (1, 30)
     4 | (31, 65)
     2 | (66, 110)
     3 | (111, 165)

A uniform integer in ``[1, total_weight]`` then selects exactly one item.
The layout order only decides which integer maps to which item; the draw
probabilities are weight / total either way.
"""

import random
from typing import Sequence

from pydantic import BaseModel, ConfigDict

from ..core.errors import InvalidInput
from ..core.models import Item


class WeightedRange(BaseModel):
    """Closed interval ``[lower, upper]`` owned by one item."""

    model_config = ConfigDict(frozen=True)

    item: Item
    lower: int
    upper: int

    def __contains__(self, value: int) -> bool:
        return self.lower <= value <= self.upper


def build_weighted_ranges(items: Sequence[Item]) -> list[WeightedRange]:
    """Lay out the items' intervals in ascending weight order.

    The sort is stable: items of equal weight keep their pool order.
    """
    ranges = []
    offset = 0
    for item in sorted(items, key=lambda i: i.weight):
        ranges.append(WeightedRange(item=item, lower=offset + 1, upper=offset + item.weight))
        offset += item.weight
    return ranges


def pick_from_ranges(ranges: Sequence[WeightedRange], value: int) -> Item:
    """Return the item whose interval contains ``value``."""
    for weighted in ranges:
        if value in weighted:
            return weighted.item

    total = ranges[-1].upper if ranges else 0
    raise InvalidInput(f"Draw value {value} outside [1, {total}]")


def draw_weighted(items: Sequence[Item], rng: random.Random) -> Item:
    """Draw one item with probability proportional to its weight.

    Args:
        items: Non-empty collection of candidate items (not modified)
        rng: Random source

    Returns:
        The chosen item

    Raises:
        InvalidInput: If ``items`` is empty
    """
    if not items:
        raise InvalidInput("Cannot draw from an empty pool")

    ranges = build_weighted_ranges(items)
    value = rng.randint(1, ranges[-1].upper)
    return pick_from_ranges(ranges, value)
