"""Build the universe of candidate items from a game configuration."""

import logging
import random

from ..core.models import GameConfig, Item
from .item_pool import ItemPool

logger = logging.getLogger(__name__)


def generate_pool(config: GameConfig, rng: random.Random) -> ItemPool:
    """Generate every tier's items with consecutive identifiers.

    Each item gets a uniform random weight in ``[weight_min, weight_max]``
    unless its tier sets ``fixed_weight``.

    Args:
        config: Validated game configuration
        rng: Random source, consumed in tier then identifier order

    Returns:
        ItemPool holding all tiers
    """
    items = []
    id_ranges = config.id_ranges()

    for tier in config.tiers:
        start, end = id_ranges[tier.name]
        for item_id in range(start, end + 1):
            if tier.fixed_weight is not None:
                weight = tier.fixed_weight
            else:
                weight = rng.randint(config.weight_min, config.weight_max)
            items.append(Item(id=item_id, weight=weight, rarity=tier.name))

        logger.debug(
            f"[Pool] {tier.name.value}: ids {start}-{end} ({tier.pool_size} items)"
        )

    return ItemPool(items)
