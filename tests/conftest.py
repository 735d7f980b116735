"""Global fixtures for matchboard tests."""

import random

import pytest

from matchboard.core.models import GameConfig, Item, Rarity, TierConfig
from matchboard.pool import ItemPool


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(42)


@pytest.fixture
def weighted_items():
    """Four commons with weights 30/45/55/35 (ids 1-4)."""
    return [
        Item(id=1, weight=30, rarity=Rarity.COMMON),
        Item(id=2, weight=45, rarity=Rarity.COMMON),
        Item(id=3, weight=55, rarity=Rarity.COMMON),
        Item(id=4, weight=35, rarity=Rarity.COMMON),
    ]


@pytest.fixture
def tiered_pool():
    """Small pool: 6 commons, 3 rares, 1 epic."""
    items = [Item(id=i, weight=10 + i, rarity=Rarity.COMMON) for i in range(1, 7)]
    items += [Item(id=i, weight=5, rarity=Rarity.RARE) for i in range(20, 23)]
    items.append(Item(id=30, weight=100, rarity=Rarity.EPIC))
    return ItemPool(items)


@pytest.fixture
def small_config():
    """3 commons + 2 rares + 1 epic = 6 pairs on a 3x4 board."""
    return GameConfig(
        tiers=[
            TierConfig(name=Rarity.COMMON, pool_size=8, draw_count=3),
            TierConfig(name=Rarity.RARE, pool_size=4, draw_count=2),
            TierConfig(name=Rarity.EPIC, pool_size=1, draw_count=1, fixed_weight=100),
        ],
        board_rows=3,
        board_cols=4,
    )


@pytest.fixture
def make_deck():
    """Factory for decks holding each identifier exactly twice, pairs adjacent."""

    def _make(ids):
        deck = []
        for i in ids:
            item = Item(id=i, weight=1, rarity=Rarity.COMMON)
            deck.extend([item, item])
        return deck

    return _make
