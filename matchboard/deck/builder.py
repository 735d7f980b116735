"""Deck assembly: per-tier weighted draws without replacement, paired.

Each tier draws from its own working copy of its sub-pool. A drawn item is
appended twice and removed from the working copy before the next draw, so no
tier ever yields the same identifier twice. The configured pool is left
untouched and can be dealt from again.
"""

import logging
import random
from typing import Mapping

from pydantic import BaseModel, Field

from ..core.errors import PoolExhausted
from ..core.models import Item, Rarity
from ..pool import ItemPool
from ..sampler import draw_weighted
from ..validation import check_pairing

logger = logging.getLogger(__name__)


class BuiltDeck(BaseModel):
    """Unshuffled deck plus the distinct items drawn per tier."""

    items: list[Item] = Field(default_factory=list)
    drawn: dict[Rarity, list[Item]] = Field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.items)


def draw_from_tier(
    pool: ItemPool,
    rarity: Rarity,
    count: int,
    rng: random.Random,
) -> list[Item]:
    """Draw ``count`` distinct items of one tier, weighted, without replacement.

    Raises:
        PoolExhausted: If the tier holds fewer than ``count`` items
    """
    working = pool.working_copy(rarity)
    drawn = []

    for _ in range(count):
        if not len(working):
            raise PoolExhausted(
                f"Tier '{rarity.value}' exhausted after {len(drawn)} of {count} draws"
            )
        chosen = draw_weighted(working.items(), rng)
        working.remove(chosen.id)
        drawn.append(chosen)

    return drawn


def build_deck(
    pool: ItemPool,
    draw_counts: Mapping[Rarity, int],
    rng: random.Random,
) -> BuiltDeck:
    """Assemble the duplicated, unshuffled deck.

    Args:
        pool: Pool to draw from (not modified)
        draw_counts: Number of distinct items to draw per tier, processed
            in mapping order
        rng: Random source

    Returns:
        BuiltDeck whose items hold each drawn identifier exactly twice

    Raises:
        PoolExhausted: If a tier cannot satisfy its quota
        IntegrityViolation: If the assembled deck breaks the pairing invariant
    """
    deck = BuiltDeck()

    for rarity, count in draw_counts.items():
        drawn = draw_from_tier(pool, rarity, count, rng)
        deck.drawn[rarity] = drawn
        for item in drawn:
            deck.items.extend((item, item))

        logger.debug(f"[Deck] {rarity.value}: drew {[i.id for i in drawn]}")

    check_pairing(deck.items)

    logger.info(
        f"[Deck] Built {len(deck)} cards from {sum(draw_counts.values())} draws"
    )
    return deck
