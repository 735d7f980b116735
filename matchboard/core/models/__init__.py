"""Data models for matchboard.

This package contains all Pydantic models used across the system:
- items.py: Rarity tiers and weighted items
- game.py: Tier quotas and the game configuration
- board.py: The laid-out board and dealt-round results
"""

from .items import (
    Rarity,
    Item,
)

from .game import (
    TierConfig,
    GameConfig,
)

from .board import (
    Board,
    DealResult,
)

__all__ = [
    # Items
    "Rarity",
    "Item",
    # Configuration
    "TierConfig",
    "GameConfig",
    # Board
    "Board",
    "DealResult",
]
