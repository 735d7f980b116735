"""matchboard: memory game board generation.

Draws rarity-weighted items from tiered pools, pairs them, shuffles the
pairs and lays them out on a fixed grid.
"""

__version__ = "0.1.0"

from .core.errors import (
    MatchBoardError,
    InvalidInput,
    PoolExhausted,
    SizeMismatch,
    IntegrityViolation,
)
from .core.models import Board, DealResult, GameConfig, Item, Rarity, TierConfig
from .config import default_config, load_config
from .game import deal_board, deal_rounds

__all__ = [
    "__version__",
    # Errors
    "MatchBoardError",
    "InvalidInput",
    "PoolExhausted",
    "SizeMismatch",
    "IntegrityViolation",
    # Models
    "Rarity",
    "Item",
    "TierConfig",
    "GameConfig",
    "Board",
    "DealResult",
    # Pipeline
    "default_config",
    "load_config",
    "deal_board",
    "deal_rounds",
]
