"""Item pools: generation from configuration and removable working copies."""

from .item_pool import ItemPool
from .generator import generate_pool

__all__ = [
    "ItemPool",
    "generate_pool",
]
