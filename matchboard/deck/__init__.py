"""Deck building and shuffling."""

from .builder import BuiltDeck, draw_from_tier, build_deck
from .shuffle import fisher_yates_shuffle

__all__ = [
    "BuiltDeck",
    "draw_from_tier",
    "build_deck",
    "fisher_yates_shuffle",
]
