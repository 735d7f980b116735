"""Shared validation primitives for matchboard.

Modules:
    pairing: The exactly-two-of-each-identifier check run on decks and boards
"""

from .pairing import (
    identifier_counts,
    check_pairing,
)

__all__ = [
    "identifier_counts",
    "check_pairing",
]
