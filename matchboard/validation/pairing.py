"""Pairing invariant: every identifier on a board appears exactly twice."""

from collections import Counter
from typing import Iterable

from ..core.errors import IntegrityViolation
from ..core.models import Item


def identifier_counts(items: Iterable[Item]) -> Counter:
    """Number of occurrences of each item identifier."""
    return Counter(item.id for item in items)


def check_pairing(items: Iterable[Item]) -> None:
    """Raise IntegrityViolation unless each identifier occurs exactly twice.

    Catches upstream bugs (duplicate tier draws, sampler errors) that would
    otherwise produce an unsolvable board.
    """
    counts = identifier_counts(items)

    repeated = sorted(i for i, n in counts.items() if n > 2)
    if repeated:
        raise IntegrityViolation(f"Same card selected twice: {repeated}")

    singles = sorted(i for i, n in counts.items() if n < 2)
    if singles:
        raise IntegrityViolation(f"Card only appears once: {singles}")
