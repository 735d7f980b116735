"""Seedable random sources.

All randomness is injected as a ``random.Random`` instance. The module-level
``random`` state is never touched, so a seed fully determines a round.
"""

import random


def make_rng(seed: int | None = None) -> random.Random:
    """Create an independent random stream, optionally seeded."""
    return random.Random(seed)


def new_seed() -> int:
    """Draw a fresh seed from system entropy."""
    return random.SystemRandom().randrange(2**32)
