"""Fisher-Yates shuffle.

http://en.wikipedia.org/wiki/Fisher-Yates_shuffle
"""

import random
from typing import Sequence, TypeVar

T = TypeVar("T")


def fisher_yates_shuffle(sequence: Sequence[T], rng: random.Random) -> list[T]:
    """Return a uniformly random permutation of ``sequence``.

    The input is copied, never modified. Every ordering is equally likely
    provided ``rng`` is uniform.
    """
    shuffled = list(sequence)
    for pos in range(len(shuffled) - 1, 0, -1):
        swap = rng.randint(0, pos)
        shuffled[pos], shuffled[swap] = shuffled[swap], shuffled[pos]
    return shuffled
