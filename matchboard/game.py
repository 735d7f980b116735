"""Round pipeline: pool -> weighted draws -> deck -> shuffle -> board.

Either a fully valid board is produced or a MatchBoardError propagates;
there are no partial results and nothing is retried.
"""

import logging
import random

from .board import layout_board
from .core.models import DealResult, GameConfig
from .core.rng import make_rng, new_seed
from .deck import build_deck, fisher_yates_shuffle
from .pool import ItemPool, generate_pool

logger = logging.getLogger(__name__)


def deal_board(
    config: GameConfig,
    rng: random.Random,
    pool: ItemPool | None = None,
) -> DealResult:
    """Deal one board.

    Args:
        config: Validated game configuration
        rng: Random source shared, in order, by pool generation, the
            weighted draws and the shuffle
        pool: Pre-generated pool to draw from; generated from ``config``
            when omitted. Never modified.

    Returns:
        DealResult with the board, the shuffled deck and the per-tier draws
    """
    if pool is None:
        pool = generate_pool(config, rng)

    built = build_deck(pool, config.draw_counts(), rng)
    shuffled = fisher_yates_shuffle(built.items, rng)
    board = layout_board(shuffled, config.board_rows, config.board_cols)

    return DealResult(board=board, deck=shuffled, drawn=built.drawn)


def deal_rounds(
    config: GameConfig,
    rounds: int = 1,
    seed: int | None = None,
) -> list[DealResult]:
    """Deal several boards from a single generated pool.

    The pool is generated once and every round draws from all of it again.
    All rounds consume one seeded stream, so the same seed reproduces the
    same sequence of boards.
    """
    if seed is None:
        seed = new_seed()

    rng = make_rng(seed)
    pool = generate_pool(config, rng)
    logger.info(f"[Game] Dealing {rounds} round(s) from {pool!r}, seed={seed}")

    results = []
    for round_num in range(rounds):
        result = deal_board(config, rng, pool=pool)
        results.append(result.model_copy(update={"seed": seed}))
        logger.debug(f"[Game] Round {round_num + 1}: {result.board.ids()}")

    return results
