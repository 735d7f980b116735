"""Tests for the round pipeline."""

import random
from collections import Counter
from unittest.mock import patch

import pytest

from matchboard.config import default_config
from matchboard.core.errors import IntegrityViolation
from matchboard.core.models import Rarity
from matchboard.game import deal_board, deal_rounds
from matchboard.pool import generate_pool


class TestDealBoard:
    """Tests for dealing a single board."""

    def test_default_board(self, rng):
        """The default game deals 8 pairs including the epic."""
        result = deal_board(default_config(), rng)

        board = result.board
        assert (board.rows, board.cols) == (4, 4)
        counts = Counter(i for row in board.ids() for i in row)
        assert len(counts) == 8
        assert set(counts.values()) == {2}
        # The single epic always makes it onto the board
        assert counts[300] == 2

    def test_board_matches_deck(self, small_config, rng):
        """The board is the shuffled deck laid out row-major."""
        result = deal_board(small_config, rng)
        assert result.board.flatten() == result.deck

    def test_drawn_respects_tiers(self, small_config, rng):
        """Each tier draws distinct ids from its own range."""
        result = deal_board(small_config, rng)

        ranges = small_config.id_ranges()
        for rarity, items in result.drawn.items():
            lo, hi = ranges[rarity]
            assert all(lo <= i.id <= hi for i in items)
            assert len({i.id for i in items}) == len(items)
        assert [len(v) for v in result.drawn.values()] == [3, 2, 1]

    def test_shared_pool_not_depleted(self, small_config, rng):
        """Dealing repeatedly leaves a shared pool intact."""
        pool = generate_pool(small_config, rng)
        before = pool.items()

        for _ in range(5):
            deal_board(small_config, rng, pool=pool)

        assert pool.items() == before

    def test_upstream_bug_surfaces(self, small_config, rng):
        """A shuffle that duplicates a card aborts the round."""
        def broken_shuffle(seq, rng):
            seq = list(seq)
            seq[1] = seq[-1]
            return seq

        with patch("matchboard.game.fisher_yates_shuffle", side_effect=broken_shuffle):
            with pytest.raises(IntegrityViolation):
                deal_board(small_config, rng)


class TestDealRounds:
    """Tests for multi-round dealing."""

    def test_round_count(self, small_config):
        """deal_rounds returns one result per round."""
        results = deal_rounds(small_config, rounds=3, seed=11)
        assert len(results) == 3
        assert all(r.seed == 11 for r in results)

    def test_same_seed_same_boards(self):
        """The same seed deals the same boards."""
        first = deal_rounds(default_config(), rounds=5, seed=42)
        second = deal_rounds(default_config(), rounds=5, seed=42)

        assert [r.board.ids() for r in first] == [r.board.ids() for r in second]

    def test_different_seeds_differ(self):
        """Different seeds deal different boards."""
        a = deal_rounds(default_config(), rounds=3, seed=1)
        b = deal_rounds(default_config(), rounds=3, seed=2)

        assert [r.board.ids() for r in a] != [r.board.ids() for r in b]

    def test_seed_generated_when_missing(self, small_config):
        """A seed is generated when none is given."""
        results = deal_rounds(small_config, rounds=1)
        assert isinstance(results[0].seed, int)

    def test_module_random_untouched(self, small_config):
        """Dealing never touches module-level random state."""
        random.seed(0)
        expected = random.random()

        random.seed(0)
        deal_rounds(small_config, rounds=2, seed=3)

        assert random.random() == expected
