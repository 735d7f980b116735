"""Place a shuffled deck onto the board grid."""

from typing import Sequence

from ..core.errors import SizeMismatch
from ..core.models import Board, Item
from ..validation import check_pairing


def layout_board(deck: Sequence[Item], rows: int, cols: int) -> Board:
    """Fill a rows x cols board in row-major order.

    ``deck[0]`` lands at (0, 0), ``deck[cols]`` at (1, 0), and so on. No
    other placement rules apply; randomness comes from the shuffle.

    Raises:
        SizeMismatch: If the deck does not exactly fill the board
        IntegrityViolation: If an identifier does not appear exactly twice
    """
    if len(deck) != rows * cols:
        raise SizeMismatch(
            f"Deck has {len(deck)} cards but a {rows}x{cols} board needs {rows * cols}"
        )

    check_pairing(deck)

    cells = tuple(tuple(deck[row * cols:(row + 1) * cols]) for row in range(rows))
    return Board(rows=rows, cols=cols, cells=cells)
