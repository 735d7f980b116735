"""Board models: the finished grid and the result of dealing a round."""

from pydantic import BaseModel, ConfigDict

from .items import Item, Rarity


class Board(BaseModel):
    """Fixed rows x cols grid of items. Read-only once laid out."""

    model_config = ConfigDict(frozen=True)

    rows: int
    cols: int
    cells: tuple[tuple[Item, ...], ...]

    def __getitem__(self, position: tuple[int, int]) -> Item:
        row, col = position
        return self.cells[row][col]

    def ids(self) -> list[list[int]]:
        """Grid of item identifiers."""
        return [[item.id for item in row] for row in self.cells]

    def flatten(self) -> list[Item]:
        """Cells in row-major order."""
        return [item for row in self.cells for item in row]


class DealResult(BaseModel):
    """One dealt round: the board plus how it was produced."""

    board: Board
    deck: list[Item]
    drawn: dict[Rarity, list[Item]]
    seed: int | None = None
