"""Item pool partitioned by rarity tier.

The pool is an arena of items indexed by identifier. Removal is by id, so
drawing never mutates a list that is being iterated. Deck building always
works on ``working_copy()`` and leaves the configured pool intact.
"""

from typing import Iterable, Iterator

from ..core.errors import InvalidInput
from ..core.models import Item, Rarity


class ItemPool:
    """Ordered collection of unique items with removal by identifier."""

    def __init__(self, items: Iterable[Item] = ()) -> None:
        self._items: dict[int, Item] = {}
        for item in items:
            if item.id in self._items:
                raise InvalidInput(f"Duplicate item id {item.id} in pool")
            self._items[item.id] = item

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items.values())

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def __repr__(self) -> str:
        sizes = ", ".join(f"{r.value}={len(self.tier(r))}" for r in self.rarities())
        return f"ItemPool({sizes})"

    def get(self, item_id: int) -> Item:
        try:
            return self._items[item_id]
        except KeyError:
            raise InvalidInput(f"Item {item_id} is not in the pool") from None

    def items(self) -> list[Item]:
        return list(self._items.values())

    def rarities(self) -> list[Rarity]:
        """Tiers present in the pool, in order of first appearance."""
        seen: dict[Rarity, None] = {}
        for item in self._items.values():
            seen.setdefault(item.rarity, None)
        return list(seen)

    def tier(self, rarity: Rarity) -> list[Item]:
        """Items of one tier, in pool order."""
        return [item for item in self._items.values() if item.rarity == rarity]

    def remove(self, item_id: int) -> Item:
        """Remove and return the item with the given identifier."""
        try:
            return self._items.pop(item_id)
        except KeyError:
            raise InvalidInput(f"Item {item_id} is not in the pool") from None

    def working_copy(self, rarity: Rarity | None = None) -> "ItemPool":
        """Independent copy of the pool, optionally restricted to one tier."""
        if rarity is None:
            return ItemPool(self._items.values())
        return ItemPool(self.tier(rarity))
