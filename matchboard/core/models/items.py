"""Item models: rarity tiers and the weighted items drawn from them."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

from ..errors import InvalidInput


class Rarity(str, Enum):
    """Rarity tier partitioning the item pool."""

    COMMON = "common"
    RARE = "rare"
    EPIC = "epic"


class Item(BaseModel):
    """A single card face.

    Identifiers are stable for a whole round; the weight is the relative
    likelihood of the item being drawn from its tier.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    weight: int
    rarity: Rarity

    @field_validator("id")
    @classmethod
    def _id_positive(cls, v: int) -> int:
        if v < 1:
            raise InvalidInput(f"Item id must be a positive integer, got {v}")
        return v

    @field_validator("weight")
    @classmethod
    def _weight_positive(cls, v: int) -> int:
        # A zero weight would map to an empty range that can never be drawn
        if v < 1:
            raise InvalidInput(f"Item weight must be a positive integer, got {v}")
        return v

    def __str__(self) -> str:
        return f"{self.id} - {self.rarity.value} - {self.weight}"
