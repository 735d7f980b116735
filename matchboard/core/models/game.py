"""Game configuration models: tier quotas and board dimensions."""

from pathlib import Path

import yaml
from pydantic import BaseModel, field_validator, model_validator

from ..errors import InvalidInput
from .items import Rarity


class TierConfig(BaseModel):
    """How many items a tier holds and how many distinct ones to draw."""

    name: Rarity
    pool_size: int
    draw_count: int
    fixed_weight: int | None = None
    start_id: int | None = None

    @field_validator("pool_size")
    @classmethod
    def _pool_size_positive(cls, v: int) -> int:
        if v < 1:
            raise InvalidInput(f"pool_size must be at least 1, got {v}")
        return v

    @field_validator("draw_count")
    @classmethod
    def _draw_count_non_negative(cls, v: int) -> int:
        if v < 0:
            raise InvalidInput(f"draw_count must not be negative, got {v}")
        return v

    @field_validator("fixed_weight")
    @classmethod
    def _fixed_weight_positive(cls, v: int | None) -> int | None:
        if v is not None and v < 1:
            raise InvalidInput(f"fixed_weight must be a positive integer, got {v}")
        return v

    @field_validator("start_id")
    @classmethod
    def _start_id_positive(cls, v: int | None) -> int | None:
        if v is not None and v < 1:
            raise InvalidInput(f"start_id must be a positive integer, got {v}")
        return v

    @model_validator(mode="after")
    def _draws_fit_pool(self) -> "TierConfig":
        # Sampling without replacement cannot draw more items than exist
        if self.draw_count > self.pool_size:
            raise InvalidInput(
                f"Tier '{self.name.value}' draws {self.draw_count} items "
                f"but its pool only holds {self.pool_size}"
            )
        return self


class GameConfig(BaseModel):
    """Full configuration of one game round."""

    tiers: list[TierConfig]
    board_rows: int
    board_cols: int
    weight_min: int = 1
    weight_max: int = 99

    @model_validator(mode="after")
    def _check_consistency(self) -> "GameConfig":
        if not self.tiers:
            raise InvalidInput("At least one tier must be configured")

        names = [t.name for t in self.tiers]
        if len(set(names)) != len(names):
            raise InvalidInput("Tier names must be unique")

        if self.board_rows < 1 or self.board_cols < 1:
            raise InvalidInput(
                f"Board dimensions must be positive, got {self.board_rows}x{self.board_cols}"
            )

        if self.weight_min < 1 or self.weight_max < self.weight_min:
            raise InvalidInput(
                f"Invalid weight range [{self.weight_min}, {self.weight_max}]"
            )

        if self.cell_count != 2 * self.total_draws:
            raise InvalidInput(
                f"Board {self.board_rows}x{self.board_cols} has {self.cell_count} cells "
                f"but the tiers draw {self.total_draws} pairs ({2 * self.total_draws} cards)"
            )

        spans = sorted(self.id_ranges().items(), key=lambda kv: kv[1][0])
        for (name_a, (_, end_a)), (name_b, (start_b, _)) in zip(spans, spans[1:]):
            if start_b <= end_a:
                raise InvalidInput(
                    f"Identifier ranges of tiers '{name_a.value}' and '{name_b.value}' overlap"
                )

        return self

    @property
    def total_draws(self) -> int:
        return sum(t.draw_count for t in self.tiers)

    @property
    def cell_count(self) -> int:
        return self.board_rows * self.board_cols

    def draw_counts(self) -> dict[Rarity, int]:
        """Draw quota per tier, in configuration order."""
        return {t.name: t.draw_count for t in self.tiers}

    def id_ranges(self) -> dict[Rarity, tuple[int, int]]:
        """Inclusive identifier range of each tier.

        Tiers without an explicit ``start_id`` continue right after the
        previous tier's last identifier (the first tier starts at 1).
        """
        ranges = {}
        next_id = 1
        for tier in self.tiers:
            start = tier.start_id if tier.start_id is not None else next_id
            end = start + tier.pool_size - 1
            ranges[tier.name] = (start, end)
            next_id = end + 1
        return ranges

    @classmethod
    def from_yaml(cls, path: Path | str) -> "GameConfig":
        """Load a configuration from a YAML file."""
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return cls.model_validate(data)

    def to_yaml(self, path: Path | str) -> None:
        """Write the configuration to a YAML file."""
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.to_yaml_string())

    def to_yaml_string(self) -> str:
        return yaml.safe_dump(
            self.model_dump(mode="json", exclude_none=True), sort_keys=False
        )
