"""Configuration loading for matchboard.

Resolution order for the game configuration:
    1. Explicit path passed by the caller (e.g. ``--config``)
    2. ``$MATCHBOARD_CONFIG``
    3. Built-in default (the classic 4x4 board)
"""

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from .core.errors import InvalidInput
from .core.models import GameConfig, Rarity, TierConfig

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "MATCHBOARD_CONFIG"


def default_config() -> GameConfig:
    """The classic game: 5 commons, 2 rares and the single epic on 4x4."""
    return GameConfig(
        tiers=[
            TierConfig(name=Rarity.COMMON, pool_size=100, draw_count=5, start_id=100),
            TierConfig(name=Rarity.RARE, pool_size=10, draw_count=2, start_id=200),
            TierConfig(
                name=Rarity.EPIC, pool_size=1, draw_count=1, start_id=300, fixed_weight=100
            ),
        ],
        board_rows=4,
        board_cols=4,
    )


def load_config(path: Path | str | None = None) -> GameConfig:
    """Load the effective game configuration.

    Raises:
        InvalidInput: If the file is missing, unreadable or inconsistent
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR) or None

    if path is None:
        logger.debug("[Config] Using default configuration")
        return default_config()

    path = Path(path)
    if not path.exists():
        raise InvalidInput(f"Config file not found: {path}")

    logger.debug(f"[Config] Loading {path}")
    try:
        return GameConfig.from_yaml(path)
    except yaml.YAMLError as e:
        raise InvalidInput(f"Invalid YAML in {path}: {e}") from e
    except ValidationError as e:
        raise InvalidInput(f"Invalid config in {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidInput(f"Cannot read config file {path}: {e}") from e
