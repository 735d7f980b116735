"""CLI commands for matchboard."""

from . import (
    deal,
    validate,
    config_cmd,
)

__all__ = [
    "deal",
    "validate",
    "config_cmd",
]
