"""Command-line interface for matchboard."""

from .app import app
from . import commands  # noqa: F401  registers commands on app

__all__ = ["app"]
