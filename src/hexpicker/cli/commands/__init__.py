"""CLI commands for hexpicker."""

from .config import config
from .formats import formats

__all__ = ["config", "formats"]
