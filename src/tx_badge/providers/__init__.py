"""Translation statistics providers."""

from .base import StatsProvider
from .transifex import TransifexProvider

__all__ = ["StatsProvider", "TransifexProvider"]
