"""Abstract base for translation statistics providers."""

from abc import ABC, abstractmethod

from tx_badge.models import Version


class StatsProvider(ABC):
    @abstractmethod
    async def fetch_stats(self, version: Version | str) -> bytes:
        """Fetch per-language stats for a release line as JSON bytes."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """Clean up resources."""
        ...
