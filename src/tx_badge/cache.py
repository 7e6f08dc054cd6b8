"""In-memory TTL cache with single-flight population."""

import asyncio
import logging
import time
from collections.abc import Callable

from cachetools import TTLCache

from tx_badge.errors import CacheCoordinationError
from tx_badge.providers.base import StatsProvider

logger = logging.getLogger(__name__)


class StatsCache:
    """Caches provider results per version for a fixed TTL.

    At most one provider fetch per key is in flight at any time. Callers that
    arrive while a fetch is running await the same task and see the same
    result or exception. Failed fetches leave nothing behind, so the next
    call tries again.
    """

    def __init__(
        self,
        provider: StatsProvider,
        max_size: int = 16,
        ttl: int = 3600,
        timer: Callable[[], float] = time.monotonic,
    ):
        self._provider = provider
        self._cache: TTLCache = TTLCache(maxsize=max_size, ttl=ttl, timer=timer)
        self._inflight: dict[str, asyncio.Task[bytes]] = {}
        self._hits = 0
        self._misses = 0

    async def get(self, key: str) -> bytes:
        # No await between the lookup and registering the task.
        cached = self._cache.get(key)
        if cached is not None:
            self._hits += 1
            return cached
        self._misses += 1

        task = self._inflight.get(key)
        if task is None:
            task = asyncio.create_task(self._populate(key))
            task.add_done_callback(self._retrieve_exception)
            self._inflight[key] = task
        else:
            logger.debug("Joining in-flight fetch for %s", key)

        try:
            # Shielded so a disconnecting caller never cancels the shared fetch.
            return await asyncio.shield(task)
        except asyncio.CancelledError:
            if task.cancelled():
                raise CacheCoordinationError(f"Fetch for {key} was cancelled") from None
            raise

    async def _populate(self, key: str) -> bytes:
        task = asyncio.current_task()
        try:
            data = await self._provider.fetch_stats(key)
            self._cache[key] = data
            return data
        finally:
            # After close() the key may already belong to a newer fetch.
            if self._inflight.get(key) is task:
                del self._inflight[key]

    @staticmethod
    def _retrieve_exception(task: asyncio.Task) -> None:
        # Marks the exception as retrieved when every waiter has gone away.
        if not task.cancelled():
            task.exception()

    def __contains__(self, key: str) -> bool:
        return key in self._cache

    def stats(self) -> dict:
        return {
            "size": len(self._cache),
            "max_size": self._cache.maxsize,
            "inflight": len(self._inflight),
            "hits": self._hits,
            "misses": self._misses,
            "hit_rate": round(self._hits / max(self._hits + self._misses, 1) * 100, 1),
        }

    async def close(self) -> None:
        for task in list(self._inflight.values()):
            task.cancel()
        self._inflight.clear()
