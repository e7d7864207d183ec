"""Result cache - process-wide TTL cache for computed analytics."""

import threading
import time
from collections import OrderedDict
from collections.abc import Callable
from typing import Any

from loguru import logger

from app.models.common import CacheEntry
from settings import CACHE_MAX_ENTRIES, CACHE_TTL


class ResultCache:
    """TTL cache keyed by canonical query.

    Stale entries stay stored but are never returned. When the cache grows
    past ``max_entries`` the oldest-inserted entry is evicted (insertion
    order, not access order).
    """

    def __init__(
        self,
        ttl: float = CACHE_TTL,
        max_entries: int = CACHE_MAX_ENTRIES,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._ttl = ttl
        self._max_entries = max_entries
        self._clock = clock
        self._entries: OrderedDict[str, CacheEntry] = OrderedDict()
        self._lock = threading.Lock()
        logger.debug("ResultCache initialized (ttl={}s, max_entries={})", ttl, max_entries)

    def get(self, key: str) -> Any | None:
        """Cached result, or None when missing or expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None or not entry.is_fresh(self._clock(), self._ttl):
                return None
        logger.debug("Cache hit: {}", key)
        return entry.data

    def put(self, key: str, data: Any) -> None:
        """Store a result; an overwritten key keeps its original slot."""
        with self._lock:
            self._entries[key] = CacheEntry(key=key, data=data, timestamp=self._clock())
            if len(self._entries) > self._max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Cache evicted: {}", evicted)
        logger.debug("Cache saved: {}", key)

    def keys(self) -> list[str]:
        """Stored keys, oldest first (including stale ones)."""
        with self._lock:
            return list(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
