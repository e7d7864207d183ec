"""Analytics cache entry - shared across all calculators."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CacheEntry:
    """Computed result bundle stored under a canonical query key."""

    key: str
    data: Any
    timestamp: float

    def is_fresh(self, now: float, ttl: float) -> bool:
        return now - self.timestamp < ttl
