"""In-memory TTL Cache: process-local key/value store with lazy expiry.

Invariants:
    - get() returns MISSING (never raises) for absent or expired keys
    - Expiry is checked at read time; expired entries are dropped when read
    - set() overwrites any prior entry for the key

Design Decisions:
    - Async methods over a plain dict: same contract as a networked cache,
      callers never change if the store moves out of process
    - No lock: all access happens on the event loop thread between awaits
    - Injectable clock so expiry is testable without sleeping
"""

import time
from dataclasses import dataclass
from typing import Any, Callable

DEFAULT_TTL_SECONDS = 3600


class _Missing:
    """Sentinel type for cache misses (a cached None is still a hit)."""

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


@dataclass
class CacheEntry:
    value: Any
    expires: float


class TTLCache:
    """Async-contract TTL cache keyed by string."""

    def __init__(
        self,
        default_ttl_seconds: int = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.default_ttl_seconds = default_ttl_seconds
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}

    async def get(self, key: str) -> Any:
        entry = self._entries.get(key)
        if entry is None:
            return MISSING
        if self._clock() >= entry.expires:
            self._entries.pop(key, None)
            return MISSING
        return entry.value

    async def set(self, key: str, value: Any, ttl_seconds: int | None = None) -> None:
        ttl = self.default_ttl_seconds if ttl_seconds is None else ttl_seconds
        self._entries[key] = CacheEntry(value=value, expires=self._clock() + ttl)

    async def clear(self, key: str) -> None:
        self._entries.pop(key, None)

    async def purge(self) -> None:
        """Drop every entry."""
        self._entries.clear()

    def __len__(self) -> int:
        now = self._clock()
        return sum(1 for entry in self._entries.values() if now < entry.expires)
