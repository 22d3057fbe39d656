"""Process-local cache with per-entry expiry and a size bound.

Every key, thread versions included, counts towards ``max_size``; entries
are evicted least-recently-used first once the bound is reached.
"""

import time
from collections import OrderedDict
from typing import Callable, Optional, Tuple

from quill.config import CacheSettings
from quill.domain.cache import Cache


class InMemoryCache(Cache):
    """Cache implementation over an ordered dict."""

    def __init__(
        self,
        settings: CacheSettings,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize in-memory cache.

        Args:
            settings: Cache settings (default TTL and max size)
            clock: Source of the current time in seconds
        """
        self.settings = settings
        self._clock = clock
        self._entries: "OrderedDict[str, Tuple[str, float]]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    async def get(self, key: str) -> Optional[str]:
        """Return the value stored under ``key``, or None if absent or expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None

        value, expires_at = entry
        if expires_at <= self._clock():
            del self._entries[key]
            return None

        self._entries.move_to_end(key)
        return value

    async def set(self, key: str, value: str, ttl_seconds: Optional[int] = None) -> None:
        """Store ``value``, evicting the least recently used entry if full."""
        ttl = self.settings.ttl_seconds if ttl_seconds is None else ttl_seconds
        self._entries[key] = (value, self._clock() + ttl)
        self._entries.move_to_end(key)

        while len(self._entries) > self.settings.max_size:
            self._entries.popitem(last=False)

    async def delete(self, key: str) -> None:
        """Remove ``key``."""
        self._entries.pop(key, None)
