"""Key-value cache interface.

The cache is a collaborator injected into services that want it; there is
no process-wide cache object. Values are strings (callers serialize).
"""

from abc import ABC, abstractmethod
from typing import Optional


class Cache(ABC):
    """Contract for a string key-value cache with per-entry expiry."""

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Return the value stored under ``key``, or None if absent or expired."""
        pass

    @abstractmethod
    async def set(self, key: str, value: str, ttl_seconds: Optional[int] = None) -> None:
        """Store ``value`` under ``key``.

        Args:
            key: Cache key
            value: Serialized value
            ttl_seconds: Expiry in seconds; None uses the backend default
        """
        pass

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove ``key`` if present."""
        pass
