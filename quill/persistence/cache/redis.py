"""Redis-backed cache.

Shares entries between every worker of the service. The client is created
once per process by the DI container and closed on shutdown.
"""

from typing import Optional

import logfire
import redis.asyncio as redis

from quill.config import CacheSettings
from quill.domain.cache import Cache


def create_redis_client(settings: CacheSettings) -> redis.Redis:
    """Create an async Redis client from cache settings."""
    return redis.from_url(settings.redis_url, decode_responses=True)


class RedisCache(Cache):
    """Cache implementation over redis.asyncio."""

    def __init__(self, client: redis.Redis, settings: CacheSettings) -> None:
        """Initialize Redis cache.

        Args:
            client: Async Redis client (created with decode_responses=True)
            settings: Cache settings (default TTL)
        """
        self.client = client
        self.settings = settings

    async def get(self, key: str) -> Optional[str]:
        """Return the value stored under ``key``."""
        return await self.client.get(key)

    async def set(self, key: str, value: str, ttl_seconds: Optional[int] = None) -> None:
        """Store ``value`` with an expiry."""
        ttl = self.settings.ttl_seconds if ttl_seconds is None else ttl_seconds
        if ttl <= 0:
            # Redis rejects EX 0; an entry that expires at once is no entry
            await self.client.delete(key)
            return
        await self.client.set(key, value, ex=ttl)

    async def delete(self, key: str) -> None:
        """Remove ``key``."""
        await self.client.delete(key)

    async def close(self) -> None:
        """Close the underlying connection pool."""
        await self.client.aclose()
        logfire.info("Redis cache closed")
