"""Cache infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire

from quill.config import CacheSettings
from quill.domain.cache import Cache
from quill.persistence.cache import InMemoryCache, RedisCache, create_redis_client
from quill.util.di.base import ProviderBase
from quill.util.observability import instrument_redis


class CacheProvider(ProviderBase):
    """Cache component base."""

    __mock_component__ = "cache"


class ProdCacheProvider(CacheProvider):
    """Production cache provider.

    The backend is chosen by ``CACHE__BACKEND``: a shared Redis instance or
    a bounded in-process cache.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_cache(self, settings: CacheSettings) -> AsyncIterator[Cache]:
        """Provide the configured cache, closed when the container closes."""
        if settings.backend == "redis":
            instrument_redis()
            cache = RedisCache(create_redis_client(settings), settings)
            logfire.info("Redis cache configured", url=settings.redis_url)
            yield cache
            await cache.close()
        else:
            logfire.info("In-memory cache configured", max_size=settings.max_size)
            yield InMemoryCache(settings)
