"""Cache implementations."""

from .memory import InMemoryCache
from .redis import RedisCache, create_redis_client

__all__ = ["InMemoryCache", "RedisCache", "create_redis_client"]
