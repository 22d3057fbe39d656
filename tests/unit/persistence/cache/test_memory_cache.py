"""Unit tests for the in-process cache."""

import pytest

from quill.config import CacheSettings
from quill.persistence.cache import InMemoryCache


class FakeClock:
    """Manually advanced time source."""

    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return InMemoryCache(CacheSettings(ttl_seconds=60, max_size=3), clock=clock)


class TestInMemoryCache:
    """Tests for InMemoryCache."""

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self, cache):
        assert await cache.get("nope") is None

    @pytest.mark.asyncio
    async def test_set_then_get(self, cache):
        await cache.set("k", "v")

        assert await cache.get("k") == "v"

    @pytest.mark.asyncio
    async def test_entry_expires_after_default_ttl(self, cache, clock):
        """Entries vanish once the configured TTL has passed."""
        await cache.set("k", "v")

        clock.now += 59
        assert await cache.get("k") == "v"

        clock.now += 1
        assert await cache.get("k") is None
        assert len(cache) == 0

    @pytest.mark.asyncio
    async def test_explicit_ttl_overrides_default(self, cache, clock):
        await cache.set("k", "v", ttl_seconds=5)

        clock.now += 5
        assert await cache.get("k") is None

    @pytest.mark.asyncio
    async def test_least_recently_used_is_evicted(self, cache):
        """Reading an entry protects it from eviction."""
        await cache.set("a", "1")
        await cache.set("b", "2")
        await cache.set("c", "3")
        await cache.get("a")

        await cache.set("d", "4")

        assert len(cache) == 3
        assert await cache.get("b") is None
        assert await cache.get("a") == "1"
        assert await cache.get("d") == "4"

    @pytest.mark.asyncio
    async def test_delete(self, cache):
        await cache.set("k", "v")
        await cache.delete("k")
        await cache.delete("never-set")

        assert await cache.get("k") is None

    @pytest.mark.asyncio
    async def test_explicit_zero_ttl_is_not_replaced_by_default(self, cache):
        """A zero TTL expires the entry at once."""
        await cache.set("k", "v", ttl_seconds=0)

        assert await cache.get("k") is None

    @pytest.mark.asyncio
    async def test_size_stays_bounded_over_many_keys(self, cache):
        """No key escapes the bound, however many distinct keys are written."""
        for i in range(5000):
            await cache.set(f"thread:{i}:version", str(i))

        assert len(cache) == 3
        assert await cache.get("thread:4999:version") == "4999"
        assert await cache.get("thread:0:version") is None
