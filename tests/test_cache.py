"""Tests for the in-memory TTL cache."""

import pytest

from miqat.infrastructure.cache import ONE_DAY_SECONDS, ONE_WEEK_SECONDS, InMemoryTTLCache
from miqat.services.ports import CachePort


class FakeClock:
    """Manually advanced clock."""

    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    """Create fake clock."""
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> InMemoryTTLCache[str]:
    """Create cache with a one day TTL."""
    return InMemoryTTLCache(ONE_DAY_SECONDS, clock=clock)


class TestInMemoryTTLCache:
    """TTL cache tests."""

    def test_is_cache_port(self, cache: InMemoryTTLCache[str]) -> None:
        """Test the cache implements the port."""
        assert isinstance(cache, CachePort)

    def test_constants(self) -> None:
        """Test lifetime constants."""
        assert ONE_DAY_SECONDS == 86400
        assert ONE_WEEK_SECONDS == 7 * 86400

    def test_get_missing(self, cache: InMemoryTTLCache[str]) -> None:
        """Test a missing key."""
        assert cache.get("missing") is None

    def test_set_and_get(self, cache: InMemoryTTLCache[str]) -> None:
        """Test a stored value is returned before expiry."""
        cache.set(("jaipur", "2024-03-20"), "times")
        assert cache.get(("jaipur", "2024-03-20")) == "times"
        assert len(cache) == 1

    def test_expiry(self, cache: InMemoryTTLCache[str], clock: FakeClock) -> None:
        """Test values expire after the TTL."""
        cache.set("key", "value")
        clock.advance(ONE_DAY_SECONDS - 1)
        assert cache.get("key") == "value"
        clock.advance(1)
        assert cache.get("key") is None
        assert len(cache) == 0

    def test_set_refreshes_expiry(self, cache: InMemoryTTLCache[str], clock: FakeClock) -> None:
        """Test overwriting a key restarts its lifetime."""
        cache.set("key", "old")
        clock.advance(ONE_DAY_SECONDS - 10)
        cache.set("key", "new")
        clock.advance(20)
        assert cache.get("key") == "new"

    def test_eviction(self, clock: FakeClock) -> None:
        """Test the oldest entry is evicted when full."""
        cache: InMemoryTTLCache[int] = InMemoryTTLCache(60, max_entries=2, clock=clock)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.set("c", 3)
        assert cache.get("a") is None
        assert cache.get("b") == 2
        assert cache.get("c") == 3

    def test_get_or_set(self, cache: InMemoryTTLCache[str]) -> None:
        """Test the factory runs only on a miss."""
        calls: list[int] = []

        def factory() -> str:
            calls.append(1)
            return "computed"

        assert cache.get_or_set("key", factory) == "computed"
        assert cache.get_or_set("key", factory) == "computed"
        assert len(calls) == 1

    def test_clear(self, cache: InMemoryTTLCache[str]) -> None:
        """Test clearing all entries."""
        cache.set("a", "1")
        cache.set("b", "2")
        cache.clear()
        assert len(cache) == 0
        assert cache.get("a") is None

    @pytest.mark.parametrize(("ttl", "max_entries"), [(0, 10), (-5, 10), (60, 0)])
    def test_invalid_arguments(self, ttl: float, max_entries: int) -> None:
        """Test invalid TTL and size limits."""
        with pytest.raises(ValueError):
            InMemoryTTLCache(ttl, max_entries=max_entries)
