"""Unit tests for the TTL cache."""

import pytest

from paracosm.util.cache import TTLCache


class FakeClock:
    """Manually advanced clock."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


class TestTTLCache:
    """Tests for TTLCache."""

    def test_get_returns_stored_value(self, clock):
        cache = TTLCache[str, int](max_entries=2, ttl_seconds=10, clock=clock)

        cache.set("a", 1)

        assert cache.get("a") == 1
        assert cache.get("missing") is None

    def test_entry_expires_after_ttl(self, clock):
        cache = TTLCache[str, int](max_entries=2, ttl_seconds=10, clock=clock)
        cache.set("a", 1)

        clock.advance(10)
        assert cache.get("a") == 1

        clock.advance(0.5)
        assert cache.get("a") is None
        assert len(cache) == 0

    def test_least_recently_used_entry_is_evicted(self, clock):
        cache = TTLCache[str, int](max_entries=2, ttl_seconds=10, clock=clock)
        cache.set("a", 1)
        cache.set("b", 2)

        # Touch "a" so "b" becomes the eviction candidate
        cache.get("a")
        cache.set("c", 3)

        assert cache.get("a") == 1
        assert cache.get("b") is None
        assert cache.get("c") == 3

    def test_set_refreshes_timestamp(self, clock):
        cache = TTLCache[str, int](max_entries=2, ttl_seconds=10, clock=clock)
        cache.set("a", 1)
        clock.advance(8)
        cache.set("a", 2)
        clock.advance(8)

        assert cache.get("a") == 2

    def test_cleanup_drops_only_expired(self, clock):
        cache = TTLCache[str, int](max_entries=5, ttl_seconds=10, clock=clock)
        cache.set("old", 1)
        clock.advance(6)
        cache.set("new", 2)
        clock.advance(6)

        assert cache.cleanup() == 1
        assert len(cache) == 1
        assert cache.get("new") == 2

    def test_invalidate_and_clear(self, clock):
        cache = TTLCache[str, int](max_entries=5, ttl_seconds=10, clock=clock)
        cache.set("a", 1)
        cache.set("b", 2)

        cache.invalidate("a")
        cache.invalidate("never-set")
        assert cache.get("a") is None
        assert len(cache) == 1

        cache.clear()
        assert len(cache) == 0

    @pytest.mark.parametrize(
        "max_entries,ttl_seconds",
        [(0, 10), (-1, 10), (5, 0), (5, -1)],
    )
    def test_invalid_limits_rejected(self, max_entries, ttl_seconds):
        with pytest.raises(ValueError):
            TTLCache(max_entries=max_entries, ttl_seconds=ttl_seconds)
