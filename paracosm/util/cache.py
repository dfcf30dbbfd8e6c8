"""Bounded TTL cache for user profiles.

One instance lives for the lifetime of the application container and is
injected wherever profiles are looked up by id.
"""

import time
from collections import OrderedDict
from typing import Callable, Generic, Hashable, Optional, TypeVar

from paracosm.domain.model.user import User
from paracosm.domain.value import UserId

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class TTLCache(Generic[K, V]):
    """Least-recently-used cache whose entries expire after ``ttl_seconds``."""

    def __init__(
        self,
        max_entries: int,
        ttl_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self.max_entries = max_entries
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: OrderedDict[K, tuple[float, V]] = OrderedDict()

    def get(self, key: K) -> Optional[V]:
        """Return the cached value, or None if missing or expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None

        stored_at, value = entry
        if self._clock() - stored_at > self.ttl_seconds:
            del self._entries[key]
            return None

        self._entries.move_to_end(key)
        return value

    def set(self, key: K, value: V) -> None:
        """Store a value, evicting the least recently used entry when full."""
        self._entries[key] = (self._clock(), value)
        self._entries.move_to_end(key)
        while len(self._entries) > self.max_entries:
            self._entries.popitem(last=False)

    def invalidate(self, key: K) -> None:
        """Drop a single entry if present."""
        self._entries.pop(key, None)

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()

    def cleanup(self) -> int:
        """Drop expired entries.

        Returns:
            Number of entries removed
        """
        now = self._clock()
        expired = [
            key
            for key, (stored_at, _) in self._entries.items()
            if now - stored_at > self.ttl_seconds
        ]
        for key in expired:
            del self._entries[key]
        return len(expired)

    def __len__(self) -> int:
        return len(self._entries)


class ProfileCache(TTLCache[UserId, User]):
    """Cache of user profiles keyed by user id."""
