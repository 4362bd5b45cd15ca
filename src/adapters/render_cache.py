"""In-memory render cache adapter.

Process-wide store for the aggregate render output. Entries expire after a
fixed TTL or when invalidated by a sync; concurrent misses are allowed to
fetch independently.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from threading import Lock
from typing import Any, Protocol


class CacheClock(Protocol):
    def now_utc(self) -> datetime: ...


@dataclass
class CacheEntry:
    data: Any
    stored_at: datetime


class RenderCache:
    """TTL cache keyed by render scope - suitable for single-process deployments."""

    def __init__(self, ttl_seconds: int, clock: CacheClock) -> None:
        self._ttl = timedelta(seconds=ttl_seconds)
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = Lock()
        self.last_invalidated_at: datetime | None = None

    def get(self, key: str) -> Any | None:
        """Return cached data for key, or None when missing or stale."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if self._clock.now_utc() - entry.stored_at >= self._ttl:
                del self._entries[key]
                return None
            return entry.data

    def set(self, key: str, data: Any) -> None:
        with self._lock:
            self._entries[key] = CacheEntry(data=data, stored_at=self._clock.now_utc())

    def invalidate(self) -> datetime:
        """Mark every entry stale. Returns the invalidation time."""
        with self._lock:
            self._entries.clear()
            self.last_invalidated_at = self._clock.now_utc()
            return self.last_invalidated_at

    def clear(self) -> None:
        """Clear all entries - useful for testing."""
        with self._lock:
            self._entries.clear()
            self.last_invalidated_at = None
