"""Bounded, time-expiring in-memory cache for generated suggestions.

One instance exists per suggestion kind. Entries expire a fixed time after
insertion and, when the cache is full, the least recently used entry is
evicted. Both ``get`` hits and ``put`` count as a use.
"""

from __future__ import annotations

import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import TYPE_CHECKING

from replykit.observability.logging import get_logger


if TYPE_CHECKING:
    from collections.abc import Callable, Iterable


logger = get_logger(__name__)

DEFAULT_CAPACITY = 50
DEFAULT_TTL_SECONDS = 5 * 60


@dataclass(frozen=True, slots=True)
class CacheEntry:
    """Cached suggestions and their insertion time (clock seconds)."""

    suggestions: tuple[str, ...]
    inserted_at: float


class SuggestionCache:
    """Thread-safe LRU cache with per-entry TTL.

    Attributes:
        name: Label used in log entries (e.g. "reply").
        capacity: Maximum number of live entries.
        ttl: Seconds an entry stays valid after insertion.
    """

    def __init__(
        self,
        name: str,
        capacity: int = DEFAULT_CAPACITY,
        ttl: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the cache.

        Args:
            name: Label used in log entries.
            capacity: Maximum entries before LRU eviction (must be >= 1).
            ttl: Time to live in seconds (must be > 0).
            clock: Monotonic time source, injectable for tests.
        """
        if capacity < 1:
            msg = f"capacity must be at least 1, got {capacity}"
            raise ValueError(msg)
        if ttl <= 0:
            msg = f"ttl must be positive, got {ttl}"
            raise ValueError(msg)

        self.name = name
        self.capacity = capacity
        self.ttl = ttl
        self._clock = clock
        self._entries: OrderedDict[str, CacheEntry] = OrderedDict()
        self._lock = threading.Lock()

    def _is_expired(self, entry: CacheEntry, now: float) -> bool:
        return now - entry.inserted_at > self.ttl

    def get(self, key: str) -> list[str] | None:
        """Return a copy of the cached suggestions, or None if absent or expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if self._is_expired(entry, self._clock()):
                del self._entries[key]
                logger.debug("Cache entry expired", cache=self.name, key=key)
                return None
            self._entries.move_to_end(key)
            return list(entry.suggestions)

    def put(self, key: str, suggestions: Iterable[str]) -> None:
        """Store suggestions, replacing any previous value and timestamp."""
        entry = CacheEntry(suggestions=tuple(suggestions), inserted_at=self._clock())
        with self._lock:
            self._entries[key] = entry
            self._entries.move_to_end(key)
            while len(self._entries) > self.capacity:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Cache entry evicted", cache=self.name, key=evicted)

    def invalidate(self, key: str) -> bool:
        """Remove one entry. Returns True if it was present."""
        with self._lock:
            return self._entries.pop(key, None) is not None

    def invalidate_all(self) -> None:
        """Remove every entry."""
        with self._lock:
            self._entries.clear()
        logger.debug("Cache cleared", cache=self.name)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        with self._lock:
            entry = self._entries.get(key)
            return entry is not None and not self._is_expired(entry, self._clock())

    def __len__(self) -> int:
        """Number of live (unexpired) entries."""
        with self._lock:
            now = self._clock()
            return sum(1 for e in self._entries.values() if not self._is_expired(e, now))
