"""Thread-safe in-memory LRU cache.

Holds route results between requests. Entries are evicted least
recently used first once max_size is reached.
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class InMemoryCache(Generic[T]):
    """Thread-safe in-memory cache with LRU eviction.

    This cache implements the CachePort protocol and can be injected
    into services that need memoization.

    Attributes:
        max_size: Maximum number of entries (None = unlimited)
        name: Cache name for logging

    Example:
        cache = InMemoryCache[RouteResult](name="routes", max_size=512)
        route = cache.get_or_compute("a->b", lambda: solve("a", "b"))
    """

    max_size: Optional[int] = None
    name: str = "cache"

    _store: "OrderedDict[str, Any]" = field(default_factory=OrderedDict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    # Statistics
    _hits: int = field(default=0, repr=False)
    _misses: int = field(default=0, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(f"cache.{self.name}")

    def get(self, key: str) -> Optional[T]:
        with self._lock:
            if key not in self._store:
                self._misses += 1
                return None
            self._store.move_to_end(key)
            self._hits += 1
            return self._store[key]

    def set(self, key: str, value: T) -> None:
        with self._lock:
            if key in self._store:
                self._store.move_to_end(key)
            elif self.max_size is not None and len(self._store) >= self.max_size:
                evicted, _ = self._store.popitem(last=False)
                self._logger.debug(
                    "Cache evicted entry",
                    extra={"key": evicted, "reason": "max_size"},
                )
            self._store[key] = value

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        """Get from cache or compute and cache the value.

        The computation runs outside the lock; two threads missing the
        same key may both compute it, and the last one wins.
        """
        value = self.get(key)
        if value is not None:
            self._logger.debug("Cache hit", extra={"key": key})
            return value

        self._logger.debug("Cache miss, computing", extra={"key": key})
        computed = compute_fn()
        self.set(key, computed)
        return computed

    def clear(self) -> int:
        with self._lock:
            count = len(self._store)
            self._store.clear()
            self._hits = 0
            self._misses = 0
            self._logger.info("Cache cleared", extra={"entries_cleared": count})
            return count

    def size(self) -> int:
        with self._lock:
            return len(self._store)

    def stats(self) -> Dict[str, Any]:
        """Return hit/miss counts and size."""
        with self._lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total * 100) if total > 0 else 0.0
            return {
                "size": len(self._store),
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate_percent": round(hit_rate, 1),
            }
