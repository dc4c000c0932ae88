"""Cache port - Injectable caching abstraction.

Route results over an immutable graph never change, so services may
memoize them behind this interface. Tests inject the null cache to
keep every computation fresh.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol, TypeVar

T = TypeVar("T")


class CachePort(Protocol[T]):
    """Port for caching.

    Implementations:
    - adapters/cache/memory_cache.py (InMemoryCache) - Production
    - adapters/cache/null_cache.py (NullCache) - Testing
    """

    def get(self, key: str) -> Optional[T]:
        """Return the cached value, or None on a miss."""
        ...

    def set(self, key: str, value: T) -> None:
        """Store a value under key."""
        ...

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        """Get from cache or compute and cache the value.

        Exceptions raised by compute_fn propagate and nothing is cached.
        """
        ...

    def clear(self) -> int:
        """Clear all entries and return how many were removed."""
        ...

    def size(self) -> int:
        """Return the number of entries in the cache."""
        ...
