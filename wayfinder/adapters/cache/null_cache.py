"""Null cache implementation for testing.

This cache always misses, so tests never depend on route results
cached by a previous test.

Example:
    @pytest.fixture
    def route_service(repository):
        return RouteService(repository, DijkstraRouteSolver(), cache=NullCache())
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class NullCache(Generic[T]):
    """No-op cache - every lookup misses, every computation runs."""

    name: str = "null"

    def get(self, key: str) -> Optional[T]:
        return None

    def set(self, key: str, value: T) -> None:
        pass

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        return compute_fn()

    def clear(self) -> int:
        return 0

    def size(self) -> int:
        return 0
