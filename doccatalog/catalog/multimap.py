"""
A small multi-value mapping used for grouped catalog views.

Each key maps to an ordered list of values. Looking up a key that was
never added yields an empty list instead of raising ``KeyError``, so
callers can ask for any group without checking membership first.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Generic, Hashable, Iterator, List, TypeVar

_MISSING = object()

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class MultiMap(Mapping, Generic[K, V]):
    """Mapping from a key to the values put under it, in insertion order."""

    def __init__(self) -> None:
        self._buckets: Dict[K, List[V]] = {}

    def put(self, key: K, value: V) -> None:
        self._buckets.setdefault(key, []).append(value)

    def get(self, key: K, default: Any = _MISSING) -> Any:
        """Copy of the bucket for ``key``.

        An absent key gives ``default`` when one is passed, else an empty list.
        """
        if key not in self._buckets:
            return [] if default is _MISSING else default
        return list(self._buckets[key])

    def __getitem__(self, key: K) -> List[V]:
        return self.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._buckets

    def __iter__(self) -> Iterator[K]:
        return iter(self._buckets)

    def __len__(self) -> int:
        return len(self._buckets)

    def total(self) -> int:
        """Number of values across all keys."""
        return sum(len(values) for values in self._buckets.values())

    def __repr__(self) -> str:
        return f"MultiMap({self._buckets!r})"
