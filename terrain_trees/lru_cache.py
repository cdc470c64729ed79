"""A bounded key-value cache that evicts the least recently used entry."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Hashable, Iterator
from typing import Any


class LRUCache:
    """A cache holding at most ``max_size`` entries.

    Inserting a key that is already present keeps its stored value and only marks
    it as the most recently used.
    """

    __slots__ = ("_max_size", "_entries")

    def __init__(self, max_size: int) -> None:
        self._entries: OrderedDict[Hashable, Any] = OrderedDict()
        self._max_size = 0
        self.max_size = max_size

    @property
    def max_size(self) -> int:
        return self._max_size

    @max_size.setter
    def max_size(self, value: int) -> None:
        if value < 1:
            raise ValueError(f"cache size must be positive, got {value}")
        self._max_size = int(value)

    def insert(self, key: Hashable, item: Any) -> Any:
        """Store ``item`` under ``key`` unless the key is present; return the stored value.

        When a new key finds the cache full, the least recently used entry is evicted.
        """
        if key in self._entries:
            self._entries.move_to_end(key)
            return self._entries[key]
        if self.is_full():
            self._entries.popitem(last=False)
        self._entries[key] = item
        return item

    def find(self, key: Hashable) -> Any:
        """Return the value under ``key`` and mark it as recently used, or None if absent."""
        if key not in self._entries:
            return None
        self._entries.move_to_end(key)
        return self._entries[key]

    def is_full(self) -> bool:
        """Tell whether the cache holds ``max_size`` entries."""
        return len(self._entries) >= self._max_size

    def reset(self) -> None:
        """Drop every entry."""
        self._entries.clear()

    def recency(self) -> list[Hashable]:
        """Keys from the most to the least recently used."""
        return list(reversed(self._entries))

    def items(self) -> list[tuple[Any, Any]]:
        """The entries sorted by key."""
        return sorted(self._entries.items())

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Any]:
        return iter(sorted(self._entries))

    def __repr__(self) -> str:
        return f"LRUCache(max_size={self._max_size}, size={len(self._entries)})"