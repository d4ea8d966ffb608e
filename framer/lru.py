"""A least-recently-used cache with O(1) get and put."""

from __future__ import annotations

from collections import OrderedDict
from typing import Generic, Hashable, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class NotFoundError(LookupError):
    """Raised when a key is not present in the cache."""

    def __init__(self, key: object = None) -> None:
        super().__init__("Resource was not found")
        self.key = key


class LRUCache(Generic[K, V]):
    """Fixed-capacity cache that evicts the least recently used entry."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        # The last entry is the most recently used one.
        self._entries: OrderedDict[K, V] = OrderedDict()

    def put(self, key: K, value: V) -> None:
        """Insert or update a key, marking it most recently used."""
        if key in self._entries:
            self._entries[key] = value
            self._entries.move_to_end(key)
            return
        if len(self._entries) >= self.capacity:
            self._entries.popitem(last=False)
        self._entries[key] = value

    def get(self, key: K) -> V:
        """Return the value for key and mark it most recently used."""
        try:
            self._entries.move_to_end(key)
        except KeyError:
            raise NotFoundError(key) from None
        return self._entries[key]

    def __len__(self) -> int:
        return len(self._entries)

    def __str__(self) -> str:
        items = ",".join(f"{k}:{v}" for k, v in reversed(self._entries.items()))
        return f"[{items}]"