"""Fixed-capacity LRU cache."""

from __future__ import annotations

from typing import Any, Generic, Hashable, Iterator, TypeVar

from .exceptions import ConfigurationError
from .models import CacheEntry, CacheSnapshot


K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class _Node:
    """Link in the recency list. Sentinels carry no key."""

    __slots__ = ("key", "value", "prev", "next")

    def __init__(self, key: Any = None, value: Any = None) -> None:
        self.key = key
        self.value = value
        self.prev: _Node | None = None
        self.next: _Node | None = None


class LRUCache(Generic[K, V]):
    """LRU cache with a bounded capacity.

    Keys map to nodes of a doubly linked list ordered from least recently
    used (after ``_head``) to most recently used (before ``_tail``), so
    lookup, touch and eviction are all O(1). Not thread-safe: callers that
    share an instance across threads must guard every call with one lock.
    """

    def __init__(self, capacity: int) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise ConfigurationError(f"capacity must be an integer, got {capacity!r}")
        if capacity < 1:
            raise ConfigurationError(f"capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._nodes: dict[K, _Node] = {}
        self._head = _Node()
        self._tail = _Node()
        self._head.next = self._tail
        self._tail.prev = self._head

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return len(self._nodes) >= self._capacity

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, key: object) -> bool:
        return key in self._nodes

    def __iter__(self) -> Iterator[K]:
        return self.keys()

    def __repr__(self) -> str:
        return f"LRUCache(capacity={self._capacity}, size={len(self)}, keys={list(self.keys())!r})"

    def get(self, key: K, default: V | None = None) -> V | None:
        """Return the value for ``key`` and mark it most recently used.

        A missing key returns ``default`` and leaves the order untouched.
        """
        node = self._nodes.get(key)
        if node is None:
            return default
        self._unlink(node)
        self._append(node)
        return node.value

    def peek(self, key: K, default: V | None = None) -> V | None:
        """Return the value for ``key`` without changing its recency."""
        node = self._nodes.get(key)
        if node is None:
            return default
        return node.value

    def put(self, key: K, value: V) -> CacheEntry | None:
        """Insert or update ``key`` and mark it most recently used.

        When a new key arrives while the cache is full, the least recently
        used entry is removed first. Returns that evicted entry, or None.
        """
        node = self._nodes.get(key)
        if node is not None:
            node.value = value
            self._unlink(node)
            self._append(node)
            return None

        evicted = None
        if len(self._nodes) == self._capacity:
            oldest = self._head.next
            assert oldest is not None and oldest is not self._tail
            self._unlink(oldest)
            del self._nodes[oldest.key]
            evicted = CacheEntry(key=oldest.key, value=oldest.value)

        node = _Node(key, value)
        self._nodes[key] = node
        self._append(node)
        return evicted

    def delete(self, key: K) -> None:
        """Remove ``key`` if present. Missing keys are ignored."""
        node = self._nodes.pop(key, None)
        if node is not None:
            self._unlink(node)

    def clear(self) -> None:
        self._nodes.clear()
        self._head.next = self._tail
        self._tail.prev = self._head

    def keys(self) -> Iterator[K]:
        for node in self._walk():
            yield node.key

    def items(self) -> Iterator[tuple[K, V]]:
        """Iterate pairs from least to most recently used."""
        for node in self._walk():
            yield node.key, node.value

    def snapshot(self) -> CacheSnapshot:
        """Read-only copy of the current contents, least recently used first."""
        return CacheSnapshot(
            capacity=self._capacity,
            size=len(self._nodes),
            entries=tuple(CacheEntry(key=k, value=v) for k, v in self.items()),
        )

    def _walk(self) -> Iterator[_Node]:
        node = self._head.next
        while node is not self._tail:
            assert node is not None
            yield node
            node = node.next

    def _unlink(self, node: _Node) -> None:
        prev_node, next_node = node.prev, node.next
        assert prev_node is not None and next_node is not None
        prev_node.next = next_node
        next_node.prev = prev_node
        node.prev = node.next = None

    def _append(self, node: _Node) -> None:
        last = self._tail.prev
        assert last is not None
        node.prev = last
        node.next = self._tail
        last.next = node
        self._tail.prev = node
