"""Shared test fixtures"""

from __future__ import annotations

from typing import Callable

import pytest

from lrucache.cache import LRUCache
from lrucache.config import ReportConfig


def _assert_consistent(cache: LRUCache) -> None:
    order = list(cache.keys())
    assert len(order) == len(set(order))
    assert set(order) == set(cache._nodes)
    assert len(cache) <= cache.capacity

    backwards = []
    node = cache._tail.prev
    while node is not cache._head:
        backwards.append(node.key)
        node = node.prev
    assert backwards == order[::-1]


@pytest.fixture
def empty_cache() -> LRUCache[str, str]:
    """Empty cache with capacity 3"""
    return LRUCache(3)


@pytest.fixture
def full_cache() -> LRUCache[str, str]:
    """Capacity 3 cache holding A, B, C in that order"""
    cache: LRUCache[str, str] = LRUCache(3)
    cache.put("A", "a")
    cache.put("B", "b")
    cache.put("C", "c")
    return cache


@pytest.fixture
def default_report() -> ReportConfig:
    return ReportConfig()


@pytest.fixture
def assert_consistent() -> Callable[[LRUCache], None]:
    """Checks that the lookup table and the recency list describe the same keys"""
    return _assert_consistent
