"""Data models

Read-only views of cache contents, built with Pydantic.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class CacheEntry(BaseModel):
    """A single key/value pair taken out of the cache"""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    key: Any
    value: Any


class CacheSnapshot(BaseModel):
    """Point-in-time contents of a cache, least to most recently used"""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    capacity: int
    size: int
    entries: tuple[CacheEntry, ...] = ()

    @property
    def is_full(self) -> bool:
        return self.size >= self.capacity

    def keys(self) -> list[Any]:
        return [entry.key for entry in self.entries]

    def to_rows(self) -> list[dict[str, Any]]:
        """Rows for table rendering, position 1 is the least recently used"""
        return [
            {"position": i, "key": entry.key, "value": entry.value}
            for i, entry in enumerate(self.entries, start=1)
        ]
