"""Configuration

Cache capacity and report settings, read from environment variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from .exceptions import ConfigurationError

DEFAULT_CAPACITY = 5
DEFAULT_REPORT_TITLE = "LRU cache"
DEFAULT_MAX_VALUE_WIDTH = 60


@dataclass(frozen=True)
class CacheConfig:
    """Cache construction settings"""

    capacity: int = DEFAULT_CAPACITY

    @classmethod
    def from_env(cls) -> CacheConfig:
        """Read LRU_CACHE_CAPACITY

        Unlike the report settings, a bad capacity is not silently replaced.
        """
        raw = os.getenv("LRU_CACHE_CAPACITY")
        if not raw:
            return cls()
        try:
            capacity = int(raw)
        except ValueError as e:
            raise ConfigurationError(f"LRU_CACHE_CAPACITY must be an integer, got {raw!r}") from e
        if capacity < 1:
            raise ConfigurationError(f"LRU_CACHE_CAPACITY must be positive, got {capacity}")
        return cls(capacity=capacity)


@dataclass
class ReportConfig:
    """Report settings"""

    title: str = DEFAULT_REPORT_TITLE
    max_value_width: int = DEFAULT_MAX_VALUE_WIDTH

    @classmethod
    def from_env(cls) -> ReportConfig:
        def get_width(default: int) -> int:
            value = os.getenv("LRU_REPORT_MAX_VALUE_WIDTH")
            if value:
                try:
                    width = int(value)
                except ValueError:
                    return default
                if width > 0:
                    return width
            return default

        return cls(
            title=os.getenv("LRU_REPORT_TITLE") or DEFAULT_REPORT_TITLE,
            max_value_width=get_width(DEFAULT_MAX_VALUE_WIDTH),
        )


@dataclass
class AppConfig:
    """All settings for the CLI"""

    cache: CacheConfig = field(default_factory=CacheConfig)
    report: ReportConfig = field(default_factory=ReportConfig)

    @classmethod
    def from_env(cls) -> AppConfig:
        return cls(
            cache=CacheConfig.from_env(),
            report=ReportConfig.from_env(),
        )
