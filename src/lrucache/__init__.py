"""lrucache

Generic fixed-capacity cache that evicts the least recently used entry.

Usage:
    python -m lrucache demo
    python -m lrucache replay ops.txt --capacity 3
"""

from lrucache.cache import LRUCache
from lrucache.exceptions import CacheError, ConfigurationError, OperationParseError
from lrucache.models import CacheEntry, CacheSnapshot

__all__ = [
    "CacheEntry",
    "CacheError",
    "CacheSnapshot",
    "ConfigurationError",
    "LRUCache",
    "OperationParseError",
]
__version__ = "0.1.0"
