"""Cache value objects."""

from .cache_capacity import CacheCapacity
from .cache_stats import CacheStats

__all__ = [
    "CacheCapacity",
    "CacheStats",
]
