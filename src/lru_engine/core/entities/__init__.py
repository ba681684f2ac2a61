"""Cache domain entities."""

from .cache_entry import CacheEntry

__all__ = ["CacheEntry"]
