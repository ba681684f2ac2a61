"""Cache domain events."""

from .cache_evicted import CacheEvicted

__all__ = ["CacheEvicted"]
