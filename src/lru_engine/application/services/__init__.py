"""Cache application services."""

from .eviction_notifier import EvictionNotifier
from .lru_cache import LRUCache, create_lru_cache

__all__ = [
    "EvictionNotifier",
    "LRUCache",
    "create_lru_cache",
]
