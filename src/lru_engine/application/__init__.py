"""Cache application layer."""

from .services import *

__all__ = [
    "EvictionNotifier",
    "LRUCache",
    "create_lru_cache",
]
