"""Least recently used eviction policy.

ONLY LRU victim selection - picks the tail of the recency order.
"""

from typing import Optional

from ...core.entities.cache_entry import CacheEntry
from ...core.protocols.recency_order import RecencyOrder


class LeastRecentlyUsedPolicy:
    """Evict the entry touched longest ago.

    Recency order is a strict total order, so the tail is always a single,
    unambiguous victim.
    """

    name = "lru"

    def select_victim(self, recency: RecencyOrder) -> Optional[CacheEntry]:
        return recency.tail()
