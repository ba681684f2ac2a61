"""Eviction policy protocol.

ONLY victim selection contract - strategies decide which entry to evict,
the engine decides when.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Optional

from typing_extensions import Protocol, runtime_checkable

from ..entities.cache_entry import CacheEntry
from .recency_order import RecencyOrder


@runtime_checkable
class EvictionPolicy(Protocol):
    """Eviction policy protocol.

    Implementations must be pure with respect to the recency order: they
    pick a victim but never unlink it. Removal is done by the engine so both
    substructures change together.
    """

    name: str

    def select_victim(self, recency: RecencyOrder) -> Optional[CacheEntry]:
        """Return the entry to evict, or None if the order is empty."""
        ...
