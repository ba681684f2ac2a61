"""Recency order protocol.

ONLY recency contract - read-only view of the recency order handed to
eviction policies.
"""

from typing import Iterator, Optional

from typing_extensions import Protocol

from ..entities.cache_entry import CacheEntry


class RecencyOrder(Protocol):
    """Entries ordered from most to least recently used."""

    def head(self) -> Optional[CacheEntry]:
        """Most recently used entry, or None when empty."""
        ...

    def tail(self) -> Optional[CacheEntry]:
        """Least recently used entry, or None when empty."""
        ...

    def __len__(self) -> int:
        ...

    def __iter__(self) -> Iterator[CacheEntry]:
        ...
