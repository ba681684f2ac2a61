"""Recency index.

ONLY recency ordering - circular doubly linked list of cache entries
with a sentinel root, most recently used at the head.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Hashable, Iterator, List, Optional

from ...core.entities.cache_entry import CacheEntry

_ROOT_KEY = object()


class RecencyIndex:
    """Ordered sequence of entries from most to least recently used.

    ``root.next`` is the head and ``root.prev`` the tail. Every operation
    relinks a constant number of nodes. The index is not synchronized; the
    owning cache serializes access.
    """

    def __init__(self):
        self._root = CacheEntry(key=_ROOT_KEY, value=None)
        self._root.prev = self._root
        self._root.next = self._root
        self._size = 0

    def push_front(self, entry: CacheEntry) -> None:
        """Link a detached entry in as the most recently used."""
        if entry.is_linked():
            raise ValueError(f"Entry for key {entry.key!r} is already linked")

        first = self._root.next
        entry.prev = self._root
        entry.next = first
        first.prev = entry
        self._root.next = entry
        self._size += 1

    def move_to_front(self, entry: CacheEntry) -> None:
        """Promote a linked entry to most recently used."""
        if self._root.next is entry:
            return
        entry.unlink()
        self._size -= 1
        self.push_front(entry)

    def remove(self, entry: CacheEntry) -> None:
        """Unlink an entry from the index."""
        entry.unlink()
        self._size -= 1

    def head(self) -> Optional[CacheEntry]:
        if self._size == 0:
            return None
        return self._root.next

    def tail(self) -> Optional[CacheEntry]:
        if self._size == 0:
            return None
        return self._root.prev

    def keys(self) -> List[Hashable]:
        """Snapshot of keys, most recent first."""
        return [entry.key for entry in self]

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[CacheEntry]:
        node = self._root.next
        while node is not self._root:
            yield node
            node = node.next
