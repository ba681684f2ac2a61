"""Cache entry domain entity.

ONLY cache entry entity - a single cached key/value record that is
indexed by key from the value store and linked by position into the
recency index.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass, field
from typing import Any, Hashable, Optional


@dataclass(eq=False)
class CacheEntry:
    """Cache entry domain entity.

    Exactly one entry exists per live key. The value store maps the key to
    this object and the recency index threads it through ``prev``/``next``,
    so locating an entry's position never requires a scan.

    Entries compare by identity: two entries holding equal keys are still
    different records.
    """

    key: Hashable
    value: Any

    # Recency links, owned by RecencyIndex
    prev: Optional["CacheEntry"] = field(default=None, repr=False)
    next: Optional["CacheEntry"] = field(default=None, repr=False)

    def is_linked(self) -> bool:
        """Check if entry is currently threaded into a recency index."""
        return self.prev is not None and self.next is not None

    def unlink(self) -> None:
        """Detach entry from its neighbours."""
        if self.prev is not None:
            self.prev.next = self.next
        if self.next is not None:
            self.next.prev = self.prev
        self.prev = None
        self.next = None
