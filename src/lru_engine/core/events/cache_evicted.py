"""Cache evicted event.

ONLY eviction events - emitted when capacity pressure removes an entry
so observers can release resources tied to the evicted value.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Hashable


@dataclass(frozen=True)
class CacheEvicted:
    """Cache eviction domain event.

    Fired after an entry has been removed from both the value store and the
    recency index. The eviction is already committed when this event exists.
    """

    key: Hashable
    value: Any
    capacity: int
    reason: str = "capacity"
    evicted_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def get_event_type(self) -> str:
        """Get event type identifier."""
        return "cache.evicted"

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to dictionary for logging.

        The value is reported by type only; cached values are never
        serialized.
        """
        return {
            "event_type": self.get_event_type(),
            "key": repr(self.key),
            "value_type": type(self.value).__name__,
            "capacity": self.capacity,
            "reason": self.reason,
            "evicted_at": self.evicted_at.isoformat(),
        }
