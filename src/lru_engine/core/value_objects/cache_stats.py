"""Cache statistics value object.

ONLY statistics snapshot - counters describing cache activity at a
single point in time.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class CacheStats:
    """Point-in-time snapshot of cache counters."""

    capacity: int
    size: int
    hits: int = 0
    misses: int = 0
    sets: int = 0
    updates: int = 0
    evictions: int = 0
    observer_failures: int = 0

    @property
    def total_requests(self) -> int:
        return self.hits + self.misses

    @property
    def hit_rate_percent(self) -> float:
        """Calculate hit rate percentage."""
        if self.total_requests == 0:
            return 0.0
        return (self.hits / self.total_requests) * 100.0

    @property
    def utilization_percent(self) -> float:
        return (self.size / self.capacity) * 100.0

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary for serialization."""
        return {
            **asdict(self),
            "total_requests": self.total_requests,
            "hit_rate_percent": self.hit_rate_percent,
            "utilization_percent": self.utilization_percent,
        }
