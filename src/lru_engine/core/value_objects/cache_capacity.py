"""Cache capacity value object.

ONLY capacity constraints - entry-count capacity fixed at construction
with validation.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass

from ..exceptions.invalid_configuration import InvalidConfiguration


@dataclass(frozen=True)
class CacheCapacity:
    """Cache capacity value object.

    Maximum number of entries a cache may hold. Capacity counts entries
    only; the size of stored values is never considered.
    """

    entries: int

    MIN_ENTRIES = 1

    def __post_init__(self):
        """Validate capacity."""
        # bool is an int subclass but never a meaningful capacity
        if isinstance(self.entries, bool) or not isinstance(self.entries, int):
            raise InvalidConfiguration.capacity(self.entries)

        if self.entries < self.MIN_ENTRIES:
            raise InvalidConfiguration.capacity(self.entries)

    def is_reached_by(self, size: int) -> bool:
        """Check if a cache holding ``size`` entries is full."""
        return size >= self.entries

    def __int__(self) -> int:
        return self.entries

    def __str__(self) -> str:
        return str(self.entries)
