"""Re-entrant access exception.

ONLY observer re-entrancy - raised when an eviction observer calls back
into the cache that is notifying it.
"""

from .base import LRUEngineError


class ReentrantAccessError(LRUEngineError):
    """Raised when the cache is used from inside one of its eviction observers."""

    @classmethod
    def during_notification(cls, operation: str) -> "ReentrantAccessError":
        """Create exception for an operation attempted while notifying observers."""
        return cls(
            f"Cache '{operation}' called from an eviction observer",
            error_code="CACHE_REENTRANT_ACCESS",
            details={"operation": operation},
        )
