"""Invalid configuration exception.

ONLY construction errors - raised when a cache cannot be created from
the supplied configuration.
"""

from typing import Any

from .base import LRUEngineError


class InvalidConfiguration(LRUEngineError, ValueError):
    """Raised when a cache is constructed with an unusable configuration.

    Construction is deterministic, so there is nothing to retry: the caller
    must supply a different value.
    """

    @classmethod
    def capacity(cls, value: Any) -> "InvalidConfiguration":
        """Create exception for a capacity that is not a positive integer."""
        return cls(
            f"Cache capacity must be a positive integer, got {value!r}",
            error_code="CACHE_INVALID_CAPACITY",
            details={"capacity": repr(value)},
        )
