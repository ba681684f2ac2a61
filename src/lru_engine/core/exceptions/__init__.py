"""Cache engine exceptions.

One exception per file following maximum separation architecture.
"""

from .base import LRUEngineError, create_error_response
from .invalid_configuration import InvalidConfiguration
from .reentrant_access import ReentrantAccessError

__all__ = [
    "LRUEngineError",
    "InvalidConfiguration",
    "ReentrantAccessError",
    "create_error_response",
]
