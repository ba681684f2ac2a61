"""Cache core domain layer.

Clean core containing entities, value objects, events, exceptions and
shared contracts. No engine logic.
"""

from .entities import *
from .value_objects import *
from .events import *
from .exceptions import *
from .protocols import *

__all__ = [
    # Entities
    "CacheEntry",

    # Value Objects
    "CacheCapacity",
    "CacheStats",

    # Events
    "CacheEvicted",

    # Exceptions
    "LRUEngineError",
    "InvalidConfiguration",
    "ReentrantAccessError",
    "create_error_response",

    # Protocols
    "Cache",
    "EvictionListener",
    "EvictionPolicy",
    "RecencyOrder",
]
