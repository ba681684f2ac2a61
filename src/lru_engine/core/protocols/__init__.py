"""Cache protocols."""

from .cache import Cache
from .eviction_listener import EvictionListener
from .eviction_policy import EvictionPolicy
from .recency_order import RecencyOrder

__all__ = [
    "Cache",
    "EvictionListener",
    "EvictionPolicy",
    "RecencyOrder",
]
