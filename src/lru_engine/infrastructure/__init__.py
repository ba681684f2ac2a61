"""Cache infrastructure layer.

Concrete data structures and eviction policies used by the engine.
"""

from .structures import *
from .policies import *

__all__ = [
    "RecencyIndex",
    "LeastRecentlyUsedPolicy",
]
