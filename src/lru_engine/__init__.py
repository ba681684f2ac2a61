"""lru-engine - bounded in-memory least recently used cache.

Provides a thread-safe LRU cache engine with pluggable victim selection
and synchronous eviction notifications.
"""

from .__version__ import __version__

from .application import (
    EvictionNotifier,
    LRUCache,
    create_lru_cache,
)

from .config import (
    CacheSettings,
    get_settings,
    setup_logging,
    get_logger,
)

from .core import (
    # Domain
    CacheEntry,
    CacheCapacity,
    CacheStats,
    CacheEvicted,

    # Exceptions
    LRUEngineError,
    InvalidConfiguration,
    ReentrantAccessError,
    create_error_response,

    # Protocols
    Cache,
    EvictionListener,
    EvictionPolicy,
    RecencyOrder,
)

from .infrastructure import (
    LeastRecentlyUsedPolicy,
    RecencyIndex,
)

__all__ = [
    "__version__",

    # Engine
    "LRUCache",
    "create_lru_cache",
    "EvictionNotifier",

    # Configuration
    "CacheSettings",
    "get_settings",
    "setup_logging",
    "get_logger",

    # Domain
    "CacheEntry",
    "CacheCapacity",
    "CacheStats",
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

    # Infrastructure
    "LeastRecentlyUsedPolicy",
    "RecencyIndex",
]
