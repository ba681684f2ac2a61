"""LRU cache engine.

ONLY cache engine - bounded, in-memory key/value cache that evicts the
least recently used entry when a new key arrives at capacity.

Following maximum separation architecture - one file = one purpose.
"""

import logging
import threading
from typing import Dict, Generic, Hashable, Iterable, List, Optional, TypeVar

from ...config.settings import CacheSettings, get_settings
from ...core.entities.cache_entry import CacheEntry
from ...core.events.cache_evicted import CacheEvicted
from ...core.exceptions.base import LRUEngineError
from ...core.exceptions.reentrant_access import ReentrantAccessError
from ...core.protocols.eviction_listener import EvictionListener
from ...core.protocols.eviction_policy import EvictionPolicy
from ...core.value_objects.cache_capacity import CacheCapacity
from ...core.value_objects.cache_stats import CacheStats
from ...infrastructure.policies.lru_policy import LeastRecentlyUsedPolicy
from ...infrastructure.structures.recency_index import RecencyIndex
from .eviction_notifier import EvictionNotifier

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class LRUCache(Generic[K, V]):
    """Least recently used cache.

    The value store (a dict of key -> CacheEntry) and the recency index (a
    linked list of the same entries) form one unit of state guarded by a
    single re-entrant lock. Every public operation holds the lock for its
    whole body, eviction and notification included, so no caller can see
    one structure updated without the other.

    ``get`` is not a pure read: a hit promotes the key to most recently
    used.

    Eviction listeners are called synchronously, after the eviction has
    been committed, in registration order. Calling ``get`` or ``set`` from
    inside a listener raises ReentrantAccessError.
    """

    def __init__(
        self,
        capacity: int,
        policy: Optional[EvictionPolicy] = None,
        observers: Optional[Iterable[EvictionListener]] = None
    ):
        """Initialize cache.

        Args:
            capacity: Maximum number of entries, must be a positive integer
            policy: Victim selection strategy, LRU when omitted
            observers: Eviction listeners to subscribe, in order

        Raises:
            InvalidConfiguration: If capacity is not a positive integer
        """
        self._capacity = CacheCapacity(capacity)
        self._policy = policy if policy is not None else LeastRecentlyUsedPolicy()

        self._entries: Dict[K, CacheEntry] = {}
        self._recency = RecencyIndex()
        self._notifier = EvictionNotifier()

        self._lock = threading.RLock()
        self._notifying = False

        self._stats = {
            "hits": 0,
            "misses": 0,
            "sets": 0,
            "updates": 0,
            "evictions": 0,
            "observer_failures": 0,
        }

        for observer in observers or ():
            self._notifier.subscribe(observer)

        logger.debug(
            f"Created LRU cache: capacity={self._capacity}, policy={self._policy.name}, "
            f"observers={len(self._notifier)}"
        )

    @property
    def capacity(self) -> int:
        return self._capacity.entries

    @property
    def policy_name(self) -> str:
        return self._policy.name

    def get(self, key: K) -> Optional[V]:
        """Get value by key and mark it most recently used.

        Returns None on a miss without touching the recency order.
        """
        with self._lock:
            self._ensure_not_notifying("get")

            entry = self._entries.get(key)
            if entry is None:
                self._stats["misses"] += 1
                return None

            self._recency.move_to_front(entry)
            self._stats["hits"] += 1
            return entry.value

    def set(self, key: K, value: V) -> None:
        """Insert or overwrite a value and mark it most recently used.

        Overwriting an existing key never evicts. Inserting a new key into a
        full cache evicts exactly one entry first, so the cache is never over
        capacity.
        """
        with self._lock:
            self._ensure_not_notifying("set")

            entry = self._entries.get(key)
            if entry is not None:
                entry.value = value
                self._recency.move_to_front(entry)
                self._stats["updates"] += 1
                return

            evicted = None
            if self._capacity.is_reached_by(len(self._entries)):
                evicted = self._evict()

            entry = CacheEntry(key=key, value=value)
            self._entries[key] = entry
            self._recency.push_front(entry)
            self._stats["sets"] += 1

            if evicted is not None:
                self._notify(evicted)

    def peek(self, key: K) -> Optional[V]:
        """Get value by key without changing the recency order."""
        with self._lock:
            entry = self._entries.get(key)
            return None if entry is None else entry.value

    def keys(self) -> List[K]:
        """Snapshot of keys from most to least recently used."""
        with self._lock:
            return self._recency.keys()

    def subscribe(self, listener: EvictionListener) -> EvictionListener:
        """Register an eviction listener called as ``listener(key, value)``.

        Returns the listener, so this can be used as a decorator.
        """
        with self._lock:
            return self._notifier.subscribe(listener)

    def unsubscribe(self, listener: EvictionListener) -> bool:
        """Remove an eviction listener. Returns False if it was not registered."""
        with self._lock:
            return self._notifier.unsubscribe(listener)

    def get_stats(self) -> CacheStats:
        """Get a snapshot of cache statistics."""
        with self._lock:
            return CacheStats(
                capacity=self.capacity,
                size=len(self._entries),
                **self._stats
            )

    def _evict(self) -> CacheEvicted:
        """Remove the policy's victim from both structures.

        Must be called with the lock held.
        """
        victim = self._policy.select_victim(self._recency)
        if victim is None:
            raise LRUEngineError(
                f"Eviction policy '{self._policy.name}' selected no victim for a full cache",
                error_code="CACHE_POLICY_NO_VICTIM",
                details={"size": len(self._entries), "capacity": self.capacity},
            )

        if self._entries.get(victim.key) is not victim:
            raise LRUEngineError(
                f"Eviction policy '{self._policy.name}' selected an entry not held by this cache",
                error_code="CACHE_POLICY_FOREIGN_VICTIM",
                details={"key": repr(victim.key)},
            )

        del self._entries[victim.key]
        self._recency.remove(victim)
        self._stats["evictions"] += 1

        event = CacheEvicted(key=victim.key, value=victim.value, capacity=self.capacity)
        logger.debug(f"Evicted key {victim.key!r} (policy={self._policy.name})")
        return event

    def _notify(self, event: CacheEvicted) -> None:
        if not len(self._notifier):
            return

        self._notifying = True
        try:
            failures = self._notifier.notify(event)
        finally:
            self._notifying = False
        self._stats["observer_failures"] += failures

    def _ensure_not_notifying(self, operation: str) -> None:
        # Only the thread holding the lock can observe the flag set
        if self._notifying:
            raise ReentrantAccessError.during_notification(operation)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        """Membership test. Does not promote the key."""
        with self._lock:
            return key in self._entries

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(capacity={self.capacity}, "
            f"size={len(self)}, policy={self._policy.name!r})"
        )


def create_lru_cache(
    capacity: Optional[int] = None,
    settings: Optional[CacheSettings] = None,
    policy: Optional[EvictionPolicy] = None,
    observers: Optional[Iterable[EvictionListener]] = None
) -> LRUCache:
    """Create LRU cache, taking capacity from settings when not given."""
    if capacity is None:
        capacity = (settings or get_settings()).default_capacity
    return LRUCache(capacity=capacity, policy=policy, observers=observers)
