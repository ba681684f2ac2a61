"""Eviction notification service.

ONLY observer delivery - keeps the ordered list of eviction listeners
and delivers eviction events to each of them in registration order.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from typing import Callable, List

from ...core.events.cache_evicted import CacheEvicted
from ...core.protocols.eviction_listener import EvictionListener

logger = logging.getLogger(__name__)


class EvictionNotifier:
    """Eviction notification service.

    Delivers each eviction synchronously to every registered listener. A
    listener that raises is logged and skipped; the remaining listeners are
    still notified and nothing propagates back to the cache. Failure counts
    are returned to the caller, which reports them in its statistics.

    Not synchronized on its own: the owning cache calls it under its lock.
    """

    def __init__(self):
        self._listeners: List[EvictionListener] = []

    def subscribe(self, listener: EvictionListener) -> EvictionListener:
        """Register a listener. Returns it so this works as a decorator."""
        if not callable(listener):
            raise TypeError(f"Eviction listener must be callable, got {type(listener).__name__}")
        self._listeners.append(listener)
        return listener

    def unsubscribe(self, listener: EvictionListener) -> bool:
        """Remove the earliest registration of a listener.

        Returns True if the listener was registered, False otherwise.
        """
        try:
            self._listeners.remove(listener)
        except ValueError:
            return False
        return True

    def notify(self, event: CacheEvicted) -> int:
        """Deliver an eviction event to all listeners.

        Returns the number of listeners that raised.
        """
        failures = 0
        # Snapshot so listeners may (un)subscribe while being notified
        for listener in tuple(self._listeners):
            try:
                listener(event.key, event.value)
            except Exception:
                failures += 1
                logger.exception(
                    f"Eviction listener {_describe(listener)} failed for key {event.key!r}"
                )
        return failures

    @property
    def listeners(self) -> List[EvictionListener]:
        """Copy of registered listeners in notification order."""
        return list(self._listeners)

    def __len__(self) -> int:
        return len(self._listeners)


def _describe(listener: Callable) -> str:
    return getattr(listener, "__qualname__", None) or repr(listener)
