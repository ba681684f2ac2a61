"""Eviction listener protocol.

ONLY observer contract - callbacks notified with the evicted key and value.
"""

from typing import Any, Hashable

from typing_extensions import Protocol


class EvictionListener(Protocol):
    """Callable notified after an entry is evicted.

    Listeners must not call back into the cache that notifies them; such
    calls raise ReentrantAccessError.
    """

    def __call__(self, key: Hashable, value: Any) -> None:
        ...
