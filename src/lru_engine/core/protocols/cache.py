"""Cache protocol.

ONLY cache contract - the minimal get/set interface every cache engine
satisfies.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Hashable, Optional, TypeVar

from typing_extensions import Protocol, runtime_checkable

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


@runtime_checkable
class Cache(Protocol[K, V]):
    """Cache protocol.

    ``get`` returns ``None`` on a miss rather than raising. ``set`` never
    fails because the cache is full; making room is the engine's concern.
    """

    def get(self, key: K) -> Optional[V]:
        """Get value by key, or None if absent."""
        ...

    def set(self, key: K, value: V) -> None:
        """Insert or overwrite a value."""
        ...
