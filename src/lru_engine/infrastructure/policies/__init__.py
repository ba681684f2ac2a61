"""Eviction policies."""

from .lru_policy import LeastRecentlyUsedPolicy

__all__ = ["LeastRecentlyUsedPolicy"]
