"""Cache data structures."""

from .recency_index import RecencyIndex

__all__ = ["RecencyIndex"]
