"""Version information for lru-cache-engine."""

__version__ = "0.1.0"
