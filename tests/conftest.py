"""Pytest configuration and fixtures for lru-engine tests."""

import logging

import pytest
from unittest.mock import MagicMock

from lru_engine import LRUCache
from lru_engine.config import get_settings


@pytest.fixture
def cache():
    """Cache with room for three entries."""
    return LRUCache(capacity=3)


@pytest.fixture
def pair_cache():
    """Cache with room for two entries."""
    return LRUCache(capacity=2)


@pytest.fixture
def eviction_observer():
    """Mock eviction listener."""
    return MagicMock(name="eviction_observer")


@pytest.fixture
def recorded_evictions():
    """List plus listener that appends every (key, value) it is notified with."""
    evictions = []

    def listener(key, value):
        evictions.append((key, value))

    return evictions, listener


@pytest.fixture
def clean_settings(monkeypatch):
    """Clear LRU_ENGINE_* environment and the settings cache around a test."""
    for name in ("LRU_ENGINE_DEFAULT_CAPACITY", "LRU_ENGINE_LOG_VERBOSITY", "LRU_ENGINE_LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.fixture
def restore_library_logger():
    """Restore the lru_engine logger after a test reconfigures it."""
    logger = logging.getLogger("lru_engine")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate
