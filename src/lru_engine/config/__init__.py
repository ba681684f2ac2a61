"""Configuration for lru-engine: settings and logging."""

from .logging_config import (
    LogFormat,
    LogLevel,
    LogVerbosity,
    LoggingConfig,
    get_logger,
    setup_logging,
)
from .settings import CacheSettings, get_settings

__all__ = [
    "CacheSettings",
    "get_settings",
    "LogFormat",
    "LogLevel",
    "LogVerbosity",
    "LoggingConfig",
    "get_logger",
    "setup_logging",
]
