"""Centralized logging configuration for lru-engine.

Provides environment-based control over verbosity and format of the
``lru_engine`` loggers. The library never configures logging on import;
embedding applications call ``setup_logging()`` once at startup.
"""

import logging
import logging.config
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from .settings import CacheSettings

LIBRARY_LOGGER = "lru_engine"


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogVerbosity(str, Enum):
    """Log verbosity modes."""
    QUIET = "QUIET"      # Only errors and critical
    NORMAL = "NORMAL"    # Warnings and above
    VERBOSE = "VERBOSE"  # Info level logging
    DEBUG = "DEBUG"      # Every eviction is logged


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


FORMAT_STRINGS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}


def get_log_level_from_verbosity(verbosity: str) -> str:
    """Map verbosity mode to log level."""
    verbosity_map = {
        LogVerbosity.QUIET: LogLevel.ERROR.value,
        LogVerbosity.NORMAL: LogLevel.WARNING.value,
        LogVerbosity.VERBOSE: LogLevel.INFO.value,
        LogVerbosity.DEBUG: LogLevel.DEBUG.value,
    }
    return verbosity_map[LogVerbosity(verbosity.upper())]


class LoggingConfig:
    """Logging configuration manager for the library loggers."""

    @classmethod
    def build(cls, verbosity: str, log_format: str) -> Dict[str, Any]:
        """Build a ``dictConfig`` mapping for the given verbosity and format."""
        effective_log_level = get_log_level_from_verbosity(verbosity)
        format_string = FORMAT_STRINGS[LogFormat(log_format.lower())]

        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": format_string,
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": effective_log_level,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "loggers": {
                LIBRARY_LOGGER: {
                    "level": effective_log_level,
                    "handlers": ["console"],
                    "propagate": False,
                },
            },
        }

    @classmethod
    def configure(cls, settings: Optional["CacheSettings"] = None) -> None:
        """Configure logging from settings (environment when omitted)."""
        if settings is None:
            from .settings import get_settings
            settings = get_settings()

        verbosity = LogVerbosity(settings.log_verbosity).value
        log_format = LogFormat(settings.log_format).value
        logging.config.dictConfig(cls.build(verbosity, log_format))

        logger = logging.getLogger(__name__)
        logger.debug(f"Logging configured: verbosity={verbosity}, format={log_format}")

    @classmethod
    def set_module_level(cls, module_name: str, level: str) -> None:
        """Set log level for a specific module.

        Args:
            module_name: Name of the module
            level: Log level to set
        """
        logging.getLogger(module_name).setLevel(getattr(logging, level.upper()))

    @classmethod
    def silence_module(cls, module_name: str) -> None:
        """Silence all logging from a module."""
        cls.set_module_level(module_name, LogLevel.CRITICAL.value)


def setup_logging(settings: Optional["CacheSettings"] = None) -> None:
    """Setup logging configuration from settings or environment variables.

    This is the main entry point for configuring logging. It should be
    called once at application startup.
    """
    LoggingConfig.configure(settings)


def get_logger(name: str) -> logging.Logger:
    """Get a logger.

    Args:
        name: Module name (usually __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
