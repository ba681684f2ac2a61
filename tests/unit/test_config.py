"""Tests for settings and logging configuration."""

import logging

import pytest
from pydantic import ValidationError

from lru_engine.config import (
    CacheSettings,
    LogFormat,
    LogVerbosity,
    LoggingConfig,
    get_logger,
    get_settings,
    setup_logging,
)
from lru_engine.config.logging_config import get_log_level_from_verbosity


class TestCacheSettings:
    """Test cases for CacheSettings."""

    def test_defaults(self, clean_settings):
        """Test default values with a clean environment."""
        settings = CacheSettings()

        assert settings.default_capacity == 128
        assert settings.log_verbosity == LogVerbosity.NORMAL
        assert settings.log_format == LogFormat.SIMPLE

    def test_environment_overrides(self, clean_settings):
        """Test that LRU_ENGINE_* variables are read case-insensitively."""
        clean_settings.setenv("LRU_ENGINE_DEFAULT_CAPACITY", "16")
        clean_settings.setenv("LRU_ENGINE_LOG_VERBOSITY", "debug")
        clean_settings.setenv("LRU_ENGINE_LOG_FORMAT", "JSON")

        settings = CacheSettings()

        assert settings.default_capacity == 16
        assert settings.log_verbosity == LogVerbosity.DEBUG
        assert settings.log_format == LogFormat.JSON

    @pytest.mark.parametrize("capacity", [0, -5])
    def test_non_positive_default_capacity_rejected(self, clean_settings, capacity):
        """Test that the default capacity must be positive."""
        with pytest.raises(ValidationError, match="default_capacity must be positive"):
            CacheSettings(default_capacity=capacity)

    def test_get_settings_is_cached(self, clean_settings):
        """Test that get_settings returns a shared instance."""
        assert get_settings() is get_settings()


class TestLoggingConfig:
    """Test cases for logging configuration."""

    @pytest.mark.parametrize(
        "verbosity,level",
        [("QUIET", "ERROR"), ("normal", "WARNING"), ("VERBOSE", "INFO"), ("DEBUG", "DEBUG")],
    )
    def test_verbosity_mapping(self, verbosity, level):
        """Test verbosity to level mapping."""
        assert get_log_level_from_verbosity(verbosity) == level

    def test_every_verbosity_has_a_level(self):
        """Test that each verbosity mode maps to a real log level."""
        for verbosity in LogVerbosity:
            level = get_log_level_from_verbosity(verbosity.value)
            assert isinstance(getattr(logging, level), int)

    def test_unknown_verbosity_rejected(self):
        """Test that unknown verbosity names fail."""
        with pytest.raises(ValueError):
            get_log_level_from_verbosity("chatty")

    def test_build_targets_library_logger_only(self):
        """Test that the generated config leaves the root logger alone."""
        config = LoggingConfig.build("VERBOSE", "detailed")

        assert "root" not in config
        assert config["loggers"]["lru_engine"]["level"] == "INFO"
        assert "%(filename)s" in config["formatters"]["default"]["format"]

    def test_setup_logging_applies_settings(self, restore_library_logger):
        """Test that setup_logging configures the library logger."""
        setup_logging(CacheSettings(log_verbosity="DEBUG", log_format="json"))

        assert restore_library_logger.level == logging.DEBUG
        assert restore_library_logger.propagate is False
        assert len(restore_library_logger.handlers) == 1

    def test_silence_module(self, restore_library_logger):
        """Test silencing a module logger."""
        LoggingConfig.silence_module("lru_engine")

        assert restore_library_logger.level == logging.CRITICAL

    def test_get_logger(self):
        """Test logger lookup by name."""
        assert get_logger("lru_engine.test").name == "lru_engine.test"
