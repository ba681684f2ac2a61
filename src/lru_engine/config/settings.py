"""
Settings for lru-engine.
Environment-driven defaults using Pydantic settings. Capacity passed to a
cache constructor always takes precedence over these values.
"""
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging_config import LogFormat, LogVerbosity


class CacheSettings(BaseSettings):
    """Cache engine settings read from ``LRU_ENGINE_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LRU_ENGINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True
    )

    default_capacity: int = Field(default=128, description="Capacity used by create_lru_cache")
    log_verbosity: LogVerbosity = Field(default=LogVerbosity.NORMAL)
    log_format: LogFormat = Field(default=LogFormat.SIMPLE)

    @field_validator("default_capacity")
    @classmethod
    def validate_default_capacity(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("default_capacity must be positive")
        return v

    @field_validator("log_verbosity", mode="before")
    @classmethod
    def normalize_verbosity(cls, v):
        return v.strip().upper() if isinstance(v, str) else v

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_format(cls, v):
        return v.strip().lower() if isinstance(v, str) else v


@lru_cache()
def get_settings() -> CacheSettings:
    """Get cached settings instance."""
    return CacheSettings()
