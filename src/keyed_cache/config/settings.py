"""
Cache settings for keyed-cache.

Environment-driven configuration, read once per process.
"""
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.value_objects.cache_key import DEFAULT_SEPARATOR


class CacheSettings(BaseSettings):
    """Settings for the process-wide keyed cache."""

    model_config = SettingsConfigDict(
        env_prefix="KEYED_CACHE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    separator: str = Field(
        default=DEFAULT_SEPARATOR,
        description="Sequence placed between a cache type and its key"
    )
    thread_safe: bool = Field(
        default=True,
        description="Guard every store operation with a re-entrant lock"
    )
    warn_on_json_keys: bool = Field(
        default=True,
        description="Log a warning when a key falls back to JSON serialization"
    )

    @field_validator("separator")
    @classmethod
    def validate_separator(cls, v: str) -> str:
        """Validate separator is not empty."""
        if not v:
            raise ValueError("Cache key separator cannot be empty")
        return v


@lru_cache()
def get_cache_settings() -> CacheSettings:
    """Get cached settings instance."""
    return CacheSettings()
