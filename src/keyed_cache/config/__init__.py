"""Configuration module for keyed-cache."""

from .logging_config import (
    setup_logging,
    get_logger,
    LogLevel,
    LogVerbosity,
    LogFormat,
    LoggingConfig,
)
from .settings import CacheSettings, get_cache_settings

__all__ = [
    "setup_logging",
    "get_logger",
    "LogLevel",
    "LogVerbosity",
    "LogFormat",
    "LoggingConfig",
    "CacheSettings",
    "get_cache_settings",
]
