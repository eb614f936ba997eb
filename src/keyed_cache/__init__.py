"""Keyed-Cache - process-wide in-memory key/value cache.

Stores arbitrary values under composite keys built from an optional type
namespace and a caller key of any shape.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

from .config import (
    CacheSettings,
    get_cache_settings,
    LoggingConfig,
    get_logger,
)

from .core import (
    # Exceptions
    KeyedCacheError,
    ValidationError,
    RequiredFieldError,
    EmptyValueError,
    KeySerializationError,

    # Keys
    Stringable,
    CacheKey,
    KeyKind,
    KeyType,
    DEFAULT_SEPARATOR,
)

from .utils import check_not_null, check_empty
from .infrastructure import MemoryStore
from .application import KeyedCache, get_keyed_cache, reset_keyed_cache

__all__ = [
    "__version__",

    # Configuration
    "CacheSettings",
    "get_cache_settings",
    "LoggingConfig",
    "get_logger",
    "setup_logging",

    # Exceptions
    "KeyedCacheError",
    "ValidationError",
    "RequiredFieldError",
    "EmptyValueError",
    "KeySerializationError",

    # Keys
    "Stringable",
    "CacheKey",
    "KeyKind",
    "KeyType",
    "DEFAULT_SEPARATOR",

    # Guards
    "check_not_null",
    "check_empty",

    # Cache
    "MemoryStore",
    "KeyedCache",
    "get_keyed_cache",
    "reset_keyed_cache",
]
