"""Cache value objects."""

from .cache_key import CacheKey, KeyKind, KeyType, DEFAULT_SEPARATOR

__all__ = ["CacheKey", "KeyKind", "KeyType", "DEFAULT_SEPARATOR"]
