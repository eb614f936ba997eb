"""Cache application services."""

from .keyed_cache import KeyedCache, get_keyed_cache, reset_keyed_cache

__all__ = ["KeyedCache", "get_keyed_cache", "reset_keyed_cache"]
