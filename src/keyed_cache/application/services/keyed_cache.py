"""Keyed cache service.

ONLY cache operations - process-wide in-memory cache with optional
type-namespacing.

Cache keys are built from 2 parameters:
- key: any object identifying the cached element. Strings are used verbatim,
  objects with their own ``__str__`` or ``__repr__`` are stringified,
  anything else is serialized to canonical JSON.
- type: optional string naming the kind of cached element, so the same key
  can be cached for different contexts::

      session = cache.get("usersession")
      anonymous_session = cache.get("usersession", "anonymous")

Every operation is fail-silent: errors are logged and the caller gets a
not-found result (``None``) or a no-op.
"""

import logging
from functools import lru_cache
from typing import Any, Optional

from ...config.settings import CacheSettings, get_cache_settings
from ...core.value_objects.cache_key import CacheKey, KeyType
from ...infrastructure.repositories.memory_store import MemoryStore
from ...utils.validation import check_empty, check_not_null

logger = logging.getLogger(__name__)

EMPTY = ""


class KeyedCache:
    """In-memory key/value cache namespaced by type.

    Features:
    - Arbitrary keys (string, stringable or JSON-serializable)
    - Type namespaces with bulk clearing
    - Delete-on-falsy ``set``
    - Errors never propagate to callers
    """

    def __init__(
        self,
        store: Optional[MemoryStore] = None,
        settings: Optional[CacheSettings] = None
    ):
        """Initialize keyed cache.

        Args:
            store: Backing store, a new one is created if omitted
            settings: Cache settings, process settings if omitted
        """
        self._settings = settings if settings is not None else get_cache_settings()
        # MemoryStore is falsy when empty
        self._store = store if store is not None else MemoryStore(
            thread_safe=self._settings.thread_safe
        )

    @property
    def separator(self) -> str:
        """Separator placed between type and key."""
        return self._settings.separator

    def _cache_key(self, type: str, key: KeyType) -> CacheKey:
        """Normalize ``key`` in namespace ``type``.

        Raises:
            RequiredFieldError: If type or key is None
            KeySerializationError: If key cannot be serialized
        """
        return CacheKey.from_raw(
            key,
            namespace=type,
            warn_on_json=self._settings.warn_on_json_keys
        )

    def build_key(self, type: str, key: KeyType) -> str:
        """Build the composite mapping key for ``key`` in namespace ``type``."""
        return self._cache_key(type, key).composite(self.separator)

    def get(self, key: KeyType, type: str = EMPTY) -> Optional[Any]:
        """Retrieve an element from the cache.

        Args:
            key: Key identifying the cached element
            type: Optional type of the cached element

        Returns:
            Cached element or None if not found
        """
        try:
            cache_key = self._cache_key(type, key)
            value = self._store.get(cache_key.composite(self.separator))
            logger.debug(
                "Retrieved cached value for %s: %s",
                cache_key, value if value is not None else "Not found"
            )
            return value
        except Exception as e:
            logger.error("get: %s", e)
        return None

    def set(self, key: KeyType, value: Any, type: str = EMPTY) -> None:
        """Add an element to the cache.

        A falsy ``value`` (None, False, 0, "", empty containers) removes the
        entry instead of storing it.

        Args:
            key: Key identifying the element
            value: Element to be cached
            type: Optional type of the element
        """
        try:
            cache_key = self._cache_key(type, key)
            full_key = cache_key.composite(self.separator)
            if not value:
                self._store.delete(full_key)
                logger.debug("Cleared cache entry %s.", cache_key)
            else:
                self._store.put(full_key, value)
                logger.debug("Added cache entry %s: %s", cache_key, value)
        except Exception as e:
            logger.error("set: %s", e)

    def clear(self) -> None:
        """Clear the cache."""
        try:
            self._store.clear()
            logger.debug("Cache cleared.")
        except Exception as e:
            logger.error("clear: %s", e)

    def clear_type(self, type: str) -> None:
        """Clear every element of the specified type from the cache.

        Args:
            type: Type of the elements to be cleared, cannot be empty
        """
        try:
            check_not_null(type, "Cache type cannot be null.")
            check_empty(type, "Cache type cannot be empty.")
            removed = self._store.delete_prefix(
                CacheKey.namespace_prefix(type, self.separator)
            )
            logger.debug("Cache type %s cleared (%d entries).", type, removed)
        except Exception as e:
            logger.error("clear_type: %s", e)

    def __len__(self) -> int:
        return len(self._store)


@lru_cache(maxsize=1)
def get_keyed_cache() -> KeyedCache:
    """Get the process-wide cache instance."""
    return KeyedCache()


def reset_keyed_cache() -> None:
    """Drop the process-wide cache instance and its entries."""
    if get_keyed_cache.cache_info().currsize:
        get_keyed_cache().clear()
    get_keyed_cache.cache_clear()
