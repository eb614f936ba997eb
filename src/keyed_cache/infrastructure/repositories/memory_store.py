"""Memory store.

ONLY in-memory storage - the shared mapping behind the keyed cache, with
every operation serialized by a re-entrant lock.
"""

import threading
from contextlib import nullcontext
from typing import Any, Dict, List, Optional


class MemoryStore:
    """Thread-safe in-memory mapping of composite keys to values."""

    def __init__(self, thread_safe: bool = True):
        """Initialize memory store.

        Args:
            thread_safe: Guard operations with a lock; disable only for
                single-threaded hosts
        """
        self._data: Dict[str, Any] = {}
        self._lock = threading.RLock() if thread_safe else nullcontext()

    def get(self, full_key: str) -> Optional[Any]:
        """Get value by composite key, None if absent."""
        with self._lock:
            return self._data.get(full_key)

    def put(self, full_key: str, value: Any) -> None:
        """Insert or overwrite a value."""
        with self._lock:
            self._data[full_key] = value

    def delete(self, full_key: str) -> bool:
        """Delete value by composite key.

        Returns:
            True if an entry was removed
        """
        with self._lock:
            if full_key in self._data:
                del self._data[full_key]
                return True
            return False

    def delete_prefix(self, prefix: str) -> int:
        """Delete every entry whose key starts with ``prefix``.

        Returns:
            Number of removed entries
        """
        with self._lock:
            matching_keys = [key for key in self._data if key.startswith(prefix)]
            for key in matching_keys:
                del self._data[key]
            return len(matching_keys)

    def clear(self) -> None:
        """Remove all entries."""
        with self._lock:
            self._data.clear()

    def keys(self) -> List[str]:
        """Get a snapshot of the stored composite keys."""
        with self._lock:
            return list(self._data.keys())

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)
