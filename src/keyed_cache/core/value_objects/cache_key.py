"""Cache key value object.

ONLY key composition - classifies a caller-supplied key, normalizes it to a
string and builds the composite ``type + separator + key`` mapping key.
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from ..exceptions.serialization_error import KeySerializationError
from ..protocols.stringable import Stringable, has_custom_str
from ...utils.validation import check_not_null

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = "$%$"

# Strings and stringable objects are used as-is, anything else goes through JSON
KeyType = Union[str, Stringable, Any]


class KeyKind(str, Enum):
    """How a caller key was turned into a string."""
    STRING = "string"
    STRINGABLE = "stringable"
    JSON = "json"


def _to_canonical_json(key: Any) -> str:
    """Serialize ``key`` to canonical JSON."""
    try:
        return json.dumps(key, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise KeySerializationError.from_key(key, e) from e


@dataclass(frozen=True)
class CacheKey:
    """Normalized cache key.

    Features:
    - Tagged representation (string, stringable, JSON fallback)
    - Optional namespace ("type") partitioning
    - Composite key generation for the shared mapping
    """

    kind: KeyKind
    value: str
    namespace: str = ""

    @classmethod
    def from_raw(cls, key: KeyType, namespace: str = "", warn_on_json: bool = True) -> "CacheKey":
        """Create a cache key from an arbitrary caller key.

        Args:
            key: Caller key of any type
            namespace: Optional cache type, empty for the untyped namespace
            warn_on_json: Log a warning when falling back to JSON

        Returns:
            Normalized cache key

        Raises:
            RequiredFieldError: If key or namespace is None
            KeySerializationError: If the key needs JSON and is not serializable
        """
        check_not_null(namespace, "Cache type cannot be null.")
        check_not_null(key, "Cache key cannot be null.")

        if isinstance(key, str):
            return cls(KeyKind.STRING, key, namespace)

        if has_custom_str(key):
            return cls(KeyKind.STRINGABLE, str(key), namespace)

        value = _to_canonical_json(key)
        if warn_on_json:
            logger.warning(
                "Consider using a string, or a type with a '__str__()' method, as cache key."
            )
        return cls(KeyKind.JSON, value, namespace)

    @staticmethod
    def namespace_prefix(namespace: str, separator: str = DEFAULT_SEPARATOR) -> str:
        """Get the composite key prefix shared by every entry of a namespace."""
        return f"{namespace}{separator}"

    def composite(self, separator: str = DEFAULT_SEPARATOR) -> str:
        """Get the mapping key for this cache key."""
        if self.namespace:
            return self.namespace_prefix(self.namespace, separator) + self.value
        return self.value

    def __str__(self) -> str:
        """String representation used in log messages."""
        return f"{self.namespace}.{self.value}"
