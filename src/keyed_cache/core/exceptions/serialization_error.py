"""Key serialization error.

ONLY key serialization errors - raised when a cache key without a string
form cannot be converted to canonical JSON.
"""

from typing import Any, Dict, Optional

from .base import KeyedCacheError


class KeySerializationError(KeyedCacheError):
    """Cache key could not be serialized to JSON."""
    
    def __init__(
        self,
        message: str,
        key_type: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        """Initialize key serialization error.
        
        Args:
            message: Error description
            key_type: Name of the key's type
            original_error: Underlying exception raised by the JSON encoder
        """
        details: Dict[str, Any] = {"key_type": key_type}
        if original_error is not None:
            details["original_error"] = {
                "type": type(original_error).__name__,
                "message": str(original_error),
            }
        super().__init__(message, error_code="CACHE_KEY_SERIALIZATION_ERROR", details=details)
        self.key_type = key_type
        self.original_error = original_error
    
    @classmethod
    def from_key(cls, key: Any, error: Exception) -> "KeySerializationError":
        """Create exception for a key the JSON encoder rejected."""
        key_type = type(key).__name__
        return cls(
            f"Cache key of type '{key_type}' is not JSON serializable: {error}",
            key_type=key_type,
            original_error=error,
        )
