"""Cache exceptions."""

from .base import KeyedCacheError
from .validation import ValidationError, RequiredFieldError, EmptyValueError
from .serialization_error import KeySerializationError

__all__ = [
    "KeyedCacheError",
    "ValidationError",
    "RequiredFieldError",
    "EmptyValueError",
    "KeySerializationError",
]
