"""Core cache domain: exceptions, protocols and value objects."""

from .exceptions import (
    KeyedCacheError,
    ValidationError,
    RequiredFieldError,
    EmptyValueError,
    KeySerializationError,
)
from .protocols import Stringable, has_custom_str
from .value_objects import CacheKey, KeyKind, KeyType, DEFAULT_SEPARATOR

__all__ = [
    "KeyedCacheError",
    "ValidationError",
    "RequiredFieldError",
    "EmptyValueError",
    "KeySerializationError",
    "Stringable",
    "has_custom_str",
    "CacheKey",
    "KeyKind",
    "KeyType",
    "DEFAULT_SEPARATOR",
]
