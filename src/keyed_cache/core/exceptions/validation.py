"""Validation exceptions.

ONLY precondition failures - raised by the guards in
``keyed_cache.utils.validation`` before key composition or type clearing.
"""

from .base import KeyedCacheError


class ValidationError(KeyedCacheError):
    """Base class for precondition violations."""
    pass


class RequiredFieldError(ValidationError):
    """Raised when a required value is None."""
    pass


class EmptyValueError(ValidationError):
    """Raised when a string value is empty."""
    pass
