"""Precondition guards.

ONLY argument guards - fail fast with a descriptive message before a cache
operation touches the mapping.
"""

from typing import Any, TypeVar

from ..core.exceptions.validation import EmptyValueError, RequiredFieldError

T = TypeVar("T")


def check_not_null(value: T, message: str) -> T:
    """Ensure ``value`` is not None.

    Args:
        value: Value to check
        message: Error message when the check fails

    Returns:
        The value, unchanged

    Raises:
        RequiredFieldError: If value is None
    """
    if value is None:
        raise RequiredFieldError(message)
    return value


def check_empty(value: Any, message: str) -> Any:
    """Ensure ``value`` is not an empty string.

    Args:
        value: Value to check
        message: Error message when the check fails

    Returns:
        The value, unchanged

    Raises:
        EmptyValueError: If value is an empty string
    """
    if isinstance(value, str) and value == "":
        raise EmptyValueError(message)
    return value
