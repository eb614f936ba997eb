"""Stringable protocol.

ONLY string-conversion contract - a key type that supplies its own string
form is used verbatim in the composite cache key.
"""

from typing import Any

from typing_extensions import Protocol, runtime_checkable

# Keyed by canonical JSON rather than by their repr
JSON_CONTAINERS = (dict, list, tuple, set, frozenset)


@runtime_checkable
class Stringable(Protocol):
    """Type exposing a string form suitable for cache keys.

    Typing aid for key annotations: every Python object has ``__str__``, so
    ``isinstance(x, Stringable)`` is always true. Use :func:`has_custom_str`
    to decide whether a key's string form is meaningful.
    """

    def __str__(self) -> str:
        """Return the string form used as cache key."""
        ...


def has_custom_str(value: Any) -> bool:
    """Check whether ``value`` provides its own string form.

    A class overriding ``object.__str__`` or ``object.__repr__`` (for example
    a ``@dataclass``) qualifies. Numbers inherit ``object.__str__`` but their
    repr is already their natural string form. Containers are excluded so
    they keep the order-independent JSON form.

    Args:
        value: Candidate cache key

    Returns:
        True if ``str(value)`` yields a meaningful key
    """
    if isinstance(value, JSON_CONTAINERS):
        return False
    if isinstance(value, (int, float)):
        return True
    cls = type(value)
    return cls.__str__ is not object.__str__ or cls.__repr__ is not object.__repr__
