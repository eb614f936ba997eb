"""Cache protocols."""

from .stringable import Stringable, has_custom_str

__all__ = ["Stringable", "has_custom_str"]
