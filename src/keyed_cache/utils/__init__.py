"""Utility helpers for keyed-cache."""

from .validation import check_not_null, check_empty

__all__ = ["check_not_null", "check_empty"]
