"""Infrastructure layer for keyed-cache."""

from .repositories import MemoryStore

__all__ = ["MemoryStore"]
