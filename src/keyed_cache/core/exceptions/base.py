"""Base exceptions for keyed-cache.

This module defines the base exception hierarchy for the keyed-cache library.
All exceptions inherit from KeyedCacheError and carry an error code and
details for diagnostics.
"""

from typing import Any, Dict, Optional


class KeyedCacheError(Exception):
    """Base exception for all keyed-cache errors.
    
    Errors never reach cache callers; they are raised internally, caught at
    the operation boundary and logged.
    """
    
    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }
