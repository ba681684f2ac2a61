"""Base exceptions for lru-engine.

All engine exceptions inherit from LRUEngineError and carry an error code
and a details dictionary so callers can report them in a structured form.
"""

from typing import Any, Dict, Optional


class LRUEngineError(Exception):
    """Base exception for all lru-engine errors."""

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


def create_error_response(exception: LRUEngineError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The lru-engine exception

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
