"""Base exceptions for neo-ingest.

This module defines the base exception hierarchy for the neo-ingest library.
All exceptions inherit from NeoIngestError and include error codes, details,
a retryable flag and HTTP status code mappings for API responses.
"""

from typing import Any, Dict, Optional


class NeoIngestError(Exception):
    """Base exception for all neo-ingest errors.

    Carries structured error information so callers fronting the library
    with an API can build consistent error responses.
    """

    http_status_code: int = 500
    retryable: bool = False

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


class ConfigurationError(NeoIngestError):
    """Raised when there's a configuration issue."""
    pass


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for an exception.

    Args:
        exception: The exception instance

    Returns:
        HTTP status code (500 for anything outside the neo-ingest hierarchy)
    """
    if isinstance(exception, NeoIngestError):
        return exception.http_status_code
    return 500


def create_error_response(exception: NeoIngestError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The neo-ingest exception

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
            "retryable": exception.retryable,
        }
    }
