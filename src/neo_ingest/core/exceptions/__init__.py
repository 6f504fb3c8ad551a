"""Core exceptions for neo-ingest."""

from .base import (
    NeoIngestError,
    ConfigurationError,
    get_http_status_code,
    create_error_response,
)

__all__ = [
    "NeoIngestError",
    "ConfigurationError",
    "get_http_status_code",
    "create_error_response",
]
