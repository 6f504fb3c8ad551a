"""Shared core for neo-ingest: base exception hierarchy."""

from .exceptions import *

__all__ = [
    "NeoIngestError",
    "ConfigurationError",
    "get_http_status_code",
    "create_error_response",
]
