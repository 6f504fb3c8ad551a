"""Configuration module for neo-ingest.

Environment-driven settings and logging setup.
"""

from .logging_config import (
    setup_logging,
    get_logger,
    LogVerbosity,
    LogFormat,
    LoggingConfig,
)
from .settings import IngestSettings, get_settings, DEFAULT_ALLOWED_EXTENSIONS

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    "LogVerbosity",
    "LogFormat",
    "LoggingConfig",

    # Settings
    "IngestSettings",
    "get_settings",
    "DEFAULT_ALLOWED_EXTENSIONS",
]
