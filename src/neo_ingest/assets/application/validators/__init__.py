"""Asset ingestion validators.

Upload validation and the size and extension policies it applies.

Following maximum separation architecture - one file = one purpose.
"""

from .size_policy import (
    SizePolicy,
    SizeLimit,
    SizeConfig,
    SelectorTier,
    SIZE_LOOKUP_TIERS,
    WILDCARD,
    normalize_selector,
)
from .extension_policy import ExtensionPolicy
from .upload_validator import (
    UploadValidator,
    UploadValidatorConfig,
    create_upload_validator,
    MESSAGE_TOO_LARGE,
    MESSAGE_TOO_LARGE_SHORT,
    MESSAGE_TOO_LARGE_UNKNOWN,
    MESSAGE_NOT_VALID_UPLOAD,
    MESSAGE_PARTIAL_UPLOAD,
    MESSAGE_ZERO_SIZE,
    MESSAGE_EXTENSION_NOT_ALLOWED,
)

__all__ = [
    # Policies
    "SizePolicy",
    "SizeLimit",
    "SizeConfig",
    "SelectorTier",
    "SIZE_LOOKUP_TIERS",
    "WILDCARD",
    "normalize_selector",
    "ExtensionPolicy",

    # Validator
    "UploadValidator",
    "UploadValidatorConfig",
    "create_upload_validator",

    # Messages
    "MESSAGE_TOO_LARGE",
    "MESSAGE_TOO_LARGE_SHORT",
    "MESSAGE_TOO_LARGE_UNKNOWN",
    "MESSAGE_NOT_VALID_UPLOAD",
    "MESSAGE_PARTIAL_UPLOAD",
    "MESSAGE_ZERO_SIZE",
    "MESSAGE_EXTENSION_NOT_ALLOWED",
]
