"""Asset ingestion entities.

Following maximum separation architecture - one file = one purpose.
"""

from .file_descriptor import FileDescriptor
from .asset_record import AssetRecord
from .validation_result import ValidationErrorKind, ValidationMessage, ValidationResult

__all__ = [
    "FileDescriptor",
    "AssetRecord",
    "ValidationErrorKind",
    "ValidationMessage",
    "ValidationResult",
]
