"""Asset ingestion core exceptions.

Domain-specific exceptions for ingestion failures that cannot be reported as
validation errors. Validation problems never raise; they are collected in a
ValidationResult.

Following maximum separation architecture - one file = one purpose.
"""

from .name_resolution_exhausted import NameResolutionExhausted
from .visibility_cycle_detected import VisibilityCycleDetected
from .record_conflict import RecordConflict
from .content_conflict import ContentConflict
from .record_not_found import RecordNotFound

__all__ = [
    "NameResolutionExhausted",
    "VisibilityCycleDetected",
    "RecordConflict",
    "ContentConflict",
    "RecordNotFound",
]
