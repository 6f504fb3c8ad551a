"""Asset ingestion core domain layer.

Clean core containing only value objects, entities, exceptions and
collaborator contracts. No business logic or external dependencies.

Following maximum separation architecture - one file = one purpose.
"""

from .value_objects import *
from .entities import *
from .exceptions import *
from .protocols import *

__all__ = [
    # Value Objects
    "AssetId",
    "AssetName",
    "ContainerId",
    "FileSize",
    "TransportStatus",
    "AccessRule",
    "Visibility",
    "VisibilityMode",

    # Entities
    "FileDescriptor",
    "AssetRecord",
    "ValidationErrorKind",
    "ValidationMessage",
    "ValidationResult",

    # Exceptions
    "NameResolutionExhausted",
    "VisibilityCycleDetected",
    "RecordConflict",
    "ContentConflict",
    "RecordNotFound",

    # Protocols
    "ContentStore",
    "RecordStore",
    "CategoryClassifier",
    "ContainerTree",
]
