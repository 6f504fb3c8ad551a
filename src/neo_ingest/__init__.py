"""Neo-Ingest - file ingestion pipeline for uploaded assets.

Validates received files against size and extension policies, resolves
collision-free names and effective visibility, and commits content and
metadata records through pluggable stores.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

# Configuration
from .config import (
    IngestSettings,
    get_settings,
    get_logger,
    LogVerbosity,
    LogFormat,
)

from .core.exceptions import (
    # Base Exception
    NeoIngestError,
    ConfigurationError,

    # Utility Functions
    get_http_status_code,
    create_error_response,
)

from .assets.core import (
    # Value Objects
    AssetId,
    AssetName,
    ContainerId,
    FileSize,
    TransportStatus,
    AccessRule,
    Visibility,
    VisibilityMode,

    # Entities
    FileDescriptor,
    AssetRecord,
    ValidationErrorKind,
    ValidationMessage,
    ValidationResult,

    # Exceptions
    NameResolutionExhausted,
    VisibilityCycleDetected,
    RecordConflict,
    ContentConflict,
    RecordNotFound,

    # Protocols
    ContentStore,
    RecordStore,
    CategoryClassifier,
    ContainerTree,
)

from .assets.application import (
    # Validation
    SizePolicy,
    ExtensionPolicy,
    UploadValidator,
    UploadValidatorConfig,
    create_upload_validator,

    # Resolution
    NameCandidates,
    NameResolver,
    create_name_resolver,
    VisibilityResolver,

    # Ingestion
    IngestFileCommand,
    IngestFileData,
    IngestFileResult,
    IngestionState,
    create_ingest_file_command,
)

from .assets.infrastructure import (
    ExtensionCategoryClassifier,
    AsyncpgRecordStore,
    InMemoryRecordStore,
    InMemoryContainerTree,
    LocalContentStore,
)

__all__ = [
    "__version__",

    # Configuration
    "IngestSettings",
    "get_settings",
    "get_logger",
    "LogVerbosity",
    "LogFormat",

    # Exceptions
    "NeoIngestError",
    "ConfigurationError",
    "get_http_status_code",
    "create_error_response",
    "NameResolutionExhausted",
    "VisibilityCycleDetected",
    "RecordConflict",
    "ContentConflict",
    "RecordNotFound",

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

    # Protocols
    "ContentStore",
    "RecordStore",
    "CategoryClassifier",
    "ContainerTree",

    # Validation
    "SizePolicy",
    "ExtensionPolicy",
    "UploadValidator",
    "UploadValidatorConfig",
    "create_upload_validator",

    # Resolution
    "NameCandidates",
    "NameResolver",
    "create_name_resolver",
    "VisibilityResolver",

    # Ingestion
    "IngestFileCommand",
    "IngestFileData",
    "IngestFileResult",
    "IngestionState",
    "create_ingest_file_command",

    # Infrastructure
    "ExtensionCategoryClassifier",
    "AsyncpgRecordStore",
    "InMemoryRecordStore",
    "InMemoryContainerTree",
    "LocalContentStore",
]
