"""Asset ingestion commands.

Write operations of the ingestion pipeline.

Following maximum separation architecture - one file = one purpose.
"""

from .ingest_file import (
    IngestFileCommand,
    IngestFileData,
    IngestFileResult,
    IngestionState,
    create_ingest_file_command,
)

__all__ = [
    "IngestFileCommand",
    "IngestFileData",
    "IngestFileResult",
    "IngestionState",
    "create_ingest_file_command",
]
