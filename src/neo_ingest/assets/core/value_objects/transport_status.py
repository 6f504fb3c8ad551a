"""Transport status value object.

ONLY transport outcome - the status the transport layer reported for a
received file before it reaches the ingestion core.

Following maximum separation architecture - one file = one purpose.
"""

from enum import Enum


class TransportStatus(Enum):
    """Outcome reported by the transport for an inbound file."""

    OK = "ok"
    SIZE_EXCEEDED = "size_exceeded"            # Server-wide upload limit hit
    FORM_SIZE_EXCEEDED = "form_size_exceeded"  # Client-declared form limit hit
    NO_FILE = "no_file"
    NO_TEMP_DIR = "no_temp_dir"
    CANT_WRITE = "cant_write"
    PARTIAL_UPLOAD = "partial_upload"

    @property
    def is_ok(self) -> bool:
        return self is TransportStatus.OK

    @property
    def is_size_error(self) -> bool:
        return self in (TransportStatus.SIZE_EXCEEDED, TransportStatus.FORM_SIZE_EXCEEDED)
