"""Content conflict exception.

ONLY exclusive write conflict - raised by content stores when content is
written for a new name whose storage location is already occupied. Usually
another ingestion claimed the same name first.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any, Dict, Optional

from ....core.exceptions import NeoIngestError


class ContentConflict(NeoIngestError):
    """Raised when an exclusive content write finds its location occupied."""

    http_status_code = 409
    retryable = True

    def __init__(
        self,
        message: str,
        location: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        enhanced_details = details or {}
        if location is not None:
            enhanced_details["location"] = location

        super().__init__(
            message=message,
            error_code="CONTENT_CONFLICT",
            details=enhanced_details
        )

        self.location = location
