"""Record conflict exception.

ONLY uniqueness conflict - raised by record stores when committing a record
would violate the (container, name) uniqueness guard. Usually the result of
a concurrent ingestion claiming the same name; retrying resolves it.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any, Dict, Optional

from ....core.exceptions import NeoIngestError
from ..value_objects import AssetId, AssetName, ContainerId


class RecordConflict(NeoIngestError):
    """Raised when a record's name is already held in its container."""

    http_status_code = 409
    retryable = True

    def __init__(
        self,
        message: str,
        name: Optional[AssetName] = None,
        container_id: Optional[ContainerId] = None,
        existing_id: Optional[AssetId] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        enhanced_details = details or {}
        if name is not None:
            enhanced_details["name"] = name.filename
        if container_id is not None:
            enhanced_details["container_id"] = str(container_id)
        if existing_id is not None:
            enhanced_details["existing_id"] = existing_id.value

        super().__init__(
            message=message,
            error_code="RECORD_CONFLICT",
            details=enhanced_details
        )

        self.name = name
        self.container_id = container_id
        self.existing_id = existing_id
