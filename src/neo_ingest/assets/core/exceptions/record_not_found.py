"""Record not found exception.

ONLY missing record - raised by record stores when asked to update a record
whose identity they never issued or no longer hold.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any, Dict, Optional

from ....core.exceptions import NeoIngestError
from ..value_objects import AssetId


class RecordNotFound(NeoIngestError):
    """Raised when a record identity is unknown to the store."""

    http_status_code = 404

    def __init__(
        self,
        message: str,
        asset_id: Optional[AssetId] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        enhanced_details = details or {}
        if asset_id is not None:
            enhanced_details["asset_id"] = asset_id.value

        super().__init__(
            message=message,
            error_code="RECORD_NOT_FOUND",
            details=enhanced_details
        )

        self.asset_id = asset_id
