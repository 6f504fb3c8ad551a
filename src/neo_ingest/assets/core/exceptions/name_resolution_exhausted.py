"""Name resolution exhausted exception.

ONLY name exhaustion - raised when no free logical name was found within the
configured number of candidates. This signals an internal consistency
problem (a runaway collision loop), not a user error.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any, Dict, Optional

from ....core.exceptions import NeoIngestError
from ..value_objects import AssetName, ContainerId


class NameResolutionExhausted(NeoIngestError):
    """Raised when every candidate name in a container was taken."""

    http_status_code = 500

    def __init__(
        self,
        message: str,
        requested_name: Optional[AssetName] = None,
        container_id: Optional[ContainerId] = None,
        attempts: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        enhanced_details = details or {}
        if requested_name is not None:
            enhanced_details["requested_name"] = requested_name.filename
        if container_id is not None:
            enhanced_details["container_id"] = str(container_id)
        if attempts is not None:
            enhanced_details["attempts"] = attempts

        super().__init__(
            message=message,
            error_code="NAME_RESOLUTION_EXHAUSTED",
            details=enhanced_details
        )

        self.requested_name = requested_name
        self.container_id = container_id
        self.attempts = attempts
