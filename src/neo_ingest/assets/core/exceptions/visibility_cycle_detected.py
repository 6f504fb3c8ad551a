"""Visibility cycle detected exception.

ONLY container cycle - raised when walking a container's parents for
visibility inheritance revisits a container.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any, Dict, List, Optional

from ....core.exceptions import NeoIngestError
from ..value_objects import ContainerId


class VisibilityCycleDetected(NeoIngestError):
    """Raised when the container graph is not a tree."""

    http_status_code = 500

    def __init__(
        self,
        message: str,
        container_id: Optional[ContainerId] = None,
        chain: Optional[List[ContainerId]] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        enhanced_details = details or {}
        if container_id is not None:
            enhanced_details["container_id"] = str(container_id)
        if chain:
            enhanced_details["chain"] = [str(item) for item in chain]

        super().__init__(
            message=message,
            error_code="VISIBILITY_CYCLE_DETECTED",
            details=enhanced_details
        )

        self.container_id = container_id
        self.chain = list(chain or [])
