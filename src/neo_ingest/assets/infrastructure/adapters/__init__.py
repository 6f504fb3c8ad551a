"""Web framework adapters.

Following maximum separation architecture - one file = one purpose.
"""

from .fastapi_upload import descriptor_from_upload

__all__ = [
    "descriptor_from_upload",
]
