"""Asset content storage implementations.

Following maximum separation architecture - one file = one purpose.
"""

from .local_content_store import LocalContentStore, create_local_content_store

__all__ = [
    "LocalContentStore",
    "create_local_content_store",
]
