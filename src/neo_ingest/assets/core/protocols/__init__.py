"""Asset ingestion core protocols.

Contracts for the external collaborators the ingestion core calls.

Following maximum separation architecture - one file = one purpose.
"""

from .content_store import ContentStore
from .record_store import RecordStore
from .category_classifier import CategoryClassifier
from .container_tree import ContainerTree

__all__ = [
    "ContentStore",
    "RecordStore",
    "CategoryClassifier",
    "ContainerTree",
]
