"""Asset ingestion services.

Name and visibility resolution used while committing an ingested file.

Following maximum separation architecture - one file = one purpose.
"""

from .name_resolver import NameCandidates, NameResolver, create_name_resolver
from .visibility_resolver import VisibilityResolver, create_visibility_resolver

__all__ = [
    "NameCandidates",
    "NameResolver",
    "create_name_resolver",
    "VisibilityResolver",
    "create_visibility_resolver",
]
