"""Category classifier protocol.

ONLY extension categorization contract - maps a file extension onto the
bracketed category tag used by size policies ("[image]", "[document]").

Following maximum separation architecture - one file = one purpose.
"""

from typing import Optional
from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class CategoryClassifier(Protocol):
    """Category classifier protocol."""

    def category_of(self, extension: str) -> Optional[str]:
        """Category tag for an extension, or None when uncategorized."""
        ...
