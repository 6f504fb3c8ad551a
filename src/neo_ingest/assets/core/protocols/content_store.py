"""Content store protocol.

ONLY content storage contract - where committed file bytes live and how
derived artifacts (resized images, previews) are dropped when the content
they were made from is replaced.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Optional
from typing_extensions import Protocol, runtime_checkable

from ..value_objects import AssetId, AssetName, ContainerId, Visibility


@runtime_checkable
class ContentStore(Protocol):
    """Content store protocol.

    Implementations decide the physical layout; the ingestion core only
    needs to write bytes under (container, name, visibility), to remove
    content it wrote but could not commit, and to invalidate derived
    artifacts for a record.
    """

    async def write(
        self,
        container_id: Optional[ContainerId],
        name: AssetName,
        visibility: Visibility,
        content: bytes,
        replace: bool = True,
    ) -> str:
        """Write content and return its storage location.

        With ``replace`` an existing (container, name) has its bytes
        replaced. Without it the write is exclusive: an occupied location
        is left untouched and ContentConflict is raised.
        """
        ...

    async def delete(self, location: str) -> None:
        """Remove content at a location; a missing location is ignored."""
        ...

    async def invalidate_derived(self, asset_id: AssetId) -> None:
        """Drop every derived artifact produced from a record's content."""
        ...
