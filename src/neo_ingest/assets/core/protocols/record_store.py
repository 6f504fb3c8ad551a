"""Record store protocol.

ONLY asset metadata persistence contract - name lookups within a container
and record upserts. The store owns identity assignment and the authoritative
(container, name) uniqueness guard.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Optional
from typing_extensions import Protocol, runtime_checkable

from ..entities.asset_record import AssetRecord
from ..value_objects import AssetId, AssetName, ContainerId


@runtime_checkable
class RecordStore(Protocol):
    """Record store protocol."""

    async def name_exists(self, container_id: Optional[ContainerId], name: AssetName) -> bool:
        """Check whether a record already holds this name in the container.

        Names compare case-insensitively.
        """
        ...

    async def find_by_name(
        self,
        container_id: Optional[ContainerId],
        name: AssetName
    ) -> Optional[AssetRecord]:
        """Get the record holding this name in the container, if any."""
        ...

    async def upsert(self, record: AssetRecord) -> AssetId:
        """Create or update a record.

        Records without an identity are created and receive a new identity
        greater than any identity issued before. Records with an identity
        are updated in place and keep it.

        Raises:
            RecordConflict: another record already holds the name
        """
        ...
