"""Asset record entity.

ONLY asset metadata record - the logical name, owning container, visibility
setting and content facts of an ingested file. Identity is assigned by the
record store on creation and preserved on every later update.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Dict, Any

from ..value_objects import AssetId, AssetName, ContainerId, Visibility, VisibilityMode


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class AssetRecord:
    """Asset metadata record.

    Records reference their container by handle only. ``id`` stays None
    until a record store has created the record.
    """

    # Required fields
    name: AssetName

    # Ownership and identity
    container_id: Optional[ContainerId] = None
    id: Optional[AssetId] = None

    # Access
    visibility_mode: VisibilityMode = field(default_factory=VisibilityMode.inherit)
    visibility: Optional[Visibility] = None

    # Content facts
    size_bytes: int = 0
    mime_type: Optional[str] = None
    content_location: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    # Audit fields
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def __post_init__(self):
        """Validate entity state after initialization."""
        if self.size_bytes < 0:
            raise ValueError("Asset size cannot be negative")

    @property
    def is_new(self) -> bool:
        """True until a record store has assigned an identity."""
        return self.id is None

    @property
    def filename(self) -> str:
        return self.name.filename

    def apply_content(
        self,
        name: AssetName,
        visibility: Visibility,
        size_bytes: int,
        mime_type: Optional[str],
        location: str,
    ) -> None:
        """Point the record at freshly committed content."""
        self.name = name
        self.visibility = visibility
        self.size_bytes = size_bytes
        self.mime_type = mime_type
        self.content_location = location
        self.updated_at = utc_now()

    def assign_identity(self, asset_id: AssetId) -> None:
        """Record the identity returned by the record store.

        A record that already has an identity must keep it.
        """
        if self.id is not None and self.id != asset_id:
            raise ValueError(f"Record {self.id} cannot change identity to {asset_id}")
        self.id = asset_id

    def __str__(self) -> str:
        location = f"{self.container_id}/" if self.container_id else ""
        return f"AssetRecord({self.id}, {location}{self.filename})"
