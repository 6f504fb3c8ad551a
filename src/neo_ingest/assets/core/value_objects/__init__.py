"""Asset ingestion value objects.

Immutable value objects that encapsulate asset-related business rules
and provide type safety with validation.

Following maximum separation architecture - one value object per file.
"""

from .asset_id import AssetId
from .asset_name import AssetName, COMPOUND_EXTENSIONS, normalize_extension, split_extension
from .container_id import ContainerId
from .file_size import FileSize
from .transport_status import TransportStatus
from .visibility import AccessRule, Visibility, VisibilityMode

__all__ = [
    "AssetId",
    "AssetName",
    "COMPOUND_EXTENSIONS",
    "normalize_extension",
    "split_extension",
    "ContainerId",
    "FileSize",
    "TransportStatus",
    "AccessRule",
    "Visibility",
    "VisibilityMode",
]
