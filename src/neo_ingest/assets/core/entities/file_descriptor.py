"""File descriptor entity.

ONLY inbound file description - what the transport knows about a fully
received file: its declared name and size, the MIME hint, where the bytes
sit on local disk and how the transfer ended.

Following maximum separation architecture - one file = one purpose.
"""

import os
from dataclasses import dataclass, field
from typing import Optional, Union

from ..value_objects import AssetName, TransportStatus, normalize_extension


@dataclass(frozen=True)
class FileDescriptor:
    """Inbound file descriptor.

    Created by the caller from raw transport data and immutable once handed
    to the ingestion core. ``declared_size_bytes`` may be None, in which case
    validation reads the size of ``source_path``.
    """

    # Required fields (no defaults)
    declared_name: str
    source_path: str

    # Optional fields (with defaults)
    declared_size_bytes: Optional[int] = None
    mime_hint: str = "application/octet-stream"
    extension: Optional[str] = None
    transport_status: TransportStatus = TransportStatus.OK
    is_uploaded_file: bool = False
    asset_name: AssetName = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        """Validate descriptor and derive the logical name."""
        if not self.declared_name or not self.declared_name.strip():
            raise ValueError("Declared file name cannot be empty")

        if self.declared_size_bytes is not None and self.declared_size_bytes < 0:
            raise ValueError(f"Declared size cannot be negative: {self.declared_size_bytes}")

        if not isinstance(self.transport_status, TransportStatus):
            object.__setattr__(self, 'transport_status', TransportStatus(self.transport_status))

        # Only the final path component is a name; clients sometimes send paths
        name = os.path.basename(self.declared_name.replace("\\", "/"))
        object.__setattr__(self, 'asset_name', AssetName.parse(name, self.extension))

    @classmethod
    def from_path(
        cls,
        path: Union[str, os.PathLike],
        declared_name: Optional[str] = None,
        mime_hint: str = "application/octet-stream",
        extension: Optional[str] = None,
        is_uploaded_file: bool = False,
    ) -> 'FileDescriptor':
        """Describe a local file, reading its size from disk."""
        path = os.fspath(path)
        return cls(
            declared_name=declared_name or os.path.basename(path),
            source_path=path,
            declared_size_bytes=os.path.getsize(path),
            mime_hint=mime_hint,
            extension=extension,
            is_uploaded_file=is_uploaded_file,
        )

    @property
    def effective_extension(self) -> str:
        """Lower-cased extension used for policy checks.

        The declared extension is used when the name actually carries it,
        otherwise the extension is taken from the name itself.
        """
        return normalize_extension(self.asset_name.extension)

    def read_size(self) -> int:
        """Declared size, falling back to the size of the file on disk."""
        if self.declared_size_bytes is not None:
            return self.declared_size_bytes
        return os.path.getsize(self.source_path)
