"""Local content store.

ONLY local filesystem content storage - writes committed asset bytes under a
root directory, keeping protected content apart from public content, and
drops derived artifacts on request.

Layout::

    {root}/{container}/{name}                 public content
    {root}/.protected/{container}/{name}      protected content
    {root}/.derived/{asset_id}/{variant}      derived artifacts

Following maximum separation architecture - one file = one purpose.
"""

import asyncio
import logging
import os
import shutil
from pathlib import Path
from typing import List, Optional, Union

from ....config.settings import IngestSettings, get_settings
from ....core.exceptions import ConfigurationError
from ...core.exceptions.content_conflict import ContentConflict
from ...core.value_objects import AssetId, AssetName, ContainerId, Visibility


logger = logging.getLogger(__name__)


class LocalContentStore:
    """Filesystem ContentStore.

    Writing a name in one visibility tier removes any copy of it left in the
    other tier, so content that changes visibility never stays reachable at
    its old location. Returned locations are root-relative POSIX paths.
    """

    def __init__(
        self,
        root: Union[str, os.PathLike],
        protected_directory: str = ".protected",
        derived_directory: str = ".derived"
    ):
        """Initialize local content store.

        Args:
            root: Storage root directory (created on first write)
            protected_directory: Root-level directory for protected content
            derived_directory: Root-level directory for derived artifacts

        Raises:
            ConfigurationError: If the special directories are unusable
        """
        for directory in (protected_directory, derived_directory):
            if not directory or "/" in directory or "\\" in directory or directory in (".", ".."):
                raise ConfigurationError(f"Invalid storage directory name: {directory!r}")
        if protected_directory == derived_directory:
            raise ConfigurationError("Protected and derived directories must differ")

        self._root = Path(root).resolve()
        self._protected_directory = protected_directory
        self._derived_directory = derived_directory

    @property
    def root(self) -> Path:
        return self._root

    def location_for(
        self,
        container_id: Optional[ContainerId],
        name: AssetName,
        visibility: Visibility
    ) -> str:
        """Root-relative location of a name in a visibility tier."""
        parts: List[str] = []
        if visibility is Visibility.PROTECTED:
            parts.append(self._protected_directory)
        if container_id is not None:
            parts.append(container_id.value)
        parts.append(name.filename)
        return "/".join(parts)

    def path_for(self, location: str) -> Path:
        """Absolute path of a location.

        Raises:
            ValueError: If the location escapes the storage root
        """
        path = (self._root / location).resolve()
        if path == self._root or self._root not in path.parents:
            raise ValueError(f"Location escapes storage root: {location!r}")
        return path

    async def write(
        self,
        container_id: Optional[ContainerId],
        name: AssetName,
        visibility: Visibility,
        content: bytes,
        replace: bool = True,
    ) -> str:
        """Write content under (container, name, visibility).

        A replacing write also removes the copy of the name left in the other
        visibility tier. An exclusive write (``replace=False``) leaves existing
        files in both tiers untouched.

        Raises:
            ContentConflict: If an exclusive write finds the location occupied
        """
        location = self.location_for(container_id, name, visibility)
        stale = None
        if replace:
            other = Visibility.PUBLIC if visibility is Visibility.PROTECTED else Visibility.PROTECTED
            stale = self.path_for(self.location_for(container_id, name, other))

        try:
            await asyncio.to_thread(self._write_file, self.path_for(location), content, stale, not replace)
        except FileExistsError as e:
            raise ContentConflict(
                message=f"Location '{location}' already holds content",
                location=location
            ) from e

        logger.debug(f"Wrote {len(content)} bytes to {location}")
        return location

    async def delete(self, location: str) -> None:
        path = self.path_for(location)
        await asyncio.to_thread(path.unlink, missing_ok=True)
        logger.debug(f"Deleted {location}")

    async def read(self, location: str) -> bytes:
        return await asyncio.to_thread(self.path_for(location).read_bytes)

    async def exists(self, location: str) -> bool:
        return await asyncio.to_thread(self.path_for(location).is_file)

    async def write_derived(self, asset_id: AssetId, variant: str, content: bytes) -> str:
        """Store a derived artifact (a resized image, a preview) for a record."""
        location = f"{self._derived_directory}/{asset_id.value}/{variant}"
        await asyncio.to_thread(self._write_file, self.path_for(location), content, None, False)
        return location

    async def list_derived(self, asset_id: AssetId) -> List[str]:
        directory = self._derived_path(asset_id)

        def _list() -> List[str]:
            if not directory.is_dir():
                return []
            return sorted(item.name for item in directory.iterdir())

        return await asyncio.to_thread(_list)

    async def invalidate_derived(self, asset_id: AssetId) -> None:
        directory = self._derived_path(asset_id)
        removed = await asyncio.to_thread(self._remove_tree, directory)
        if removed:
            logger.debug(f"Invalidated derived artifacts of asset {asset_id}")

    def _derived_path(self, asset_id: AssetId) -> Path:
        return self.path_for(f"{self._derived_directory}/{asset_id.value}")

    @staticmethod
    def _write_file(path: Path, content: bytes, stale: Optional[Path], exclusive: bool) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "xb" if exclusive else "wb") as target:
            target.write(content)
        if stale is not None and stale.is_file():
            stale.unlink()

    @staticmethod
    def _remove_tree(directory: Path) -> bool:
        if not directory.is_dir():
            return False
        shutil.rmtree(directory)
        return True


def create_local_content_store(
    settings: Optional[IngestSettings] = None,
    root: Optional[Union[str, os.PathLike]] = None
) -> LocalContentStore:
    """Create local content store from ingestion settings."""
    settings = settings or get_settings()
    return LocalContentStore(
        root=root if root is not None else settings.storage_root,
        protected_directory=settings.protected_directory,
        derived_directory=settings.derived_directory,
    )
