"""In-memory record store.

ONLY process-local record persistence - keeps asset records in a dict,
issues increasing integer identities and enforces (container, name)
uniqueness. Used for tests and single-process tooling.

Following maximum separation architecture - one file = one purpose.
"""

import asyncio
import copy
import itertools
import logging
from typing import Dict, List, Optional, Tuple

from ...core.entities.asset_record import AssetRecord, utc_now
from ...core.exceptions.record_conflict import RecordConflict
from ...core.exceptions.record_not_found import RecordNotFound
from ...core.value_objects import AssetId, AssetName, ContainerId


logger = logging.getLogger(__name__)


NameKey = Tuple[Optional[str], str]


def _name_key(container_id: Optional[ContainerId], name: AssetName) -> NameKey:
    return (container_id.value if container_id else None, name.filename.lower())


class InMemoryRecordStore:
    """Dict-backed RecordStore.

    Stored records are copies; callers never share state with the store.
    """

    def __init__(self, start_id: int = 1):
        self._records: Dict[AssetId, AssetRecord] = {}
        self._names: Dict[NameKey, AssetId] = {}
        self._ids = itertools.count(start_id)
        self._lock = asyncio.Lock()

    async def name_exists(self, container_id: Optional[ContainerId], name: AssetName) -> bool:
        return _name_key(container_id, name) in self._names

    async def find_by_name(
        self,
        container_id: Optional[ContainerId],
        name: AssetName
    ) -> Optional[AssetRecord]:
        asset_id = self._names.get(_name_key(container_id, name))
        if asset_id is None:
            return None
        return copy.deepcopy(self._records[asset_id])

    async def get(self, asset_id: AssetId) -> Optional[AssetRecord]:
        record = self._records.get(asset_id)
        return copy.deepcopy(record) if record is not None else None

    async def list_records(self, container_id: Optional[ContainerId] = None) -> List[AssetRecord]:
        """Records in a container ordered by identity (creation order)."""
        return [
            copy.deepcopy(record)
            for asset_id, record in sorted(self._records.items())
            if record.container_id == container_id
        ]

    async def upsert(self, record: AssetRecord) -> AssetId:
        async with self._lock:
            key = _name_key(record.container_id, record.name)
            holder = self._names.get(key)
            if holder is not None and holder != record.id:
                raise RecordConflict(
                    message=f"Name '{record.filename}' is already held in container {record.container_id}",
                    name=record.name,
                    container_id=record.container_id,
                    existing_id=holder
                )

            if record.id is None:
                asset_id = AssetId(next(self._ids))
                logger.debug(f"Created asset record {asset_id} for '{record.filename}'")
            else:
                asset_id = record.id
                previous = self._records.get(asset_id)
                if previous is None:
                    raise RecordNotFound(
                        message=f"Asset record {asset_id} does not exist",
                        asset_id=asset_id
                    )
                self._names.pop(_name_key(previous.container_id, previous.name), None)
                logger.debug(f"Updated asset record {asset_id}")

            stored = copy.deepcopy(record)
            stored.id = asset_id
            stored.updated_at = utc_now()
            self._records[asset_id] = stored
            self._names[key] = asset_id
            return asset_id

    def __len__(self) -> int:
        return len(self._records)


def create_in_memory_record_store(start_id: int = 1) -> InMemoryRecordStore:
    """Create in-memory record store."""
    return InMemoryRecordStore(start_id)
