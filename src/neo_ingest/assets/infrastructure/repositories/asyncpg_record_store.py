"""AsyncPG record store.

ONLY PostgreSQL record persistence - asset records in ``{schema}.assets``
with BIGSERIAL identities and a unique (container, name) index as the
authoritative guard against concurrent name claims.

Following maximum separation architecture - one file = one purpose.
"""

import json
import logging
from typing import Any, Optional

import asyncpg

from ....config.settings import get_settings
from ...core.entities.asset_record import AssetRecord, utc_now
from ...core.exceptions.record_conflict import RecordConflict
from ...core.exceptions.record_not_found import RecordNotFound
from ...core.value_objects import AssetId, AssetName, ContainerId, Visibility, VisibilityMode
from ..queries import (
    ASSETS_CREATE_TABLE,
    ASSETS_CREATE_NAME_INDEX,
    ASSET_NAME_EXISTS,
    ASSET_GET_BY_NAME,
    ASSET_GET_BY_ID,
    ASSET_GET_ID_BY_NAME,
    ASSET_INSERT,
    ASSET_UPDATE,
)


logger = logging.getLogger(__name__)


def _container_key(container_id: Optional[ContainerId]) -> str:
    return container_id.value if container_id else ""


class AsyncpgRecordStore:
    """PostgreSQL RecordStore.

    ``database`` is anything exposing asyncpg's ``fetchrow``/``fetchval``
    coroutines: an ``asyncpg.Pool``, a connection, or a database manager
    wrapping one.
    """

    def __init__(self, database: Any, schema: str = "public"):
        if not schema.replace("_", "").isalnum():
            raise ValueError(f"Invalid database schema name: {schema}")
        self._db = database
        self._schema = schema

    async def create_schema(self) -> None:
        """Create the assets table and its name index if missing."""
        await self._db.fetchval(ASSETS_CREATE_TABLE.format(schema=self._schema))
        await self._db.fetchval(ASSETS_CREATE_NAME_INDEX.format(schema=self._schema))
        logger.info(f"Ensured asset record table in schema '{self._schema}'")

    async def name_exists(self, container_id: Optional[ContainerId], name: AssetName) -> bool:
        query = ASSET_NAME_EXISTS.format(schema=self._schema)
        return bool(await self._db.fetchval(query, _container_key(container_id), name.filename))

    async def find_by_name(
        self,
        container_id: Optional[ContainerId],
        name: AssetName
    ) -> Optional[AssetRecord]:
        query = ASSET_GET_BY_NAME.format(schema=self._schema)
        row = await self._db.fetchrow(query, _container_key(container_id), name.filename)
        return self._row_to_record(row) if row else None

    async def get(self, asset_id: AssetId) -> Optional[AssetRecord]:
        query = ASSET_GET_BY_ID.format(schema=self._schema)
        row = await self._db.fetchrow(query, asset_id.value)
        return self._row_to_record(row) if row else None

    async def upsert(self, record: AssetRecord) -> AssetId:
        now = utc_now()
        values = (
            _container_key(record.container_id),
            record.name.base,
            record.name.extension,
            record.filename,
            record.visibility_mode.forced.value if record.visibility_mode.forced else None,
            record.visibility.value if record.visibility else None,
            record.size_bytes,
            record.mime_type,
            record.content_location,
            json.dumps(record.metadata),
        )

        try:
            if record.id is None:
                query = ASSET_INSERT.format(schema=self._schema)
                asset_id = await self._db.fetchval(query, *values, record.created_at, now)
                logger.debug(f"Created asset record {asset_id} for '{record.filename}'")
            else:
                query = ASSET_UPDATE.format(schema=self._schema)
                asset_id = await self._db.fetchval(query, record.id.value, *values, now)
                if asset_id is None:
                    raise RecordNotFound(
                        message=f"Asset record {record.id} does not exist",
                        asset_id=record.id
                    )
                logger.debug(f"Updated asset record {asset_id}")

        except asyncpg.UniqueViolationError as e:
            existing = await self._db.fetchval(
                ASSET_GET_ID_BY_NAME.format(schema=self._schema),
                _container_key(record.container_id),
                record.filename
            )
            raise RecordConflict(
                message=f"Name '{record.filename}' is already held in container {record.container_id}",
                name=record.name,
                container_id=record.container_id,
                existing_id=AssetId(existing) if existing else None
            ) from e

        return AssetId(asset_id)

    def _row_to_record(self, row: Any) -> AssetRecord:
        """Convert a database row to an AssetRecord."""
        metadata = row["metadata"]
        if isinstance(metadata, str):
            metadata = json.loads(metadata)

        forced = row["forced_visibility"]
        visibility = row["visibility"]

        return AssetRecord(
            id=AssetId(row["id"]),
            container_id=ContainerId(row["container_id"]) if row["container_id"] else None,
            name=AssetName(row["name_base"], row["name_extension"]),
            visibility_mode=VisibilityMode(Visibility(forced) if forced else None),
            visibility=Visibility(visibility) if visibility else None,
            size_bytes=row["size_bytes"],
            mime_type=row["mime_type"],
            content_location=row["content_location"],
            metadata=metadata or {},
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )


def create_asyncpg_record_store(database: Any, schema: Optional[str] = None) -> AsyncpgRecordStore:
    """Create PostgreSQL record store, defaulting the schema from settings."""
    if schema is None:
        schema = get_settings().database_schema
    return AsyncpgRecordStore(database, schema)
