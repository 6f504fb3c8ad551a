"""Asset record SQL query constants.

Centralized SQL queries for asset record persistence. All queries are
parameterized by schema.

The store root is stored as the empty container_id; names are unique per
container regardless of case.

Following maximum separation architecture - one file = one purpose.
"""

# Schema
ASSETS_CREATE_TABLE = """
    CREATE TABLE IF NOT EXISTS {schema}.assets (
        id BIGSERIAL PRIMARY KEY,
        container_id TEXT NOT NULL DEFAULT '',
        name_base TEXT NOT NULL,
        name_extension TEXT NOT NULL DEFAULT '',
        filename TEXT NOT NULL,
        forced_visibility TEXT,
        visibility TEXT,
        size_bytes BIGINT NOT NULL DEFAULT 0,
        mime_type TEXT,
        content_location TEXT,
        metadata JSONB NOT NULL DEFAULT '{{}}'::jsonb,
        created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
        updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
    )
"""

ASSETS_CREATE_NAME_INDEX = """
    CREATE UNIQUE INDEX IF NOT EXISTS assets_container_name_key
    ON {schema}.assets (container_id, lower(filename))
"""

# Lookups
ASSET_NAME_EXISTS = """
    SELECT EXISTS(
        SELECT 1 FROM {schema}.assets
        WHERE container_id = $1 AND lower(filename) = lower($2)
    )
"""

ASSET_GET_BY_NAME = """
    SELECT * FROM {schema}.assets
    WHERE container_id = $1 AND lower(filename) = lower($2)
"""

ASSET_GET_BY_ID = """
    SELECT * FROM {schema}.assets WHERE id = $1
"""

ASSET_GET_ID_BY_NAME = """
    SELECT id FROM {schema}.assets
    WHERE container_id = $1 AND lower(filename) = lower($2)
"""

# Writes
ASSET_INSERT = """
    INSERT INTO {schema}.assets (
        container_id, name_base, name_extension, filename, forced_visibility,
        visibility, size_bytes, mime_type, content_location, metadata,
        created_at, updated_at
    ) VALUES (
        $1, $2, $3, $4, $5, $6, $7, $8, $9, $10, $11, $12
    )
    RETURNING id
"""

ASSET_UPDATE = """
    UPDATE {schema}.assets SET
        container_id = $2,
        name_base = $3,
        name_extension = $4,
        filename = $5,
        forced_visibility = $6,
        visibility = $7,
        size_bytes = $8,
        mime_type = $9,
        content_location = $10,
        metadata = $11,
        updated_at = $12
    WHERE id = $1
    RETURNING id
"""
