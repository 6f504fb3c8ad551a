"""Pytest configuration and fixtures for neo-ingest tests."""

import pytest
from pathlib import Path
from unittest.mock import AsyncMock

from neo_ingest.assets.core.entities import FileDescriptor
from neo_ingest.assets.core.value_objects import AccessRule, ContainerId
from neo_ingest.assets.application.validators import UploadValidator, UploadValidatorConfig
from neo_ingest.assets.application.services import NameResolver, VisibilityResolver
from neo_ingest.assets.application.commands import IngestFileCommand
from neo_ingest.assets.infrastructure.classifiers import ExtensionCategoryClassifier
from neo_ingest.assets.infrastructure.repositories import InMemoryContainerTree, InMemoryRecordStore
from neo_ingest.assets.infrastructure.storage import LocalContentStore


@pytest.fixture
def classifier():
    """Default extension category classifier."""
    return ExtensionCategoryClassifier()


@pytest.fixture
def validator(classifier):
    """Validator with no limits and no allow-list."""
    return UploadValidator(UploadValidatorConfig(), classifier)


@pytest.fixture
def incoming_dir(tmp_path):
    """Directory holding received files."""
    path = tmp_path / "incoming"
    path.mkdir()
    return path


@pytest.fixture
def make_upload(incoming_dir):
    """Factory writing a received file and describing it."""
    def _make(name: str, content: bytes = b"content", **kwargs) -> FileDescriptor:
        path = incoming_dir / name
        path.write_bytes(content)
        return FileDescriptor.from_path(path, **kwargs)
    return _make


@pytest.fixture
def record_store():
    return InMemoryRecordStore()


@pytest.fixture
def container_tree():
    """Container tree with a public, a members-only and a nested inheriting container."""
    tree = InMemoryContainerTree()
    tree.add("Uploads", AccessRule.ANYONE)
    tree.add("Members", AccessRule.LOGGED_IN_USERS)
    tree.add("Members/Reports", AccessRule.INHERIT, parent="Members")
    return tree


@pytest.fixture
def content_store(tmp_path):
    return LocalContentStore(tmp_path / "assets")


@pytest.fixture
def uploads():
    return ContainerId("Uploads")


@pytest.fixture
def members():
    return ContainerId("Members")


@pytest.fixture
def command(validator, record_store, container_tree, content_store):
    """Ingest command over in-memory stores and a local content store."""
    return IngestFileCommand(
        validator=validator,
        name_resolver=NameResolver(version_prefix="-v"),
        visibility_resolver=VisibilityResolver(container_tree),
        record_store=record_store,
        content_store=content_store,
    )


@pytest.fixture
def mock_record_store():
    """Mock record store where every name is free."""
    store = AsyncMock()
    store.name_exists = AsyncMock(return_value=False)
    store.find_by_name = AsyncMock(return_value=None)
    store.upsert = AsyncMock()
    return store


@pytest.fixture
def mock_content_store():
    store = AsyncMock()
    store.write = AsyncMock(return_value="Uploads/file.txt")
    store.invalidate_derived = AsyncMock()
    store.delete = AsyncMock()
    return store


@pytest.fixture
def mock_database():
    """Mock asyncpg pool / database manager."""
    db = AsyncMock()
    db.fetchrow = AsyncMock()
    db.fetchval = AsyncMock()
    return db
