"""Tests for the FastAPI upload adapter."""

import io
import pytest
from unittest.mock import AsyncMock

from fastapi import UploadFile
from starlette.datastructures import Headers

from neo_ingest.assets.core.value_objects import TransportStatus
from neo_ingest.assets.infrastructure.adapters import descriptor_from_upload


def make_upload_file(content, filename="hello.txt", size=None, content_type="text/plain"):
    return UploadFile(
        file=io.BytesIO(content),
        filename=filename,
        size=len(content) if size is None else size,
        headers=Headers({"content-type": content_type}),
    )


class TestDescriptorFromUpload:
    """Test spooling UploadFile objects into descriptors."""

    @pytest.mark.asyncio
    async def test_spools_upload(self, tmp_path):
        """Test spooling an upload to disk."""
        upload = make_upload_file(b"hello world")

        descriptor = await descriptor_from_upload(upload, spool_dir=tmp_path, chunk_size=4)

        assert descriptor.declared_name == "hello.txt"
        assert descriptor.declared_size_bytes == 11
        assert descriptor.mime_hint == "text/plain"
        assert descriptor.is_uploaded_file is True
        assert descriptor.transport_status is TransportStatus.OK
        assert descriptor.effective_extension == "txt"
        with open(descriptor.source_path, "rb") as spooled:
            assert spooled.read() == b"hello world"

    @pytest.mark.asyncio
    async def test_missing_filename(self, tmp_path):
        """Test that an upload without a filename has no file."""
        descriptor = await descriptor_from_upload(make_upload_file(b"x", filename=None), spool_dir=tmp_path)

        assert descriptor.transport_status is TransportStatus.NO_FILE

    @pytest.mark.asyncio
    async def test_short_body_is_partial(self, tmp_path):
        """Test that a body shorter than announced is a partial upload."""
        descriptor = await descriptor_from_upload(make_upload_file(b"abc", size=10), spool_dir=tmp_path)

        assert descriptor.transport_status is TransportStatus.PARTIAL_UPLOAD

    @pytest.mark.asyncio
    async def test_path_in_filename_is_dropped(self, tmp_path):
        """Test that client paths are stripped from filenames."""
        descriptor = await descriptor_from_upload(
            make_upload_file(b"x", filename="C:\\Users\\me\\photo.JPG"), spool_dir=tmp_path
        )

        assert descriptor.asset_name.filename == "photo.JPG"
        assert descriptor.effective_extension == "jpg"

    @pytest.mark.asyncio
    async def test_failed_read_removes_spool_file(self, tmp_path):
        """Test that a body read failure leaves no spooled file behind."""
        upload = make_upload_file(b"hello")
        upload.read = AsyncMock(side_effect=OSError("connection reset"))

        with pytest.raises(OSError):
            await descriptor_from_upload(upload, spool_dir=tmp_path)

        assert list(tmp_path.iterdir()) == []
