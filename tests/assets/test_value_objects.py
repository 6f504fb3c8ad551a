"""Tests for asset value objects and entities."""

import pytest

from neo_ingest.assets.core.entities import AssetRecord, FileDescriptor
from neo_ingest.assets.core.value_objects import (
    AssetId,
    AssetName,
    ContainerId,
    TransportStatus,
    split_extension,
)


class TestAssetName:
    """Test name and extension splitting."""

    @pytest.mark.parametrize("filename,expected", [
        ("report.pdf", ("report", "pdf")),
        ("archive.tar.gz", ("archive", "tar.gz")),
        ("ARCHIVE.TAR.GZ", ("ARCHIVE", "TAR.GZ")),
        ("my.report.v1.pdf", ("my.report.v1", "pdf")),
        ("README", ("README", "")),
        (".env", (".env", "")),
        ("trailing.", ("trailing.", "")),
        ("tar.gz", ("tar", "gz")),
    ])
    def test_split_extension(self, filename, expected):
        """Test splitting names into base and extension."""
        assert split_extension(filename) == expected

    def test_declared_extension_used_when_name_carries_it(self):
        """Test using a declared extension the name carries."""
        name = AssetName.parse("backup.2024.custom", "2024.custom")

        assert name.base == "backup"
        assert name.extension == "2024.custom"

    def test_declared_extension_ignored_when_name_lacks_it(self):
        """Test ignoring a declared extension the name lacks."""
        assert AssetName.parse("photo.jpg", "png") == AssetName("photo", "jpg")

    def test_explicit_empty_extension_keeps_whole_name(self):
        """Test an explicit empty extension."""
        assert AssetName.parse("v1.2", "") == AssetName("v1.2", "")

    def test_filename_and_with_base(self):
        """Test building filenames from base and extension."""
        name = AssetName.parse("report.tar.gz")

        assert name.with_base("report-v2").filename == "report-v2.tar.gz"
        assert name.normalized_extension == "tar.gz"
        assert AssetName("README").filename == "README"

    @pytest.mark.parametrize("base", ["", "   ", "a/b", "a\\b"])
    def test_invalid_names(self, base):
        """Test rejecting invalid names."""
        with pytest.raises(ValueError):
            AssetName(base, "txt")


class TestIdentifiers:
    """Test asset and container identifiers."""

    def test_asset_ids_are_ordered(self):
        """Test ordering asset identities."""
        assert AssetId(1) < AssetId(2)
        assert AssetId.from_value("12") == AssetId(12)

    @pytest.mark.parametrize("value", [0, -1, "x", True])
    def test_invalid_asset_ids(self, value):
        """Test rejecting invalid asset identities."""
        with pytest.raises(ValueError):
            AssetId.from_value(value) if isinstance(value, str) else AssetId(value)

    def test_container_id_is_normalized(self):
        """Test container identifier normalisation."""
        assert ContainerId("/Uploads/2024/").value == "Uploads/2024"

    @pytest.mark.parametrize("value", ["", "/", "../etc", "a/../b", "a//b", ".hidden"])
    def test_invalid_container_ids(self, value):
        """Test rejecting invalid container identifiers."""
        with pytest.raises(ValueError):
            ContainerId(value)


class TestEntities:
    """Test descriptor and record entities."""

    def test_descriptor_uses_basename(self):
        """Test that descriptors keep only the basename."""
        descriptor = FileDescriptor(declared_name="some/dir/Photo.JPG", source_path="/tmp/x", declared_size_bytes=1)

        assert descriptor.asset_name == AssetName("Photo", "JPG")
        assert descriptor.effective_extension == "jpg"

    def test_descriptor_accepts_status_values(self):
        """Test descriptors built from status values."""
        descriptor = FileDescriptor(declared_name="a.txt", source_path="/tmp/x", transport_status="partial_upload")

        assert descriptor.transport_status is TransportStatus.PARTIAL_UPLOAD

    def test_descriptor_rejects_negative_size(self):
        """Test rejecting a negative declared size."""
        with pytest.raises(ValueError):
            FileDescriptor(declared_name="a.txt", source_path="/tmp/x", declared_size_bytes=-1)

    def test_record_identity_cannot_change(self):
        """Test that a record identity cannot change."""
        record = AssetRecord(name=AssetName.parse("a.txt"))
        record.assign_identity(AssetId(1))
        record.assign_identity(AssetId(1))

        with pytest.raises(ValueError):
            record.assign_identity(AssetId(2))
