"""Tests for file size parsing and formatting."""

import pytest

from neo_ingest.assets.core.value_objects import FileSize


class TestFileSizeParse:
    """Test size literal parsing."""

    @pytest.mark.parametrize("literal,expected", [
        (0, 0),
        (2000, 2000),
        ("10", 10),
        ("1k", 1024),
        ("40k", 40 * 1024),
        ("4K", 4096),
        ("1kb", 1024),
        ("2m", 2 * 1024 ** 2),
        ("1 MB", 1024 ** 2),
        ("1g", 1024 ** 3),
    ])
    def test_parse_literals(self, literal, expected):
        """Test parsing size literals."""
        assert FileSize.parse(literal).value == expected

    @pytest.mark.parametrize("literal", ["abc", "1.5k", "k", "-1", "", True, None, [1]])
    def test_parse_rejects_invalid_literals(self, literal):
        """Test rejecting malformed size literals."""
        with pytest.raises(ValueError):
            FileSize.parse(literal)

    def test_negative_size_rejected(self):
        """Test that negative sizes are rejected."""
        with pytest.raises(ValueError):
            FileSize(-1)


class TestFileSizeFormat:
    """Test human readable sizes used in validation messages."""

    @pytest.mark.parametrize("size,expected", [
        (1, "1 bytes"),
        (10, "10 bytes"),
        (1023, "1023 bytes"),
        (1024, "1 KB"),
        (10000, "9.8 KB"),
        (10240, "10 KB"),
        (40 * 1024, "40 KB"),
        (1024 ** 2, "1 MB"),
        (1572864, "1.5 MB"),
        (20 * 1024 ** 2, "20 MB"),
        (1024 ** 3, "1 GB"),
    ])
    def test_format_size(self, size, expected):
        """Test human readable size formatting."""
        assert FileSize(size).format_size() == expected

    def test_comparisons(self):
        """Test comparing file sizes."""
        assert FileSize(10).fits_in(FileSize(10))
        assert FileSize(11).exceeds(FileSize(10))
        assert FileSize(1) < FileSize(2)
        assert FileSize.zero().is_zero()
