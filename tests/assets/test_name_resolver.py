"""Tests for collision-free name resolution."""

import pytest
from itertools import islice
from unittest.mock import AsyncMock

from neo_ingest.config.settings import IngestSettings
from neo_ingest.assets.core.exceptions import NameResolutionExhausted
from neo_ingest.assets.core.value_objects import AssetName, ContainerId
from neo_ingest.assets.application.services import NameCandidates, NameResolver, create_name_resolver


def first_names(filename, prefix, count=3):
    candidates = NameCandidates(AssetName.parse(filename), prefix)
    return [name.filename for name in islice(candidates, count)]


def taken_in(*filenames):
    taken = {filename.lower() for filename in filenames}

    async def is_taken(name):
        return name.filename.lower() in taken

    return is_taken


class TestNameCandidates:
    """Test the candidate sequence."""

    def test_marker_goes_before_compound_extension(self):
        """Test placing the marker before a compound extension."""
        assert first_names("report.tar.gz", "-v") == [
            "report.tar.gz",
            "report-v2.tar.gz",
            "report-v3.tar.gz",
        ]

    def test_existing_marker_is_incremented(self):
        """Test incrementing an existing version marker."""
        assert first_names("IMG001-v3.jpg", "-v") == [
            "IMG001-v3.jpg",
            "IMG001-v4.jpg",
            "IMG001-v5.jpg",
        ]

    def test_digits_without_marker_are_kept(self):
        """Test that trailing digits without the marker are kept."""
        assert first_names("IMG001.jpg", "-v", 2) == ["IMG001.jpg", "IMG001-v2.jpg"]

    def test_extensionless_name(self):
        """Test candidates for a name without an extension."""
        assert first_names("README", "-v") == ["README", "README-v2", "README-v3"]

    def test_empty_marker_increments_padded_suffix(self):
        """Test zero-padded numeric suffixes."""
        assert first_names("IMG001.jpg", "") == ["IMG001.jpg", "IMG002.jpg", "IMG003.jpg"]

    def test_empty_marker_without_digits(self):
        """Test numeric suffixes for a name without digits."""
        assert first_names("report.txt", "") == ["report.txt", "report2.txt", "report3.txt"]

    def test_empty_marker_widens_past_padding(self):
        """Test a numeric suffix outgrowing its padding."""
        assert first_names("IMG099.jpg", "", 2) == ["IMG099.jpg", "IMG100.jpg"]

    def test_restartable(self):
        """Test iterating candidates more than once."""
        candidates = NameCandidates(AssetName.parse("a.txt"))

        assert list(islice(candidates, 3)) == list(islice(candidates, 3))

    def test_bounded_by_max_attempts(self):
        """Test that candidates stop at the attempt bound."""
        candidates = NameCandidates(AssetName.parse("a.txt"), max_attempts=4)

        assert len(list(candidates)) == 4

    def test_invalid_max_attempts(self):
        """Test rejecting a non-positive attempt bound."""
        with pytest.raises(ValueError):
            NameCandidates(AssetName.parse("a.txt"), max_attempts=0)


class TestNameResolver:
    """Test resolving against a "taken" predicate."""

    @pytest.mark.asyncio
    async def test_free_name_is_kept(self):
        """Test that a free name is used as is."""
        is_taken = AsyncMock(return_value=False)

        name = await NameResolver().resolve(AssetName.parse("report.pdf"), is_taken)

        assert name.filename == "report.pdf"
        is_taken.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_compound_extension_collisions(self):
        """Test resolving collisions on a compound extension."""
        resolver = NameResolver(version_prefix="-v")

        second = await resolver.resolve(AssetName.parse("report.tar.gz"), taken_in("report.tar.gz"))
        third = await resolver.resolve(
            AssetName.parse("report.tar.gz"),
            taken_in("report.tar.gz", "report-v2.tar.gz"),
        )

        assert second.filename == "report-v2.tar.gz"
        assert third.filename == "report-v3.tar.gz"
        assert third.extension == "tar.gz"

    @pytest.mark.asyncio
    async def test_numeric_suffix_collision(self):
        """Test resolving a numeric suffix collision."""
        resolver = NameResolver(version_prefix="")

        name = await resolver.resolve(AssetName.parse("IMG001.jpg"), taken_in("IMG001.jpg"))

        assert name.filename == "IMG002.jpg"

    @pytest.mark.asyncio
    async def test_free_numbered_name_is_kept(self):
        """Test that a free numbered name is used as is."""
        resolver = NameResolver(version_prefix="")

        name = await resolver.resolve(AssetName.parse("IMG3.jpg"), taken_in("IMG1.jpg", "IMG2.jpg"))

        assert name.filename == "IMG3.jpg"

    @pytest.mark.asyncio
    async def test_predicate_asked_for_every_candidate(self):
        """Test that the predicate is queried per candidate."""
        is_taken = AsyncMock(side_effect=[True, True, False])

        name = await NameResolver().resolve(AssetName.parse("a.txt"), is_taken)

        assert name.filename == "a-v3.txt"
        assert [call.args[0].filename for call in is_taken.await_args_list] == [
            "a.txt", "a-v2.txt", "a-v3.txt",
        ]

    @pytest.mark.asyncio
    async def test_sync_predicate(self):
        """Test resolving with a synchronous predicate."""
        name = await NameResolver().resolve(AssetName.parse("a.txt"), lambda n: n.base == "a")

        assert name.filename == "a-v2.txt"

    @pytest.mark.asyncio
    async def test_exhaustion_raises(self):
        """Test exhaustion when every candidate is taken."""
        resolver = NameResolver(max_attempts=5)
        is_taken = AsyncMock(return_value=True)

        with pytest.raises(NameResolutionExhausted) as exc_info:
            await resolver.resolve(AssetName.parse("a.txt"), is_taken, ContainerId("Uploads"))

        assert exc_info.value.attempts == 5
        assert exc_info.value.error_code == "NAME_RESOLUTION_EXHAUSTED"
        assert exc_info.value.details["container_id"] == "Uploads"
        assert is_taken.await_count == 5

    def test_create_from_settings(self):
        """Test a name resolver built from settings."""
        resolver = create_name_resolver(IngestSettings(version_prefix="", max_name_attempts=7))

        assert resolver.version_prefix == ""
        assert resolver.max_attempts == 7
