"""Tests for tiered maximum size resolution."""

import pytest

from neo_ingest.assets.application.validators import (
    SizePolicy,
    SelectorTier,
    SIZE_LOOKUP_TIERS,
)


class TestSizePolicyLookup:
    """Test extension > category > wildcard priority."""

    @pytest.fixture
    def policy(self):
        return SizePolicy({"txt": 10, "[document]": 100, "*": 1000})

    def test_tier_order(self):
        """Test the lookup tier order."""
        assert [tier for tier, _ in SIZE_LOOKUP_TIERS] == [
            SelectorTier.EXTENSION,
            SelectorTier.CATEGORY,
            SelectorTier.WILDCARD,
        ]

    def test_extension_beats_category(self, policy, classifier):
        """Test that an extension entry wins over its category."""
        # txt is also a document
        limit = policy.lookup("txt", classifier)
        assert limit.max_bytes == 10
        assert limit.tier is SelectorTier.EXTENSION

    def test_category_beats_wildcard(self, policy, classifier):
        """Test that a category entry wins over the wildcard."""
        limit = policy.lookup("pdf", classifier)
        assert limit.max_bytes == 100
        assert limit.selector == "[document]"
        assert limit.tier is SelectorTier.CATEGORY

    def test_wildcard_fallback(self, policy, classifier):
        """Test falling back to the wildcard."""
        assert policy.resolve_max_size("jpg", classifier) == 1000
        assert policy.resolve_max_size("", classifier) == 1000
        assert policy.resolve_max_size(None, classifier) == 1000

    def test_extension_is_case_insensitive_and_ignores_dot(self, policy, classifier):
        """Test extension normalisation on lookup."""
        assert policy.resolve_max_size(".TXT", classifier) == 10

    def test_category_tag_reads_category_entry(self, policy, classifier):
        """Test looking up a category tag directly."""
        assert policy.resolve_max_size("[document]", classifier) == 100

    def test_no_match_without_wildcard(self, classifier):
        """Test a lookup that matches no tier."""
        policy = SizePolicy({"txt": 10})
        assert policy.resolve_max_size("jpg", classifier) is None

    def test_category_tier_skipped_without_classifier(self):
        """Test lookup without a category classifier."""
        policy = SizePolicy({"[image]": 10, "*": 99})
        assert policy.resolve_max_size("jpg") == 99

    def test_size_literals_are_parsed(self, classifier):
        """Test size literals in a policy mapping."""
        policy = SizePolicy({"[image]": "40k", "TXT": "1K"})
        assert policy.resolve_max_size("jpg", classifier) == 40 * 1024
        assert policy.resolve_max_size("txt", classifier) == 1024


class TestSizePolicyConfig:
    """Test building policies from configuration values."""

    def test_scalar_is_wildcard(self, classifier):
        """Test that a scalar policy is a wildcard limit."""
        policy = SizePolicy.from_config(2000)
        assert policy.rules == {"*": 2000}
        assert policy.resolve_max_size(".jpg", classifier) == 2000

    def test_scalar_literal(self):
        """Test a scalar size literal policy."""
        assert SizePolicy.from_config("1k").rules == {"*": 1024}

    @pytest.mark.parametrize("value", [None, 0, {}])
    def test_empty_config_means_no_limit(self, value):
        """Test that an empty policy has no limit."""
        assert SizePolicy.from_config(value).is_empty

    def test_largest_across_all_selectors(self):
        """Test the largest limit across selectors."""
        policy = SizePolicy.from_config({"[image]": "1k", "txt": 1000})
        assert policy.largest() == 1024

    def test_largest_without_rules_is_none(self):
        """Test the largest limit of an empty policy."""
        assert SizePolicy().largest() is None


class TestSizePolicyOverride:
    """Test that an instance policy replaces the default instead of merging."""

    @pytest.fixture
    def default(self):
        return SizePolicy({"[image]": "1k", "txt": 1000})

    @pytest.fixture
    def instance(self):
        return SizePolicy({"[document]": 2000, "txt": "4k"})

    def test_instance_replaces_default(self, default, instance, classifier):
        """Test that an instance policy replaces the default."""
        effective = SizePolicy.effective(instance, default)

        assert effective is instance
        assert effective.resolve_max_size("[image]", classifier) is None
        assert effective.resolve_max_size("jpg", classifier) is None
        assert effective.resolve_max_size("txt", classifier) == 4096
        assert effective.resolve_max_size("[document]", classifier) == 2000
        assert effective.largest() == 4096

    def test_default_applies_without_instance(self, default, classifier):
        """Test the default policy without an instance policy."""
        assert SizePolicy.effective(None, default).resolve_max_size("jpg", classifier) == 1024
        assert SizePolicy.effective(SizePolicy(), default) is default

    def test_no_policies(self):
        """Test resolving without any policy."""
        assert SizePolicy.effective(None, None).is_empty
