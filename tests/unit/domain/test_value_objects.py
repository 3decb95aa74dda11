"""Tests for domain value objects."""

import pytest

from repo_aggregator.domain.exceptions import InvalidReferenceError
from repo_aggregator.domain.value_objects import FilterSpec, RepoReference


@pytest.mark.unit
class TestRepoReference:
    """Tests for RepoReference.from_slug."""

    def test_owner_and_name(self) -> None:
        ref = RepoReference.from_slug("acme/widgets")
        assert ref == RepoReference(owner="acme", name="widgets", subfolder="")
        assert ref.full_name == "acme/widgets"

    def test_remaining_segments_form_subfolder(self) -> None:
        ref = RepoReference.from_slug("acme/widgets/docs/api/v2")
        assert ref.owner == "acme"
        assert ref.name == "widgets"
        assert ref.subfolder == "docs/api/v2"
        assert str(ref) == "acme/widgets/docs/api/v2"

    def test_surrounding_slashes_and_whitespace_ignored(self) -> None:
        ref = RepoReference.from_slug("  /acme/widgets/Examples/  ")
        assert ref == RepoReference(owner="acme", name="widgets", subfolder="Examples")

    def test_github_url_prefix_and_git_suffix(self) -> None:
        ref = RepoReference.from_slug("https://github.com/acme/widgets.git")
        assert ref == RepoReference(owner="acme", name="widgets")

    @pytest.mark.parametrize("slug", ["", "acme", "acme/", "/widgets", "   "])
    def test_invalid_slug(self, slug: str) -> None:
        with pytest.raises(InvalidReferenceError, match="Invalid repository reference"):
            RepoReference.from_slug(slug)

    def test_with_canonical_keeps_subfolder(self) -> None:
        ref = RepoReference.from_slug("ACME/Widgets/src")
        canonical = ref.with_canonical("acme", "widgets")
        assert canonical == RepoReference(owner="acme", name="widgets", subfolder="src")
        assert ref.owner == "ACME"

    def test_with_subfolder(self) -> None:
        ref = RepoReference("acme", "widgets", "Examples")
        assert ref.with_subfolder("/examples/") == RepoReference("acme", "widgets", "examples")
        assert ref.subfolder == "Examples"


@pytest.mark.unit
class TestFilterSpec:
    """Tests for FilterSpec.build."""

    def test_merges_default_excludes(self) -> None:
        spec = FilterSpec.build(include=["*.md"], exclude=["*.log"], default_excludes=["*.png"])
        assert spec.include_patterns == frozenset({"*.md"})
        assert spec.exclude_patterns == frozenset({"*.log", "*.png"})

    def test_blank_patterns_dropped(self) -> None:
        spec = FilterSpec.build(include=["", "  ", " *.ps1 "])
        assert spec.include_patterns == frozenset({"*.ps1"})
        assert spec.exclude_patterns == frozenset()
