"""Tests for the recursive tree crawler."""

import pytest

from fakes import InMemoryRepoSource, RecordingObserver
from repo_aggregator.domain.entities import EntryKind
from repo_aggregator.domain.exceptions import PathNotFoundError, TreeListingError
from repo_aggregator.domain.value_objects import FilterSpec, RepoReference
from repo_aggregator.services.pattern_filter import build_filter
from repo_aggregator.services.tree_crawler import TreeCrawler


def _paths(entries) -> list[str]:
    return [e.path for e in entries]


@pytest.mark.unit
class TestTreeCrawler:
    """Tests for TreeCrawler.crawl."""

    def test_depth_first_in_listing_order(self) -> None:
        source = InMemoryRepoSource(
            "o",
            "r",
            {
                "b.txt": "b",
                "dir/x.txt": "x",
                "dir/sub/y.txt": "y",
                "dir/z.txt": "z",
                "a.txt": "a",
            },
        )
        entries = TreeCrawler(source).crawl(RepoReference("o", "r"), FilterSpec())
        assert _paths(entries) == ["b.txt", "dir/x.txt", "dir/sub/y.txt", "dir/z.txt", "a.txt"]
        assert all(e.kind is EntryKind.FILE for e in entries)

    def test_filters_applied_to_file_names(self, widgets_source: InMemoryRepoSource) -> None:
        spec = build_filter(include=["*.ps1", "*.md"])
        entries = TreeCrawler(widgets_source).crawl(RepoReference("acme", "widgets"), spec)
        assert _paths(entries) == ["src/main.ps1", "readme.md"]

    def test_subfolder(self, examples_source: InMemoryRepoSource) -> None:
        ref = RepoReference("Acme", "Gadgets", "examples")
        entries = TreeCrawler(examples_source).crawl(ref, FilterSpec())
        assert _paths(entries) == [
            "examples/basic.ps1",
            "examples/nested/advanced.ps1",
            "examples/notes.txt",
        ]

    def test_case_insensitive_fallback_matches_exact_case(
        self, examples_source: InMemoryRepoSource
    ) -> None:
        crawler = TreeCrawler(examples_source)
        spec = build_filter(include=["*.ps1"])
        exact = crawler.crawl(RepoReference("Acme", "Gadgets", "examples"), spec)
        fallback = crawler.crawl(RepoReference("Acme", "Gadgets", "Examples"), spec)
        assert fallback == exact
        assert _paths(fallback) == ["examples/basic.ps1", "examples/nested/advanced.ps1"]

    def test_crawl_resolved_reports_remote_spelling(
        self, examples_source: InMemoryRepoSource
    ) -> None:
        crawler = TreeCrawler(examples_source)
        resolved, entries = crawler.crawl_resolved(
            RepoReference("Acme", "Gadgets", "Examples"), FilterSpec()
        )
        assert resolved == RepoReference("Acme", "Gadgets", "examples")
        assert len(entries) == 3

    def test_crawl_resolved_keeps_exact_reference(
        self, examples_source: InMemoryRepoSource
    ) -> None:
        ref = RepoReference("Acme", "Gadgets", "examples")
        resolved, _ = TreeCrawler(examples_source).crawl_resolved(ref, FilterSpec())
        assert resolved is ref

    def test_miscased_parent_is_not_resolved(self, examples_source: InMemoryRepoSource) -> None:
        ref = RepoReference("Acme", "Gadgets", "EXAMPLES/Nested")
        with pytest.raises(PathNotFoundError) as info:
            TreeCrawler(examples_source).crawl(ref, FilterSpec())
        assert info.value.path == "EXAMPLES/Nested"
        # one parent-level lookup only
        assert examples_source.listed == ["EXAMPLES/Nested", "EXAMPLES"]

    def test_nested_fallback(self, examples_source: InMemoryRepoSource) -> None:
        ref = RepoReference("Acme", "Gadgets", "examples/NESTED")
        entries = TreeCrawler(examples_source).crawl(ref, FilterSpec())
        assert _paths(entries) == ["examples/nested/advanced.ps1"]
        assert examples_source.listed == ["examples/NESTED", "examples", "examples/nested"]

    def test_missing_path(self, examples_source: InMemoryRepoSource) -> None:
        ref = RepoReference("Acme", "Gadgets", "samples")
        with pytest.raises(PathNotFoundError) as info:
            TreeCrawler(examples_source).crawl(ref, FilterSpec())
        assert info.value.path == "samples"
        assert "samples" in str(info.value)

    def test_fallback_ignores_files_with_matching_name(self) -> None:
        source = InMemoryRepoSource("o", "r", {"docs": "a file, not a directory"})
        with pytest.raises(PathNotFoundError):
            TreeCrawler(source).crawl(RepoReference("o", "r", "DOCS"), FilterSpec())

    def test_missing_root(self) -> None:
        source = InMemoryRepoSource("o", "r", {"a.txt": "a"})
        # Wrong owner casing: the listing itself reports not-found at the root.
        with pytest.raises(PathNotFoundError) as info:
            TreeCrawler(source).crawl(RepoReference("O", "r"), FilterSpec())
        assert info.value.path == ""
        assert source.listed == [""]

    def test_listing_error_aborts(self) -> None:
        source = InMemoryRepoSource(
            "o", "r", {"a.txt": "a", "lib/b.txt": "b"}, failing_listings=("lib",)
        )
        with pytest.raises(TreeListingError) as info:
            TreeCrawler(source).crawl(RepoReference("o", "r"), FilterSpec())
        assert info.value.path == "lib"
        assert info.value.__cause__ is not None

    def test_empty_subfolder(self) -> None:
        source = InMemoryRepoSource("o", "r", {"a.txt": "a"}, empty_dirs=("empty",))
        assert TreeCrawler(source).crawl(RepoReference("o", "r", "empty"), FilterSpec()) == []

    def test_empty_repository(self) -> None:
        source = InMemoryRepoSource("o", "r", {})
        assert TreeCrawler(source).crawl(RepoReference("o", "r"), FilterSpec()) == []

    def test_observer_sees_emitted_entries_only(
        self, widgets_source: InMemoryRepoSource, observer: RecordingObserver
    ) -> None:
        TreeCrawler(widgets_source, observer).crawl(
            RepoReference("acme", "widgets"), build_filter()
        )
        assert observer.discovered == ["src/main.ps1", "readme.md"]
