"""Tree crawler — depth-first enumeration of the files under a repository path.

Directories are walked in the order the remote lists them and never emitted.
When a non-root directory is not found, the crawler lists its parent once and
retries with a child whose name matches case-insensitively.
"""

from __future__ import annotations

import logging

from repo_aggregator.domain.entities import TreeEntry
from repo_aggregator.domain.exceptions import (
    PathNotFoundError,
    RemoteSourceError,
    TreeListingError,
)
from repo_aggregator.domain.ports.crawl_observer import CrawlObserver
from repo_aggregator.domain.ports.repo_source import RepoSource
from repo_aggregator.domain.value_objects import FilterSpec, RepoReference
from repo_aggregator.services.pattern_filter import is_included

logger = logging.getLogger(__name__)


def _split_parent(path: str) -> tuple[str, str]:
    """``"a/b/c"`` → ``("a/b", "c")``; ``"c"`` → ``("", "c")``."""
    if "/" not in path:
        return "", path
    parent, leaf = path.rsplit("/", maxsplit=1)
    return parent, leaf


class TreeCrawler:
    """Enumerate file entries of one repository, applying a :class:`FilterSpec`."""

    def __init__(self, source: RepoSource, observer: CrawlObserver | None = None) -> None:
        self._source = source
        self._observer = observer

    def crawl(self, reference: RepoReference, spec: FilterSpec) -> list[TreeEntry]:
        """Return every file under ``reference.subfolder`` that passes *spec*."""
        return self.crawl_resolved(reference, spec)[1]

    def crawl_resolved(
        self, reference: RepoReference, spec: FilterSpec
    ) -> tuple[RepoReference, list[TreeEntry]]:
        """Like :meth:`crawl`, also returning *reference* with the subfolder
        as the remote spells it (after any case-insensitive fallback)."""
        entries: list[TreeEntry] = []
        requested = reference.subfolder.strip("/")
        resolved = self._walk(reference, requested, spec, entries)
        if resolved != requested:
            reference = reference.with_subfolder(resolved)
        logger.info(
            "Discovered %d file(s) under %s", len(entries), reference
        )
        return reference, entries

    # ── Traversal ───────────────────────────────────────────────────────

    def _walk(
        self,
        reference: RepoReference,
        path: str,
        spec: FilterSpec,
        out: list[TreeEntry],
    ) -> str:
        """Walk *path* into *out*; return the path actually listed."""
        children = self._list(reference, path)
        if children is None:
            path, children = self._list_with_case_fallback(reference, path)

        for child in children:
            if child.is_directory:
                self._walk(reference, child.path, spec, out)
            elif is_included(child.name, spec):
                out.append(child)
                if self._observer is not None:
                    self._observer.entry_discovered(child)
        return path

    def _list(self, reference: RepoReference, path: str) -> list[TreeEntry] | None:
        try:
            return self._source.list_directory(reference.owner, reference.name, path)
        except RemoteSourceError as exc:
            raise TreeListingError(path, str(exc)) from exc

    # ── Case-insensitive fallback ───────────────────────────────────────

    def _list_with_case_fallback(
        self, reference: RepoReference, path: str
    ) -> tuple[str, list[TreeEntry]]:
        """Resolve *path* via its parent listing and list it again, once."""
        if not path:
            raise PathNotFoundError(path)

        parent, leaf = _split_parent(path)
        siblings = self._list(reference, parent)
        if siblings is None:
            raise PathNotFoundError(path)

        wanted = leaf.lower()
        match = next(
            (s for s in siblings if s.is_directory and s.name.lower() == wanted),
            None,
        )
        if match is None or match.path == path:
            raise PathNotFoundError(path)

        logger.debug("Resolved '%s' to '%s' by case-insensitive lookup", path, match.path)
        children = self._list(reference, match.path)
        if children is None:
            raise PathNotFoundError(path)
        return match.path, children
