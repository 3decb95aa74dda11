"""Port: crawl progress observer."""

from __future__ import annotations

from typing import Protocol

from repo_aggregator.domain.entities import DocumentEntry, TreeEntry


class CrawlObserver(Protocol):
    """Receives progress notifications from the crawler and the use case."""

    def entry_discovered(self, entry: TreeEntry) -> None:
        ...

    def entry_fetched(self, entry: DocumentEntry) -> None:
        ...

    def entry_skipped(self, path: str, reason: str) -> None:
        ...
