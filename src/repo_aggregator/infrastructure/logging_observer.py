"""CrawlObserver that reports progress through the standard logger."""

from __future__ import annotations

import logging

from repo_aggregator.domain.entities import DocumentEntry, TreeEntry

logger = logging.getLogger(__name__)


class LoggingObserver:
    def __init__(self, level: int = logging.INFO) -> None:
        self._level = level

    def entry_discovered(self, entry: TreeEntry) -> None:
        logger.log(self._level, "Discovered %s", entry.path)

    def entry_fetched(self, entry: DocumentEntry) -> None:
        logger.log(
            self._level, "[%d] %s (%d chars)", entry.index, entry.source_path, len(entry.content)
        )

    def entry_skipped(self, path: str, reason: str) -> None:
        logger.log(self._level, "Skipped %s: %s", path, reason)
