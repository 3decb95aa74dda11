"""Aggregate-repository use case — the main orchestration pipeline.

This is the single entry point for the business logic.  It depends only on
the :class:`RepoSource` port and the pure service modules; the interface
layer injects a concrete adapter at runtime.

Every step runs sequentially: resolve → crawl → fetch each file → assemble.
"""

from __future__ import annotations

import logging
import os
import warnings
from pathlib import Path
from typing import Iterable

from repo_aggregator.domain.entities import AggregationResult, SkippedEntry
from repo_aggregator.domain.exceptions import EntrySkippedError, NoFilesDiscoveredWarning
from repo_aggregator.domain.ports.crawl_observer import CrawlObserver
from repo_aggregator.domain.ports.repo_source import RepoSource
from repo_aggregator.domain.value_objects import RepoReference
from repo_aggregator.services.content_fetcher import ContentFetcher
from repo_aggregator.services.document_assembler import (
    DocumentAssembler,
    count_unrepresentable,
)
from repo_aggregator.services.pattern_filter import DEFAULT_EXCLUDE_PATTERNS, build_filter
from repo_aggregator.services.repo_resolver import RepoResolver
from repo_aggregator.services.tree_crawler import TreeCrawler

logger = logging.getLogger(__name__)


class AggregateRepoUseCase:
    """Orchestrates the full repository → document pipeline.

    Parameters
    ----------
    repo_source:
        Adapter that can list and read a remote repository.
    observer:
        Optional progress observer; the pipeline runs the same without one.
    default_excludes:
        Exclusion globs merged into every filter unless the caller opts out.
    """

    def __init__(
        self,
        repo_source: RepoSource,
        observer: CrawlObserver | None = None,
        default_excludes: Iterable[str] = DEFAULT_EXCLUDE_PATTERNS,
    ) -> None:
        self._resolver = RepoResolver(repo_source)
        self._crawler = TreeCrawler(repo_source, observer)
        self._fetcher = ContentFetcher(repo_source)
        self._observer = observer
        self._default_excludes = frozenset(default_excludes)

    # ── Public entry point ──────────────────────────────────────────────

    def execute(
        self,
        slug: str,
        include: Iterable[str] = (),
        exclude: Iterable[str] = (),
        *,
        use_default_excludes: bool = True,
        destination: str | os.PathLike[str] | None = None,
    ) -> AggregationResult:
        """Run the full pipeline and return the assembled document (or its location)."""
        reference = RepoReference.from_slug(slug)
        logger.info("Aggregating %s", reference)

        # 1. Canonical owner/name casing
        reference = self._resolver.resolve(reference)

        # 2. Crawl & filter
        spec = build_filter(
            include,
            exclude,
            use_default_excludes=use_default_excludes,
            default_excludes=self._default_excludes,
        )
        reference, entries = self._crawler.crawl_resolved(reference, spec)

        result_warnings: list[str] = []
        if not entries:
            message = f"No files matched the filters in {reference}."
            logger.warning(message)
            warnings.warn(message, NoFilesDiscoveredWarning, stacklevel=2)
            result_warnings.append(message)

        # 3. Fetch sequentially, assemble as we go
        assembler = DocumentAssembler()
        skipped: list[SkippedEntry] = []
        for entry in entries:
            try:
                content = self._fetcher.fetch(entry)
            except EntrySkippedError as exc:
                logger.warning("Skipping %s: %s", exc.path, exc.reason)
                skipped.append(SkippedEntry(path=exc.path, reason=exc.reason))
                if self._observer is not None:
                    self._observer.entry_skipped(exc.path, exc.reason)
                continue

            replaced = count_unrepresentable(content)
            if replaced:
                message = (
                    f"{entry.path}: {replaced} character(s) not representable "
                    "in XML were replaced with U+FFFD."
                )
                logger.warning(message)
                result_warnings.append(message)

            doc_entry = assembler.append(entry.path, content)
            if self._observer is not None:
                self._observer.entry_fetched(doc_entry)

        # 4. Finalize
        output = assembler.finalize(destination)
        logger.info(
            "Assembled %d of %d file(s) from %s (%d skipped)",
            len(assembler),
            len(entries),
            reference,
            len(skipped),
        )

        return AggregationResult(
            reference=reference,
            output=None if destination is not None else output,
            destination=Path(output) if destination is not None else None,
            entry_count=len(assembler),
            skipped=skipped,
            warnings=result_warnings,
        )
