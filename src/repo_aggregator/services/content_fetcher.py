"""Content fetcher — retrieve the text of one discovered file."""

from __future__ import annotations

from repo_aggregator.domain.entities import TreeEntry
from repo_aggregator.domain.exceptions import (
    ContentFetchError,
    MissingDownloadReferenceError,
    RemoteSourceError,
)
from repo_aggregator.domain.ports.repo_source import RepoSource


class ContentFetcher:
    def __init__(self, source: RepoSource) -> None:
        self._source = source

    def fetch(self, entry: TreeEntry) -> str:
        """Return the content of *entry*.

        Raises :class:`MissingDownloadReferenceError` without touching the
        network when the entry has no download reference, and
        :class:`ContentFetchError` when the remote call fails.
        """
        if not entry.download_ref:
            raise MissingDownloadReferenceError(entry.path)
        try:
            return self._source.fetch_content(entry.download_ref)
        except RemoteSourceError as exc:
            raise ContentFetchError(entry.path, str(exc)) from exc
