"""Port: remote repository source — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from repo_aggregator.domain.entities import RepoMetadata, TreeEntry


class RepoSource(Protocol):
    """Abstract contract for reading a remote repository.

    Failures are reported as :class:`~repo_aggregator.domain.exceptions.RemoteSourceError`
    (or its subclasses).
    """

    def get_repository(self, owner: str, name: str) -> RepoMetadata:
        """Return canonical repository metadata; raise ``RemoteNotFoundError`` if absent."""
        ...

    def list_directory(self, owner: str, name: str, path: str) -> list[TreeEntry] | None:
        """Return the direct children of *path* (``""`` is the root).

        Always a list, even when the remote answers with a single object.
        ``None`` means the path does not exist.
        """
        ...

    def fetch_content(self, download_ref: str) -> str:
        """Return the text content behind a file's download reference."""
        ...
