"""Domain exception hierarchy.

Structural errors abort an aggregation and map to HTTP status codes at the
interface layer.  Per-entry errors (:class:`EntrySkippedError` subclasses) are
caught by the use case, which records the skip and carries on.
"""

from __future__ import annotations


class RepoAggregatorError(Exception):
    """Base exception for the entire application."""


# ── Input validation ────────────────────────────────────────────────────────


class InvalidReferenceError(RepoAggregatorError):
    """The repository slug cannot be split into at least owner and name."""


# ── Remote source errors (raised by adapters) ──────────────────────────────


class RemoteSourceError(RepoAggregatorError):
    """Any transport or response failure talking to the remote source."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RemoteNotFoundError(RemoteSourceError):
    """The remote source answered 404 for the requested resource."""


class RemoteAccessDeniedError(RemoteSourceError):
    """Access to the resource was denied (403)."""


class RateLimitError(RemoteSourceError):
    """Remote API rate limit exceeded (429 / 403 with rate-limit header)."""


# ── Repository resolution ───────────────────────────────────────────────────


class RepositoryNotFoundError(RepoAggregatorError):
    """The remote source reports no such repository."""


class RepositoryAccessError(RepoAggregatorError):
    """Verifying the repository failed for a reason other than not-found."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# ── Tree listing ────────────────────────────────────────────────────────────


class PathNotFoundError(RepoAggregatorError):
    """A directory does not exist, even after case-insensitive lookup."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Path not found in repository: '{path or '/'}'")
        self.path = path


class TreeListingError(RepoAggregatorError):
    """Listing a directory failed for a reason other than not-found."""

    def __init__(self, path: str, detail: str) -> None:
        super().__init__(f"Failed to list '{path or '/'}': {detail}")
        self.path = path


# ── Per-entry errors (non-fatal) ────────────────────────────────────────────


class EntrySkippedError(RepoAggregatorError):
    """A single file could not be included in the document."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class MissingDownloadReferenceError(EntrySkippedError):
    """A discovered file carries no fetchable download reference."""

    def __init__(self, path: str) -> None:
        super().__init__(path, "no download reference")


class ContentFetchError(EntrySkippedError):
    """Retrieving one file's content failed."""


# ── Warnings ────────────────────────────────────────────────────────────────


class NoFilesDiscoveredWarning(UserWarning):
    """The crawl completed but no file survived filtering."""
