"""Repository resolution — confirm the repository exists and fix owner/name casing.

The contents API is case-sensitive for path lookups but not for the
repository existence check, so later calls use the canonical casing.
"""

from __future__ import annotations

import logging

from repo_aggregator.domain.exceptions import (
    RemoteNotFoundError,
    RemoteSourceError,
    RepositoryAccessError,
    RepositoryNotFoundError,
)
from repo_aggregator.domain.ports.repo_source import RepoSource
from repo_aggregator.domain.value_objects import RepoReference

logger = logging.getLogger(__name__)


class RepoResolver:
    def __init__(self, source: RepoSource) -> None:
        self._source = source

    def resolve(self, reference: RepoReference) -> RepoReference:
        """Return *reference* with the canonical owner/name reported remotely."""
        try:
            metadata = self._source.get_repository(reference.owner, reference.name)
        except RemoteNotFoundError as exc:
            raise RepositoryNotFoundError(
                f"Repository {reference.full_name} not found."
            ) from exc
        except RemoteSourceError as exc:
            raise RepositoryAccessError(
                f"Could not verify repository {reference.full_name}: {exc}", cause=exc
            ) from exc

        canonical = reference.with_canonical(metadata.owner, metadata.name)
        if canonical.full_name != reference.full_name:
            logger.info("Resolved %s to %s", reference.full_name, canonical.full_name)
        return canonical
