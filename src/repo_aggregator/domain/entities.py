"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from repo_aggregator.domain.value_objects import RepoReference


class EntryKind(str, Enum):
    """Kind of a directory-listing child."""

    FILE = "file"
    DIRECTORY = "dir"


@dataclass(frozen=True, slots=True)
class TreeEntry:
    """A single child from a remote directory listing."""

    path: str
    kind: EntryKind
    download_ref: str | None = None

    @property
    def name(self) -> str:
        return self.path.rsplit("/", maxsplit=1)[-1]

    @property
    def is_directory(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


@dataclass(frozen=True, slots=True)
class RepoMetadata:
    """Canonical-cased repository identity as reported by the remote source."""

    owner: str
    name: str
    default_branch: str = "main"


@dataclass(frozen=True, slots=True)
class DocumentEntry:
    """One file rendered into the output document."""

    index: int
    source_path: str
    content: str


@dataclass(frozen=True, slots=True)
class SkippedEntry:
    """A discovered file that was left out of the document."""

    path: str
    reason: str


@dataclass(frozen=True, slots=True)
class AggregationResult:
    """The outcome of one aggregation run.

    ``output`` holds the document text when no destination was requested;
    otherwise it is ``None`` and ``destination`` names the written file.
    """

    reference: RepoReference
    output: str | None
    destination: Path | None
    entry_count: int
    skipped: list[SkippedEntry] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
