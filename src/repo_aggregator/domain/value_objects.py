"""Value objects — self-validating domain primitives."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Iterable

from repo_aggregator.domain.exceptions import InvalidReferenceError

_URL_PREFIX_RE = re.compile(r"^(?:https?://)?(?:www\.)?github\.com/", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class RepoReference:
    """Validated repository reference.

    Built from a slug like ``psf/requests`` or ``psf/requests/docs/api``: the
    first two segments are the owner and repository name, anything after them
    is the subfolder to aggregate.  A ``https://github.com/`` prefix and a
    trailing ``.git`` on the name are tolerated.
    """

    owner: str
    name: str
    subfolder: str = ""

    @classmethod
    def from_slug(cls, slug: str) -> RepoReference:
        """Parse and validate a raw slug string."""
        raw = _URL_PREFIX_RE.sub("", slug.strip())
        segments = [s for s in raw.split("/") if s.strip()]
        if len(segments) < 2:
            raise InvalidReferenceError(
                f"Invalid repository reference: '{slug}'. "
                "Expected format: <owner>/<name>[/<subfolder>]"
            )
        owner, name, *rest = (s.strip() for s in segments)
        if name.lower().endswith(".git") and not rest:
            name = name[:-4]
        return cls(owner=owner, name=name, subfolder="/".join(rest))

    def with_canonical(self, owner: str, name: str) -> RepoReference:
        return replace(self, owner=owner, name=name)

    def with_subfolder(self, subfolder: str) -> RepoReference:
        return replace(self, subfolder=subfolder.strip("/"))

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    def __str__(self) -> str:
        if self.subfolder:
            return f"{self.full_name}/{self.subfolder}"
        return self.full_name


@dataclass(frozen=True, slots=True)
class FilterSpec:
    """Include/exclude glob rule sets applied to file names.

    An empty include set means "include everything not excluded".
    """

    include_patterns: frozenset[str] = frozenset()
    exclude_patterns: frozenset[str] = frozenset()

    @classmethod
    def build(
        cls,
        include: Iterable[str] = (),
        exclude: Iterable[str] = (),
        default_excludes: Iterable[str] = (),
    ) -> FilterSpec:
        """Merge caller patterns with *default_excludes*, dropping blanks."""
        return cls(
            include_patterns=frozenset(_clean(include)),
            exclude_patterns=frozenset(_clean(exclude)) | frozenset(_clean(default_excludes)),
        )


def _clean(patterns: Iterable[str]) -> list[str]:
    return [p.strip() for p in patterns if p and p.strip()]
