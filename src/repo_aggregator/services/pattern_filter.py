"""File filtering — decide which file names survive the include/exclude rules."""

from __future__ import annotations

from fnmatch import fnmatchcase
from typing import Iterable

from repo_aggregator.domain.value_objects import FilterSpec

DEFAULT_EXCLUDE_PATTERNS: frozenset[str] = frozenset(
    {
        # images
        "*.png", "*.jpg", "*.jpeg", "*.gif", "*.bmp", "*.ico",
        "*.tif", "*.tiff", "*.webp", "*.psd",
        # documents
        "*.pdf", "*.doc", "*.docx", "*.xls", "*.xlsx", "*.ppt", "*.pptx",
        # archives
        "*.zip", "*.tar", "*.gz", "*.tgz", "*.bz2", "*.xz", "*.7z", "*.rar",
        "*.nupkg",
        # executables / compiled
        "*.exe", "*.dll", "*.so", "*.dylib", "*.bin", "*.msi",
        "*.o", "*.a", "*.lib", "*.class", "*.jar", "*.pyc", "*.pdb",
        # audio / video
        "*.mp3", "*.wav", "*.flac", "*.ogg",
        "*.mp4", "*.avi", "*.mov", "*.mkv", "*.webm",
        # fonts
        "*.woff", "*.woff2", "*.ttf", "*.otf", "*.eot",
        # misc binary data
        "*.db", "*.sqlite", "*.dat", "*.iso", "*.pfx", "*.snk",
    }
)


def matches_any(name: str, patterns: Iterable[str]) -> bool:
    """Return *True* if *name* matches one of the shell-style *patterns*.

    Comparison is case-insensitive: ``README.MD`` matches ``*.md``.
    """
    lowered = name.lower()
    return any(fnmatchcase(lowered, pattern.lower()) for pattern in patterns)


def is_included(name: str, spec: FilterSpec) -> bool:
    """Apply *spec* to a file name.  Exclusion always wins over inclusion."""
    if matches_any(name, spec.exclude_patterns):
        return False
    if spec.include_patterns and not matches_any(name, spec.include_patterns):
        return False
    return True


def build_filter(
    include: Iterable[str] = (),
    exclude: Iterable[str] = (),
    *,
    use_default_excludes: bool = True,
    default_excludes: Iterable[str] = DEFAULT_EXCLUDE_PATTERNS,
) -> FilterSpec:
    """Build a :class:`FilterSpec`, merging in the default exclusions unless disabled."""
    return FilterSpec.build(
        include=include,
        exclude=exclude,
        default_excludes=default_excludes if use_default_excludes else (),
    )
