"""Token counting for assembled documents.

Uses ``tiktoken`` so callers can tell whether a document fits a model's
context window before handing it on.
"""

from __future__ import annotations

import tiktoken

_ENCODING_NAME = "cl100k_base"

_encoder: tiktoken.Encoding | None = None


def _get_encoder() -> tiktoken.Encoding:
    global _encoder  # noqa: PLW0603
    if _encoder is None:
        _encoder = tiktoken.get_encoding(_ENCODING_NAME)
    return _encoder


def count_tokens(text: str) -> int:
    """Return the exact token count for *text* under cl100k_base."""
    return len(_get_encoder().encode(text, disallowed_special=()))
