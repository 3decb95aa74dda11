"""Pydantic request / response DTOs for the API boundary."""

from __future__ import annotations

from pydantic import BaseModel, field_validator


class AggregateRequest(BaseModel):
    """Request body for ``POST /aggregate``."""

    repository: str
    include: list[str] = []
    exclude: list[str] = []
    use_default_excludes: bool = True
    output_file: str | None = None

    @field_validator("repository")
    @classmethod
    def _must_not_be_empty(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            msg = "repository must not be empty."
            raise ValueError(msg)
        return stripped

    @field_validator("output_file")
    @classmethod
    def _must_be_bare_name(cls, v: str | None) -> str | None:
        if v is None:
            return v
        stripped = v.strip()
        if not stripped or "/" in stripped or "\\" in stripped or stripped in (".", ".."):
            msg = f"Invalid output_file: '{v}'. Give a plain file name."
            raise ValueError(msg)
        return stripped


class SkippedEntryModel(BaseModel):
    path: str
    reason: str


class AggregateResponse(BaseModel):
    """Successful response from ``POST /aggregate``."""

    document: str | None
    output_path: str | None
    entry_count: int
    token_count: int | None
    skipped: list[SkippedEntryModel]
    warnings: list[str]


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    status: str = "error"
    message: str
