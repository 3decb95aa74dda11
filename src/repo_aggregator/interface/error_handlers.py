"""Global exception handlers — translate domain errors to HTTP responses.

Each domain exception maps to a specific HTTP status code and the
standard ``{"status": "error", "message": "..."}`` envelope.  The table is
ordered: subclasses come before their bases.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from repo_aggregator.domain.exceptions import (
    InvalidReferenceError,
    PathNotFoundError,
    RateLimitError,
    RemoteSourceError,
    RepoAggregatorError,
    RepositoryAccessError,
    RepositoryNotFoundError,
    TreeListingError,
)

logger = logging.getLogger(__name__)

_EXCEPTION_STATUS: list[tuple[type[RepoAggregatorError], int]] = [
    (InvalidReferenceError, 422),
    (RepositoryNotFoundError, 404),
    (PathNotFoundError, 404),
    (RateLimitError, 429),
    (RepositoryAccessError, 502),
    (TreeListingError, 502),
    (RemoteSourceError, 502),
    (RepoAggregatorError, 500),
]


def _error_json(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "error", "message": message},
    )


def status_for(exc: RepoAggregatorError) -> int:
    """Return the HTTP status for *exc*, looking through a rate-limit cause."""
    if isinstance(exc, RepositoryAccessError) and isinstance(exc.cause, RateLimitError):
        return 429
    if isinstance(exc, TreeListingError) and isinstance(exc.__cause__, RateLimitError):
        return 429
    for exc_type, code in _EXCEPTION_STATUS:
        if isinstance(exc, exc_type):
            return code
    return 500


def register_error_handlers(app: FastAPI) -> None:
    """Attach exception handlers to the FastAPI application."""

    # ── Domain exceptions ───────────────────────────────────────────────

    @app.exception_handler(RepoAggregatorError)
    async def domain_handler(request: Request, exc: RepoAggregatorError) -> JSONResponse:
        logger.warning("%s: %s", type(exc).__name__, exc)
        return _error_json(status_for(exc), str(exc))

    # ── Pydantic / FastAPI validation errors ────────────────────────────

    @app.exception_handler(RequestValidationError)
    async def validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        messages = []
        for err in exc.errors():
            loc = " → ".join(str(p) for p in err.get("loc", []))
            messages.append(f"{loc}: {err.get('msg', 'validation error')}")
        return _error_json(422, "; ".join(messages))

    # ── Catch-all for unexpected errors ─────────────────────────────────

    @app.exception_handler(Exception)
    async def generic_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception")
        return _error_json(500, "An unexpected error occurred. Please try again later.")
