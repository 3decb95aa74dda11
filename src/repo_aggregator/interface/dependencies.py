"""FastAPI dependency injection wiring."""

from __future__ import annotations

from functools import lru_cache

import httpx

from repo_aggregator.infrastructure.config import Settings, get_settings
from repo_aggregator.infrastructure.github_rest_adapter import GitHubRestAdapter
from repo_aggregator.infrastructure.logging_observer import LoggingObserver
from repo_aggregator.services.aggregate_repo import AggregateRepoUseCase
from repo_aggregator.services.pattern_filter import DEFAULT_EXCLUDE_PATTERNS

_http_client: httpx.Client | None = None


def startup() -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _http_client  # noqa: PLW0603

    settings = get_settings()
    _http_client = httpx.Client(
        timeout=httpx.Timeout(settings.request_timeout),
        follow_redirects=True,
    )


def shutdown() -> None:
    """Release shared resources."""
    global _http_client  # noqa: PLW0603

    if _http_client:
        _http_client.close()
        _http_client = None


@lru_cache(maxsize=1)
def _settings() -> Settings:
    return get_settings()


def get_app_settings() -> Settings:
    return _settings()


def get_use_case() -> AggregateRepoUseCase:
    """Build a use case with an injected GitHub adapter."""
    settings = _settings()

    assert _http_client is not None, "startup() was not called"

    token = settings.github_token.get_secret_value() if settings.github_token else None
    github_adapter = GitHubRestAdapter(
        client=_http_client, token=token, api_url=settings.github_api_url
    )

    return AggregateRepoUseCase(
        repo_source=github_adapter,
        observer=LoggingObserver() if settings.verbose else None,
        default_excludes=DEFAULT_EXCLUDE_PATTERNS | frozenset(settings.extra_exclude_patterns),
    )
