"""FastAPI application factory for the repository aggregator service."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import Depends, FastAPI

from repo_aggregator.infrastructure.config import Settings, get_settings
from repo_aggregator.interface.dependencies import get_app_settings, shutdown, startup
from repo_aggregator.interface.error_handlers import register_error_handlers
from repo_aggregator.interface.routes import router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the shared GitHub HTTP client for the lifetime of the app."""
    settings = get_settings()
    startup()
    logger.info(
        "Reading repositories from %s (%s)",
        settings.github_api_url,
        "authenticated" if settings.github_token else "anonymous, 60 requests/hour",
    )
    yield
    shutdown()


def create_app() -> FastAPI:
    """Build and wire the FastAPI application."""
    app = FastAPI(
        title="GitHub Repo Aggregator",
        version="1.0.0",
        description=(
            "Fetches the files of a GitHub repository (optionally a subfolder), "
            "filters them by glob patterns and returns a single XML document "
            "with every file's path and content."
        ),
        lifespan=_lifespan,
    )

    register_error_handlers(app)
    app.include_router(router)

    # ── Health check ────────────────────────────────────────────────────

    @app.get("/health", include_in_schema=False)
    def health(settings: Settings = Depends(get_app_settings)) -> dict[str, object]:
        return {"status": "ok", "github_authenticated": settings.github_token is not None}

    return app
