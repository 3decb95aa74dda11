"""API routes — thin controllers that delegate to the use case."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from repo_aggregator.infrastructure.config import Settings
from repo_aggregator.interface.dependencies import get_app_settings, get_use_case
from repo_aggregator.interface.schemas import (
    AggregateRequest,
    AggregateResponse,
    ErrorResponse,
    SkippedEntryModel,
)
from repo_aggregator.services.aggregate_repo import AggregateRepoUseCase
from repo_aggregator.services.token_counter import count_tokens

router = APIRouter()


@router.post(
    "/aggregate",
    response_model=AggregateResponse,
    responses={
        422: {"model": ErrorResponse, "description": "Invalid repository reference or request body"},
        404: {"model": ErrorResponse, "description": "Repository or path not found"},
        429: {"model": ErrorResponse, "description": "GitHub API rate limit exceeded"},
        502: {"model": ErrorResponse, "description": "GitHub API error"},
    },
)
def aggregate(
    body: AggregateRequest,
    use_case: AggregateRepoUseCase = Depends(get_use_case),
    settings: Settings = Depends(get_app_settings),
) -> AggregateResponse:
    """Aggregate the files of a GitHub repository into one XML document."""
    destination = settings.output_dir / body.output_file if body.output_file else None
    result = use_case.execute(
        body.repository,
        include=body.include,
        exclude=body.exclude,
        use_default_excludes=body.use_default_excludes,
        destination=destination,
    )
    return AggregateResponse(
        document=result.output,
        output_path=str(result.destination) if result.destination else None,
        entry_count=result.entry_count,
        token_count=count_tokens(result.output) if result.output is not None else None,
        skipped=[SkippedEntryModel(path=s.path, reason=s.reason) for s in result.skipped],
        warnings=result.warnings,
    )
