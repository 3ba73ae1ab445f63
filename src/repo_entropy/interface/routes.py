"""API routes: thin controllers that delegate to the use case."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from repo_entropy.infrastructure.config import Settings
from repo_entropy.interface.dependencies import get_app_settings, get_use_case
from repo_entropy.interface.schemas import (
    DirectoryEntropyRequest,
    DirectoryEntropyResponse,
    ErrorResponse,
)
from repo_entropy.services.analyze_entropy import (
    DIRECTORY_ENTROPY_CONTEXT,
    AnalyzeDirectoryEntropyUseCase,
)

router = APIRouter()


@router.post(
    "/directory-entropy",
    response_model=DirectoryEntropyResponse,
    responses={
        422: {"model": ErrorResponse, "description": "Invalid GitHub URL, time window or empty repository"},
        403: {"model": ErrorResponse, "description": "Repository is private"},
        404: {"model": ErrorResponse, "description": "Repository not found"},
        429: {"model": ErrorResponse, "description": "GitHub API rate limit exceeded"},
        502: {"model": ErrorResponse, "description": "Snapshot retrieval failed"},
    },
)
async def directory_entropy(
    body: DirectoryEntropyRequest,
    use_case: AnalyzeDirectoryEntropyUseCase = Depends(get_use_case),
    settings: Settings = Depends(get_app_settings),
) -> DirectoryEntropyResponse:
    """Analyse the directory entropy of a public GitHub repository."""
    limit = body.limit if body.limit is not None else settings.result_limit
    analysis = await use_case.execute(body.github_url, last=body.last, limit=limit)
    return DirectoryEntropyResponse.from_analysis(analysis, DIRECTORY_ENTROPY_CONTEXT)
