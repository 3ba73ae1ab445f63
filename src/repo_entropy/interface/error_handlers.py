"""Global exception handlers: translate domain errors to HTTP responses.

Each domain exception maps to a specific HTTP status code and the
standard ``{"status": "error", "message": "..."}`` envelope.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from repo_entropy.domain.exceptions import (
    EmptyRepositoryError,
    GitHubRateLimitError,
    InvalidGitHubUrlError,
    InvalidTimeWindowError,
    RepoEntropyError,
    RepositoryAccessDeniedError,
    RepositoryNotFoundError,
    SnapshotRetrievalError,
)

logger = logging.getLogger(__name__)

_EXCEPTION_STATUS: dict[type[RepoEntropyError], int] = {
    InvalidGitHubUrlError: 422,
    InvalidTimeWindowError: 422,
    RepositoryNotFoundError: 404,
    RepositoryAccessDeniedError: 403,
    EmptyRepositoryError: 422,
    GitHubRateLimitError: 429,
    SnapshotRetrievalError: 502,
}


def status_for(exc: RepoEntropyError) -> int:
    """Status code of the closest mapped ancestor of *exc* (500 if none)."""
    for cls in type(exc).__mro__:
        if cls in _EXCEPTION_STATUS:
            return _EXCEPTION_STATUS[cls]
    return 500


def _error_json(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "error", "message": message},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach exception handlers to the FastAPI application."""

    # ── Domain exceptions ───────────────────────────────────────────────

    @app.exception_handler(RepoEntropyError)
    async def domain_handler(request: Request, exc: RepoEntropyError) -> JSONResponse:
        logger.warning("%s: %s", type(exc).__name__, exc)
        return _error_json(status_for(exc), str(exc))

    # ── Pydantic / FastAPI validation errors ────────────────────────────

    @app.exception_handler(RequestValidationError)
    async def validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        messages = []
        for err in exc.errors():
            loc = " -> ".join(str(p) for p in err.get("loc", []))
            messages.append(f"{loc}: {err.get('msg', 'validation error')}")
        return _error_json(422, "; ".join(messages))

    # ── Catch-all for unexpected errors ─────────────────────────────────

    @app.exception_handler(Exception)
    async def generic_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception")
        return _error_json(500, "An unexpected error occurred. Please try again later.")
