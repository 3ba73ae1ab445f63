"""FastAPI dependency injection wiring."""

from __future__ import annotations

import httpx

from repo_entropy.infrastructure.config import Settings, get_settings
from repo_entropy.infrastructure.github_rest_adapter import GitHubRestAdapter
from repo_entropy.services.analyze_entropy import AnalyzeDirectoryEntropyUseCase

_http_client: httpx.AsyncClient | None = None


async def startup() -> None:
    """Initialise shared resources; called from the lifespan context manager."""
    global _http_client  # noqa: PLW0603

    settings = get_settings()
    _http_client = httpx.AsyncClient(timeout=httpx.Timeout(settings.http_timeout))


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client  # noqa: PLW0603

    if _http_client:
        await _http_client.aclose()
        _http_client = None


def get_app_settings() -> Settings:
    return get_settings()


def get_use_case() -> AnalyzeDirectoryEntropyUseCase:
    """Build the use case with the GitHub adapter injected."""
    settings = get_settings()

    assert _http_client is not None, "startup() was not called"

    token = settings.github_token.get_secret_value() if settings.github_token else None
    github_adapter = GitHubRestAdapter(client=_http_client, token=token)

    return AnalyzeDirectoryEntropyUseCase(
        snapshot_provider=github_adapter,
        threshold_mode=settings.threshold_mode,
    )
