"""GitHub REST API adapter: implements the SnapshotProvider port."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

import httpx

from repo_entropy.domain.entities import FileRecord
from repo_entropy.domain.exceptions import (
    EmptyRepositoryError,
    GitHubRateLimitError,
    RepositoryAccessDeniedError,
    RepositoryNotFoundError,
    SnapshotRetrievalError,
)
from repo_entropy.domain.value_objects import GitHubUrl
from repo_entropy.services.file_filter import has_binary_extension

logger = logging.getLogger(__name__)

_GITHUB_API = "https://api.github.com"


class GitHubRestAdapter:
    """Concrete SnapshotProvider backed by the GitHub v3 REST API.

    The trees API returns no file contents, so binary files are recognised
    by extension.
    """

    def __init__(self, client: httpx.AsyncClient, token: str | None = None) -> None:
        self._client = client
        self._api_headers: dict[str, str] = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": "repo-entropy/1.0",
        }
        if token:
            self._api_headers["Authorization"] = f"Bearer {token}"

    async def fetch_snapshot(self, source: str) -> list[FileRecord]:
        url = GitHubUrl.from_string(source)
        branch = await self.fetch_default_branch(url)
        return await self.fetch_tree(url, branch)

    async def fetch_default_branch(self, url: GitHubUrl) -> str:
        """GET /repos/{owner}/{repo} → default branch name."""
        resp = await self._api_get(f"/repos/{url.owner}/{url.repo}")
        return resp.json().get("default_branch", "main")

    async def fetch_tree(self, url: GitHubUrl, branch: str) -> list[FileRecord]:
        """GET /repos/{owner}/{repo}/git/trees/{branch}?recursive=1 → [FileRecord]."""
        resp = await self._api_get(
            f"/repos/{url.owner}/{url.repo}/git/trees/{branch}",
            params={"recursive": "1"},
        )
        data = resp.json()
        tree = data.get("tree", [])

        if not tree:
            raise EmptyRepositoryError(f"Repository {url.full_name} appears empty.")
        if data.get("truncated"):
            logger.warning(
                "GitHub truncated the tree of %s; the analysis covers a partial listing",
                url.full_name,
            )

        records = [
            FileRecord(path=item["path"], is_binary=has_binary_extension(item["path"]))
            for item in tree
            if item.get("type", "blob") == "blob"
        ]
        logger.debug("Fetched %d blobs from %s@%s", len(records), url.full_name, branch)
        return records

    async def _api_get(
        self,
        endpoint: str,
        params: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Perform a GitHub API GET request with error translation."""
        url = f"{_GITHUB_API}{endpoint}"
        try:
            resp = await self._client.get(
                url, headers=self._api_headers, params=params
            )
        except httpx.HTTPError as exc:
            raise SnapshotRetrievalError(
                f"Network error fetching {url}: {exc}"
            ) from exc

        if resp.status_code == 200:
            return resp

        if resp.status_code == 404:
            raise RepositoryNotFoundError(
                "Repository not found. Make sure the URL points to a public repository."
            )

        if resp.status_code == 403:
            remaining = resp.headers.get("x-ratelimit-remaining", "")
            if remaining == "0":
                reset_raw = resp.headers.get("x-ratelimit-reset", "")
                try:
                    reset_str = datetime.fromtimestamp(int(reset_raw), tz=timezone.utc).strftime(
                        "%Y-%m-%d %H:%M:%S UTC"
                    )
                except (ValueError, OSError):
                    reset_str = reset_raw or "unknown"
                raise GitHubRateLimitError(
                    f"GitHub API rate limit exceeded. Resets at {reset_str}. "
                    "Set the GITHUB_TOKEN environment variable to increase the limit."
                )
            raise RepositoryAccessDeniedError(
                "Access denied. The repository may be private."
            )

        if resp.status_code == 429:
            raise GitHubRateLimitError("GitHub API rate limit exceeded (HTTP 429).")

        raise SnapshotRetrievalError(
            f"GitHub API returned HTTP {resp.status_code} for {url}"
        )
