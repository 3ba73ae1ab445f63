"""Domain exception hierarchy.

The analysis core never raises; these come from value objects and the
snapshot adapters.  The CLI turns them into an exit status and the HTTP
layer maps each one to a status code.
"""

from __future__ import annotations


class RepoEntropyError(Exception):
    """Base exception for the entire application."""


# ── Input validation ────────────────────────────────────────────────────────


class InvalidGitHubUrlError(RepoEntropyError):
    """The supplied URL does not point to a valid GitHub repository."""


class InvalidTimeWindowError(RepoEntropyError):
    """A time-window argument such as ``7d`` could not be parsed."""


# ── Snapshot retrieval ──────────────────────────────────────────────────────


class RepositoryNotFoundError(RepoEntropyError):
    """The repository does not exist or is not accessible (404)."""


class RepositoryAccessDeniedError(RepoEntropyError):
    """Access to the repository was denied (403)."""


class EmptyRepositoryError(RepoEntropyError):
    """The repository exists but has no tracked files."""


class GitHubRateLimitError(RepoEntropyError):
    """GitHub API rate limit exceeded (429 / 403 with rate-limit header)."""


class SnapshotRetrievalError(RepoEntropyError):
    """Reading the file tree failed (network, git, or filesystem error)."""
