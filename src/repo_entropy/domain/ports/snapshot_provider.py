"""Port: snapshot provider, defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from repo_entropy.domain.entities import FileRecord


class SnapshotProvider(Protocol):
    """Abstract contract for listing the tracked files of a repository."""

    async def fetch_snapshot(self, source: str) -> list[FileRecord]:
        """Return every tracked file of *source* at its current head."""
        ...
