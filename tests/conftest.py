"""Shared fixtures for the directory-entropy test suite."""

from __future__ import annotations

from typing import Callable, Iterable

import pytest

from repo_entropy.domain.entities import DirectoryEntropyStats, EntropyLevel, FileRecord


class FakeSnapshotProvider:
    """In-memory SnapshotProvider that records the sources it was asked for."""

    def __init__(self, records: list[FileRecord]) -> None:
        self.records = records
        self.calls: list[str] = []

    async def fetch_snapshot(self, source: str) -> list[FileRecord]:
        self.calls.append(source)
        return list(self.records)


@pytest.fixture
def make_records() -> Callable[..., list[FileRecord]]:
    def _make(paths: Iterable[str], binary: Iterable[str] = ()) -> list[FileRecord]:
        binary_set = set(binary)
        return [FileRecord(path=p, is_binary=p in binary_set) for p in paths]

    return _make


@pytest.fixture
def make_stats() -> Callable[..., DirectoryEntropyStats]:
    def _make(path: str, entropy: float, level: EntropyLevel) -> DirectoryEntropyStats:
        return DirectoryEntropyStats(
            path=path,
            file_count=2,
            file_types={"go": 1, "js": 1},
            entropy=entropy,
            entropy_level=level,
            recommendation=f"{level.value} rec",
        )

    return _make


@pytest.fixture
def sample_records(make_records) -> list[FileRecord]:
    """A small Go repository with one mixed-up directory."""
    return make_records(
        [
            "go.mod",
            "go.sum",
            "main.go",
            "README.md",
            "cmd/root.go",
            "cmd/serve.go",
            "cmd/serve_test.go",
            "internal/store/db.go",
            "internal/store/schema.sql",
            "web/app.js",
            "web/style.css",
            "web/index.html",
            "web/logo.png",
            "docs/guide.md",
        ],
        binary=["web/logo.png"],
    )


@pytest.fixture
def fake_provider(sample_records) -> FakeSnapshotProvider:
    return FakeSnapshotProvider(sample_records)


@pytest.fixture
def provider_factory() -> Callable[[list[FileRecord]], FakeSnapshotProvider]:
    return FakeSnapshotProvider
