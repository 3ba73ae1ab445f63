"""Report assembly: ordering, bucketing and summary statistics."""

from __future__ import annotations

import dataclasses
from typing import Iterable, Sequence

from repo_entropy.domain.entities import (
    DirectoryEntropyAnalysis,
    DirectoryEntropyStats,
    EntropyLevel,
    ProjectType,
)

HIGH_LEVELS: frozenset[EntropyLevel] = frozenset({EntropyLevel.CRITICAL, EntropyLevel.HIGH})


def average_entropy(stats: Sequence[DirectoryEntropyStats]) -> float:
    if not stats:
        return 0.0
    return sum(s.entropy for s in stats) / len(stats)


def sort_by_entropy(stats: Iterable[DirectoryEntropyStats]) -> list[DirectoryEntropyStats]:
    """Entropy descending; ties ordered by path so runs are reproducible."""
    return sorted(stats, key=lambda s: (-s.entropy, s.path))


def assemble_report(
    stats: Iterable[DirectoryEntropyStats],
    project_type: ProjectType,
    time_window: str = "all time",
) -> DirectoryEntropyAnalysis:
    """Package classified directory stats into a :class:`DirectoryEntropyAnalysis`.

    Medium directories land in neither bucket but still count towards
    ``total_dirs`` and ``avg_entropy``.
    """
    ordered = sort_by_entropy(stats)

    high: list[DirectoryEntropyStats] = []
    low: list[DirectoryEntropyStats] = []
    for entry in ordered:
        if entry.entropy_level in HIGH_LEVELS:
            high.append(entry)
        elif entry.entropy_level == EntropyLevel.LOW:
            low.append(entry)

    return DirectoryEntropyAnalysis(
        time_window=time_window,
        project_type=project_type,
        total_dirs=len(ordered),
        avg_entropy=average_entropy(ordered),
        high_entropy_dirs=high,
        low_entropy_dirs=low,
    )


def apply_limit(analysis: DirectoryEntropyAnalysis, limit: int | None) -> DirectoryEntropyAnalysis:
    """Keep the first *limit* entries of each bucket (no-op for ``None`` or <= 0)."""
    if limit is None or limit <= 0:
        return analysis
    return dataclasses.replace(
        analysis,
        high_entropy_dirs=analysis.high_entropy_dirs[:limit],
        low_entropy_dirs=analysis.low_entropy_dirs[:limit],
    )
