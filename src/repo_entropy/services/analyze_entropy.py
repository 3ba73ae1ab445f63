"""Directory-entropy use case: the main orchestration pipeline.

:func:`analyze_snapshot` is the pure core: it turns an already materialised
file listing into a :class:`DirectoryEntropyAnalysis`.  The use case adds
snapshot retrieval through the :class:`SnapshotProvider` port, which the
interface layer injects at runtime.
"""

from __future__ import annotations

import logging
from typing import Iterable

from repo_entropy.domain.entities import (
    DirectoryEntropyAnalysis,
    FileRecord,
    ThresholdMode,
)
from repo_entropy.domain.exceptions import EmptyRepositoryError
from repo_entropy.domain.ports.snapshot_provider import SnapshotProvider
from repo_entropy.domain.value_objects import TimeWindow
from repo_entropy.services.classifier import classify_entropy_level
from repo_entropy.services.directory_aggregator import aggregate_directories, compute_entropies
from repo_entropy.services.project_detector import detect_project_type
from repo_entropy.services.report import apply_limit, assemble_report, average_entropy

logger = logging.getLogger(__name__)

DIRECTORY_ENTROPY_CONTEXT = (
    "High entropy signals weak modularity and eroded boundaries. "
    "Clean directories have focused purpose."
)


def analyze_snapshot(
    files: Iterable[FileRecord],
    *,
    time_window: TimeWindow | None = None,
    threshold_mode: ThresholdMode = ThresholdMode.ABSOLUTE,
) -> DirectoryEntropyAnalysis:
    """Run detection, aggregation, entropy, classification and assembly."""
    records = list(files)
    window = time_window or TimeWindow.all_time()

    # 1. Project type and per-directory histograms from the same listing
    project_type = detect_project_type(records)
    dir_stats = aggregate_directories(records)
    stats = list(dir_stats.values())

    # 2. Entropy per directory, then the corpus-wide average
    compute_entropies(stats)
    avg = average_entropy(stats)

    # 3. Classification
    for entry in stats:
        entry.entropy_level, entry.recommendation = classify_entropy_level(
            entry.entropy, avg, entry.path, project_type, mode=threshold_mode
        )

    logger.info(
        "Analysed %d directories (%s), average entropy %.3f",
        len(stats),
        project_type.name,
        avg,
    )
    return assemble_report(stats, project_type, window.label)


class AnalyzeDirectoryEntropyUseCase:
    """Orchestrates snapshot retrieval and analysis.

    Parameters
    ----------
    snapshot_provider:
        Adapter that lists the tracked files of a repository.
    threshold_mode:
        ``absolute`` (default) or ``relative`` classification ladder.
    """

    def __init__(
        self,
        snapshot_provider: SnapshotProvider,
        threshold_mode: ThresholdMode = ThresholdMode.ABSOLUTE,
    ) -> None:
        self._provider = snapshot_provider
        self._mode = threshold_mode

    async def execute(
        self,
        source: str,
        last: str | None = None,
        limit: int | None = None,
    ) -> DirectoryEntropyAnalysis:
        """Fetch the snapshot of *source* and return its entropy analysis."""
        # Validate the window before doing any I/O.
        window = TimeWindow.from_string(last)
        logger.info("Analysing directory entropy of %s (%s)", source, window.label)

        files = await self._provider.fetch_snapshot(source)
        if not files:
            raise EmptyRepositoryError(f"Repository {source} has no tracked files.")

        analysis = analyze_snapshot(files, time_window=window, threshold_mode=self._mode)
        return apply_limit(analysis, limit)
