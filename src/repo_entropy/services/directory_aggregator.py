"""Group a snapshot's text files by directory and count their extensions."""

from __future__ import annotations

from typing import Iterable

from repo_entropy.domain.entities import DirectoryEntropyStats, FileRecord
from repo_entropy.services.entropy import calculate_entropy
from repo_entropy.services.file_filter import directory_of, extension_of, should_skip


def aggregate_directories(files: Iterable[FileRecord]) -> dict[str, DirectoryEntropyStats]:
    """Return one :class:`DirectoryEntropyStats` per containing directory.

    Binary files are skipped.  Entropy is left at 0.0; see
    :func:`compute_entropies`.
    """
    stats: dict[str, DirectoryEntropyStats] = {}
    for record in files:
        if should_skip(record):
            continue

        dir_path = directory_of(record.path)
        ext = extension_of(record.path)

        entry = stats.get(dir_path)
        if entry is None:
            entry = stats[dir_path] = DirectoryEntropyStats(path=dir_path)
        entry.file_count += 1
        entry.file_types[ext] = entry.file_types.get(ext, 0) + 1

    return stats


def compute_entropies(stats: Iterable[DirectoryEntropyStats]) -> None:
    for entry in stats:
        entry.entropy = calculate_entropy(entry.file_types)
