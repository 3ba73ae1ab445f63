"""Entropy classification: a threshold ladder per directory kind.

A ladder is an ordered list of ``(lower_bound, level, recommendation)``
rungs consulted top-down.  The root directory has its own, more lenient
ladder because top-level files are mixed by nature (manifests, docs, CI).
"""

from __future__ import annotations

from typing import NamedTuple

from repo_entropy.domain.entities import ROOT_DIR, EntropyLevel, ProjectType, ThresholdMode


class Rung(NamedTuple):
    lower_bound: float
    level: EntropyLevel
    recommendation: str


# ── Recommendations ─────────────────────────────────────────────────────────

ROOT_HIGH_REC = "Consider organizing: too many file types in root"
ROOT_MEDIUM_REC = "Acceptable: root directory with mixed concerns"
ROOT_LOW_REC = "Good: well-organized root directory"

CRITICAL_REC = "Urgent refactoring needed: severe boundary violations"
HIGH_REC = "Consider refactoring: mixed concerns detected"
MEDIUM_REC = "Monitor: some boundary erosion"
LOW_REC = "Good: clear modular boundaries"

# ── Thresholds ──────────────────────────────────────────────────────────────

CRITICAL_THRESHOLD = 1.8
HIGH_THRESHOLD = 1.4
MEDIUM_THRESHOLD = 0.9

ROOT_HIGH_THRESHOLD = 2.3
ROOT_MEDIUM_THRESHOLD = 1.7

ROOT_HIGH_OFFSET = 0.5
ROOT_MEDIUM_OFFSET = 0.3

# Floors applied in relative mode so a near-zero average stays meaningful.
MIN_CRITICAL_THRESHOLD = 1.5
MIN_HIGH_THRESHOLD = 1.0
MIN_MEDIUM_THRESHOLD = 0.5


def build_ladders(
    critical: float,
    high: float,
    medium: float,
    root_high: float,
    root_medium: float,
) -> tuple[list[Rung], list[Rung]]:
    """Return ``(subdirectory_ladder, root_ladder)`` for the given cut-offs."""
    subdir = [
        Rung(critical, EntropyLevel.CRITICAL, CRITICAL_REC),
        Rung(high, EntropyLevel.HIGH, HIGH_REC),
        Rung(medium, EntropyLevel.MEDIUM, MEDIUM_REC),
        Rung(float("-inf"), EntropyLevel.LOW, LOW_REC),
    ]
    root = [
        Rung(root_high, EntropyLevel.HIGH, ROOT_HIGH_REC),
        Rung(root_medium, EntropyLevel.MEDIUM, ROOT_MEDIUM_REC),
        Rung(float("-inf"), EntropyLevel.LOW, ROOT_LOW_REC),
    ]
    return subdir, root


SUBDIR_LADDER, ROOT_LADDER = build_ladders(
    CRITICAL_THRESHOLD,
    HIGH_THRESHOLD,
    MEDIUM_THRESHOLD,
    ROOT_HIGH_THRESHOLD,
    ROOT_MEDIUM_THRESHOLD,
)


def relative_ladders(avg_entropy: float) -> tuple[list[Rung], list[Rung]]:
    """Ladders scaled by the repository's average entropy."""
    critical = max(avg_entropy * CRITICAL_THRESHOLD, MIN_CRITICAL_THRESHOLD)
    high = max(avg_entropy * HIGH_THRESHOLD, MIN_HIGH_THRESHOLD)
    medium = max(avg_entropy * MEDIUM_THRESHOLD, MIN_MEDIUM_THRESHOLD)
    # Rounded so that 1.8 + 0.5 lands on 2.3 exactly.
    return build_ladders(
        critical,
        high,
        medium,
        round(critical + ROOT_HIGH_OFFSET, 9),
        round(high + ROOT_MEDIUM_OFFSET, 9),
    )


def is_root_path(dir_path: str) -> bool:
    return dir_path in (ROOT_DIR, ".")


def classify_entropy_level(
    entropy: float,
    avg_entropy: float,
    dir_path: str,
    project_type: ProjectType | None = None,
    *,
    mode: ThresholdMode = ThresholdMode.ABSOLUTE,
) -> tuple[EntropyLevel, str]:
    """Return ``(level, recommendation)`` for one directory.

    In the default absolute mode *avg_entropy* and *project_type* do not
    change the outcome.  ``Critical`` is only reachable below the root.
    """
    if mode is ThresholdMode.RELATIVE:
        subdir, root = relative_ladders(avg_entropy)
    else:
        subdir, root = SUBDIR_LADDER, ROOT_LADDER

    ladder = root if is_root_path(dir_path) else subdir
    for rung in ladder:
        if entropy >= rung.lower_bound:
            return rung.level, rung.recommendation
    # NaN compares false against every rung
    last = ladder[-1]
    return last.level, last.recommendation
