"""Plain-text rendering of a :class:`DirectoryEntropyAnalysis`."""

from __future__ import annotations

from repo_entropy.domain.entities import DirectoryEntropyAnalysis, DirectoryEntropyStats
from repo_entropy.services.analyze_entropy import DIRECTORY_ENTROPY_CONTEXT

_TABLE_HEADER = "Directory                    Files Types Entropy Level Recommendation"
_TABLE_RULE = "---------------------------- ----- ----- ---------- ----------------"


def render_row(entry: DirectoryEntropyStats) -> str:
    return (
        f"{entry.path:<28} {entry.file_count:>5d} {entry.type_count:>5d} "
        f"{entry.entropy:>10.3f} {entry.recommendation}"
    )


def _render_table(title: str, rows: list[DirectoryEntropyStats]) -> list[str]:
    lines = [title, _TABLE_HEADER, _TABLE_RULE]
    lines.extend(render_row(entry) for entry in rows)
    lines.append("")
    return lines


def render(analysis: DirectoryEntropyAnalysis) -> str:
    """Render the header, context line and the high / low tables."""
    project = analysis.project_type
    lines = [
        "Directory Entropy Analysis",
        f"Time window: {analysis.time_window}",
        f"Project type: {project.name} ({project.description})",
        f"Total directories analyzed: {analysis.total_dirs}",
        f"Average entropy: {analysis.avg_entropy:.3f}",
        "",
        f"Context: {DIRECTORY_ENTROPY_CONTEXT}",
        "",
    ]

    if analysis.high_entropy_dirs:
        lines += _render_table(
            "⚠️  High Entropy Directories (Need Attention):", analysis.high_entropy_dirs
        )
    if analysis.low_entropy_dirs:
        lines += _render_table(
            "✅ Low Entropy Directories (Well Organized):", analysis.low_entropy_dirs
        )

    return "\n".join(lines)
