"""Tests for the plain-text report."""

from __future__ import annotations

from repo_entropy.domain.entities import DirectoryEntropyStats, EntropyLevel
from repo_entropy.services.analyze_entropy import DIRECTORY_ENTROPY_CONTEXT, analyze_snapshot
from repo_entropy.services.report_renderer import render, render_row


def test_render_row_columns():
    entry = DirectoryEntropyStats(
        path="src",
        file_count=4,
        file_types={"go": 2, "js": 2},
        entropy=1.0,
        entropy_level=EntropyLevel.MEDIUM,
        recommendation="Monitor: some boundary erosion",
    )

    row = render_row(entry)

    assert row.startswith("src" + " " * 25 + " ")
    assert row.split(maxsplit=4) == ["src", "4", "2", "1.000", "Monitor: some boundary erosion"]


def test_render_header_and_tables(sample_records):
    text = render(analyze_snapshot(sample_records))
    lines = text.splitlines()

    assert lines[0] == "Directory Entropy Analysis"
    assert lines[1] == "Time window: all time"
    assert lines[2] == "Project type: Go CLI/Application (Go project with standard layout)"
    assert lines[3] == "Total directories analyzed: 5"
    assert lines[4].startswith("Average entropy: ")
    assert f"Context: {DIRECTORY_ENTROPY_CONTEXT}" in lines
    assert "High Entropy Directories (Need Attention):" in text
    assert "Low Entropy Directories (Well Organized):" in text
    assert any(line.startswith("web ") for line in lines)


def test_empty_buckets_are_omitted():
    text = render(analyze_snapshot([]))
    assert "High Entropy Directories" not in text
    assert "Low Entropy Directories" not in text
    assert "Total directories analyzed: 0" in text
