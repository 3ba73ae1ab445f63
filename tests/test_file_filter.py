"""Tests for path normalisation and extension / directory tokens."""

from __future__ import annotations

import pytest

from repo_entropy.domain.entities import FileRecord
from repo_entropy.services.file_filter import (
    directory_of,
    extension_of,
    has_binary_extension,
    normalize_path,
    should_skip,
)


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("main.go", "root"),
        ("./main.go", "root"),
        ("cmd/root.go", "cmd"),
        ("internal/store/db.go", "internal/store"),
        ("internal\\store\\db.go", "internal/store"),
    ],
)
def test_directory_of(path, expected):
    assert directory_of(path) == expected


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("a/x.go", "go"),
        ("a/X.GO", "go"),
        ("archive.tar.gz", "gz"),
        ("Makefile", "no-extension"),
        ("bin/run", "no-extension"),
        ("weird.", "no-extension"),
        (".gitignore", "gitignore"),
        ("v1.2/readme", "no-extension"),
    ],
)
def test_extension_of(path, expected):
    assert extension_of(path) == expected


def test_normalize_path_strips_prefix_and_separators():
    assert normalize_path("./src/app.py") == "src/app.py"
    assert normalize_path("src\\app.py") == "src/app.py"


def test_binary_extension_detection():
    assert has_binary_extension("assets/logo.PNG")
    assert not has_binary_extension("src/app.py")


def test_should_skip_flagged_and_sniffed_binaries():
    assert should_skip(FileRecord("a/blob.png", is_binary=True))
    assert should_skip(FileRecord("a/data.txt", content=b"abc\0def"))
    assert not should_skip(FileRecord("a/notes.txt", content=b"plain text\n"))
    assert not should_skip(FileRecord("a/notes.txt"))


def test_nul_after_sniff_window_is_text():
    content = b"a" * 9000 + b"\0"
    assert not should_skip(FileRecord("big.txt", content=content))
