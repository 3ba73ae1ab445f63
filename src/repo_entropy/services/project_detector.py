"""Project-type detection from the file names present in a snapshot.

Archetypes are matched by an ordered list of ``(predicate, archetype)``
pairs.  Manifest-based predicates come first; the generic archetype closes
the list and matches unconditionally, so detection always resolves.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable

from repo_entropy.domain.entities import ROOT_DIR, FileRecord, ProjectType
from repo_entropy.services.file_filter import extension_of, filename, normalize_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SnapshotMarkers:
    """Everything the detection predicates may look at."""

    extensions: frozenset[str]
    file_names: frozenset[str]

    @classmethod
    def from_paths(cls, paths: Iterable[str]) -> SnapshotMarkers:
        extensions: set[str] = set()
        file_names: set[str] = set()
        for raw in paths:
            path = normalize_path(raw)
            if not path:
                continue
            extensions.add(extension_of(path))
            file_names.add(filename(path).lower())
        return cls(frozenset(extensions), frozenset(file_names))

    def has_extension(self, ext: str) -> bool:
        return _normalize_ext(ext) in self.extensions

    def has_file(self, *names: str) -> bool:
        return any(name.lower() in self.file_names for name in names)


# ── Archetypes ──────────────────────────────────────────────────────────────

GO_PROJECT = ProjectType(
    name="Go CLI/Application",
    root_patterns=("go", "mod", "sum", "md", "txt", "yml", "yaml"),
    expected_dirs={
        "cmd": ("go",),
        "internal": ("go",),
        "pkg": ("go",),
        "docs": ("md", "rst"),
        "scripts": ("sh", "py", "bat"),
        "configs": ("yml", "yaml", "json", "toml"),
    },
    description="Go project with standard layout",
)

NODE_PROJECT = ProjectType(
    name="Node.js Application",
    root_patterns=("js", "json", "md", "txt", "yml", "yaml"),
    expected_dirs={
        "src": ("js", "ts", "jsx", "tsx"),
        "lib": ("js", "ts"),
        "test": ("js", "ts"),
        "docs": ("md", "rst"),
        "scripts": ("js", "sh"),
        "config": ("js", "json", "yml"),
    },
    description="Node.js project with standard layout",
)

PYTHON_PROJECT = ProjectType(
    name="Python Application",
    root_patterns=("py", "txt", "md", "yml", "yaml", "cfg", "ini"),
    expected_dirs={
        "src": ("py",),
        "tests": ("py",),
        "docs": ("md", "rst"),
        "scripts": ("py", "sh"),
        "config": ("py", "yml", "yaml", "cfg"),
    },
    description="Python project with standard layout",
)

RUBY_PROJECT = ProjectType(
    name="Ruby/Rails Application",
    root_patterns=("rb", "gemspec", "md", "txt", "yml", "yaml"),
    expected_dirs={
        "app": ("rb", "erb", "haml"),
        "lib": ("rb",),
        "spec": ("rb",),
        "test": ("rb",),
        "config": ("rb", "yml", "yaml"),
        "docs": ("md", "rst"),
    },
    description="Ruby/Rails project with standard layout",
)

RUST_PROJECT = ProjectType(
    name="Rust Crate",
    root_patterns=("rs", "toml", "lock", "md", "txt", "yml", "yaml"),
    expected_dirs={
        "src": ("rs",),
        "tests": ("rs",),
        "benches": ("rs",),
        "examples": ("rs",),
        "docs": ("md", "rst"),
    },
    description="Rust crate with Cargo layout",
)

JAVA_PROJECT = ProjectType(
    name="Java/JVM Application",
    root_patterns=("xml", "gradle", "properties", "md", "txt", "yml", "yaml"),
    expected_dirs={
        "src": (),
        "docs": ("md", "rst"),
        "scripts": ("sh", "bat"),
        "config": ("xml", "properties", "yml", "yaml"),
    },
    description="Java project with Maven/Gradle layout",
)

GENERIC_PROJECT = ProjectType(
    name="Generic Project",
    root_patterns=("md", "txt", "yml", "yaml", "json"),
    expected_dirs={
        "src": (),
        "docs": ("md", "rst"),
        "scripts": (),
        "config": (),
    },
    description="Generic project structure",
)

Predicate = Callable[[SnapshotMarkers], bool]

# Extension-only heuristics would sit between the manifest rules and the
# generic rule; none ship, so manifest-less sources resolve to Generic.
DETECTION_RULES: list[tuple[Predicate, ProjectType]] = [
    (lambda m: m.has_extension("go") and m.has_file("go.mod"), GO_PROJECT),
    (lambda m: m.has_extension("js") and m.has_file("package.json"), NODE_PROJECT),
    (
        lambda m: m.has_extension("py")
        and m.has_file("requirements.txt", "pyproject.toml", "setup.py"),
        PYTHON_PROJECT,
    ),
    (lambda m: m.has_extension("rb") and m.has_file("gemfile"), RUBY_PROJECT),
    (lambda m: m.has_extension("rs") and m.has_file("cargo.toml"), RUST_PROJECT),
    (
        lambda m: m.has_extension("java") and m.has_file("pom.xml", "build.gradle"),
        JAVA_PROJECT,
    ),
    (lambda m: True, GENERIC_PROJECT),
]


# ── Public API ──────────────────────────────────────────────────────────────


def detect_project_type_from_markers(markers: SnapshotMarkers) -> ProjectType:
    for predicate, project_type in DETECTION_RULES:
        if predicate(markers):
            return project_type
    return GENERIC_PROJECT


def detect_project_type(files: Iterable[FileRecord | str]) -> ProjectType:
    """Return the first archetype whose predicate matches the snapshot."""
    paths = [f if isinstance(f, str) else f.path for f in files]
    project_type = detect_project_type_from_markers(SnapshotMarkers.from_paths(paths))
    logger.debug("Detected project type %r from %d files", project_type.name, len(paths))
    return project_type


def is_expected_file_type(project_type: ProjectType, dir_path: str, file_ext: str) -> bool:
    """Whether *file_ext* is conventional for *dir_path* in *project_type*.

    Directories the archetype does not mention are accepted.
    """
    ext = _normalize_ext(file_ext)
    if dir_path in (ROOT_DIR, "."):
        return ext in {_normalize_ext(p) for p in project_type.root_patterns}

    expected = project_type.expected_dirs.get(dir_path)
    if expected is None or not expected:
        return True
    return ext in {_normalize_ext(p) for p in expected}


def _normalize_ext(ext: str) -> str:
    return ext.strip().lstrip(".").lower()
