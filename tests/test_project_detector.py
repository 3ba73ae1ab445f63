"""Tests for project-type detection and the expected-file-type helper."""

from __future__ import annotations

import pytest

from repo_entropy.domain.entities import ProjectType
from repo_entropy.services.project_detector import (
    DETECTION_RULES,
    GENERIC_PROJECT,
    GO_PROJECT,
    JAVA_PROJECT,
    NODE_PROJECT,
    PYTHON_PROJECT,
    RUBY_PROJECT,
    RUST_PROJECT,
    SnapshotMarkers,
    detect_project_type,
    is_expected_file_type,
)


class TestDetectProjectType:
    @pytest.mark.parametrize(
        ("paths", "expected"),
        [
            (["main.go", "go.mod", "cmd/root.go"], GO_PROJECT),
            (["index.js", "package.json"], NODE_PROJECT),
            (["app.py", "requirements.txt"], PYTHON_PROJECT),
            (["src/pkg/app.py", "pyproject.toml"], PYTHON_PROJECT),
            (["setup.py"], PYTHON_PROJECT),
            (["app/models/user.rb", "Gemfile"], RUBY_PROJECT),
            (["src/main.rs", "Cargo.toml"], RUST_PROJECT),
            (["src/main/java/App.java", "pom.xml"], JAVA_PROJECT),
            (["src/main/java/App.java", "build.gradle"], JAVA_PROJECT),
        ],
    )
    def test_detects_archetype(self, paths, expected):
        assert detect_project_type(paths) is expected

    def test_manifest_names_are_case_insensitive(self):
        assert detect_project_type(["lib/a.rb", "GEMFILE"]) is RUBY_PROJECT
        assert detect_project_type(["main.go", "GO.MOD"]) is GO_PROJECT

    def test_manifest_location_is_irrelevant(self):
        assert detect_project_type(["tools/gen/go.mod", "tools/gen/main.go"]) is GO_PROJECT

    def test_extension_without_manifest_falls_back_to_generic(self):
        assert detect_project_type(["main.go", "util.go"]) is GENERIC_PROJECT
        assert detect_project_type(["script.py"]) is GENERIC_PROJECT

    def test_manifest_without_sources_falls_back_to_generic(self):
        assert detect_project_type(["package.json", "README.md"]) is GENERIC_PROJECT

    def test_empty_snapshot_is_generic(self):
        assert detect_project_type([]) is GENERIC_PROJECT

    def test_priority_order_prefers_go_over_node(self):
        paths = ["main.go", "go.mod", "web/app.js", "web/package.json"]
        assert detect_project_type(paths) is GO_PROJECT

    def test_accepts_file_records(self, make_records):
        assert detect_project_type(make_records(["index.js", "package.json"])) is NODE_PROJECT

    def test_generic_rule_closes_the_list(self):
        predicate, project_type = DETECTION_RULES[-1]
        assert project_type is GENERIC_PROJECT
        assert predicate(SnapshotMarkers.from_paths([]))


class TestSnapshotMarkers:
    def test_collects_extensions_and_names(self):
        markers = SnapshotMarkers.from_paths(["src/Lib/Mod.PY", "README"])
        assert markers.extensions == {"py", "no-extension"}
        assert markers.file_names == {"mod.py", "readme"}
        assert markers.has_extension(".py")

    def test_has_file_matches_any_name(self):
        markers = SnapshotMarkers.from_paths(["build.gradle"])
        assert markers.has_file("pom.xml", "BUILD.GRADLE")
        assert not markers.has_file("pom.xml")


class TestArchetypeImmutability:
    def test_expected_dirs_reject_assignment(self):
        with pytest.raises(TypeError):
            GO_PROJECT.expected_dirs["cmd"] = ()  # type: ignore[index]

        detected = detect_project_type(["main.go", "go.mod"])
        assert not is_expected_file_type(detected, "cmd", "js")

    def test_constructor_copies_the_mapping(self):
        dirs = {"src": ["py"]}
        project_type = ProjectType("Demo", ("md",), dirs, "demo")

        dirs["src"].append("js")
        dirs["lib"] = ["rb"]

        assert dict(project_type.expected_dirs) == {"src": ("py",)}

    def test_archetypes_are_hashable(self):
        assert hash(GO_PROJECT) == hash(GO_PROJECT)
        assert len({project_type for _, project_type in DETECTION_RULES}) == 7

    def test_equal_archetypes_compare_equal(self):
        copy = ProjectType(
            GO_PROJECT.name,
            GO_PROJECT.root_patterns,
            dict(GO_PROJECT.expected_dirs),
            GO_PROJECT.description,
        )
        assert copy == GO_PROJECT
        assert hash(copy) == hash(GO_PROJECT)


class TestIsExpectedFileType:
    def test_root_uses_root_patterns(self):
        assert is_expected_file_type(GO_PROJECT, "root", ".go")
        assert is_expected_file_type(GO_PROJECT, "root", "mod")
        assert not is_expected_file_type(GO_PROJECT, "root", ".png")

    def test_dot_is_treated_as_root(self):
        assert is_expected_file_type(GO_PROJECT, ".", "md")

    def test_known_directory_checks_its_extensions(self):
        assert is_expected_file_type(GO_PROJECT, "cmd", ".go")
        assert not is_expected_file_type(GO_PROJECT, "cmd", ".js")

    def test_empty_expectation_accepts_anything(self):
        assert is_expected_file_type(GENERIC_PROJECT, "src", ".anything")

    def test_unknown_directory_is_permissive(self):
        assert is_expected_file_type(PYTHON_PROJECT, "vendor/thing", ".c")
