"""Tests for the command-line entry point."""

from __future__ import annotations

import json

import pytest

from repo_entropy import cli


@pytest.fixture
def local_provider(monkeypatch, fake_provider):
    monkeypatch.setattr(cli, "LocalGitAdapter", lambda: fake_provider)
    return fake_provider


class TestOutput:
    def test_prints_text_report(self, local_provider, capsys):
        assert cli.main(["--path", "some/checkout"]) == 0

        out = capsys.readouterr().out
        assert local_provider.calls == ["some/checkout"]
        assert out.startswith("Directory Entropy Analysis")
        assert "Go CLI/Application" in out

    def test_prints_json(self, local_provider, capsys):
        assert cli.main(["--json", "--limit", "1", "--last", "2m"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["total_dirs"] == 5
        assert data["time_window"].startswith("since ")
        assert len(data["low_entropy_dirs"]) == 1

    def test_relative_flag(self, local_provider, capsys):
        assert cli.main(["--relative", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["total_dirs"] == 5

    def test_errors_exit_with_status_one(self, local_provider, capsys):
        assert cli.main(["--last", "forever"]) == 1
        assert "Invalid time window" in capsys.readouterr().err


class TestSourceSelection:
    def test_defaults_to_current_directory(self, local_provider, capsys):
        assert cli.main([]) == 0
        assert local_provider.calls == ["."]

    def test_explicit_dot_path_is_analyzed_locally(self, local_provider, capsys):
        assert cli.main(["--path", "."]) == 0
        assert local_provider.calls == ["."]

    def test_path_and_github_url_are_exclusive(self, local_provider, monkeypatch, capsys):
        def _no_remote(*args, **kwargs):
            raise AssertionError("GitHub adapter must not be built")

        monkeypatch.setattr(cli, "GitHubRestAdapter", _no_remote)

        with pytest.raises(SystemExit) as excinfo:
            cli.main(["--path", ".", "--github-url", "https://github.com/a/b"])

        assert excinfo.value.code == 2
        assert "not allowed with argument" in capsys.readouterr().err
        assert local_provider.calls == []
