"""Tests for the search command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from deptctl.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestSearchCommand:
    def test_prints_matching_lines(self, cli_runner: CliRunner, poem_file: Path) -> None:
        result = cli_runner.invoke(cli, ["search", "body", str(poem_file)])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == [
            "I'm nobody! Who are you?",
            "Are you nobody, too?",
            "How dreary to be somebody!",
        ]

    def test_case_sensitive_by_default(self, cli_runner: CliRunner, poem_file: Path) -> None:
        result = cli_runner.invoke(cli, ["search", "to", str(poem_file)])
        assert result.stdout.splitlines() == [
            "Are you nobody, too?",
            "How dreary to be somebody!",
        ]

    def test_ignore_case_flag(self, cli_runner: CliRunner, poem_file: Path) -> None:
        result = cli_runner.invoke(cli, ["search", "-i", "to", str(poem_file)])
        assert result.stdout.splitlines() == [
            "Are you nobody, too?",
            "How dreary to be somebody!",
            "To tell your name the livelong day",
            "To an admiring bog!",
        ]

    @pytest.mark.parametrize("value", ["1", "", "false"])
    def test_env_var_presence(
        self,
        cli_runner: CliRunner,
        poem_file: Path,
        monkeypatch: pytest.MonkeyPatch,
        value: str,
    ) -> None:
        monkeypatch.setenv("CASE_INSENSITIVE", value)
        result = cli_runner.invoke(cli, ["search", "TO", str(poem_file)])
        assert result.exit_code == 0
        assert len(result.stdout.splitlines()) == 4

    def test_case_sensitive_flag_beats_env(
        self, cli_runner: CliRunner, poem_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("CASE_INSENSITIVE", "1")
        result = cli_runner.invoke(cli, ["search", "--case-sensitive", "TO", str(poem_file)])
        assert result.exit_code == 0
        assert result.stdout == ""

    def test_conflicting_flags(self, cli_runner: CliRunner, poem_file: Path) -> None:
        result = cli_runner.invoke(
            cli, ["search", "-i", "--case-sensitive", "to", str(poem_file)]
        )
        assert result.exit_code == 2

    def test_config_case_insensitive(
        self, cli_runner: CliRunner, poem_file: Path, tmp_path: Path
    ) -> None:
        (tmp_path / "deptctl.toml").write_text("[search]\ncase_insensitive = true\n")
        result = cli_runner.invoke(cli, ["search", "TO", str(poem_file)])
        assert len(result.stdout.splitlines()) == 4

    def test_line_numbers(self, cli_runner: CliRunner, poem_file: Path) -> None:
        result = cli_runner.invoke(cli, ["search", "-n", "frog", str(poem_file)])
        assert result.stdout.strip() == "7:How public, like a frog"

    def test_no_matches_exit_zero(self, cli_runner: CliRunner, poem_file: Path) -> None:
        result = cli_runner.invoke(cli, ["search", "monomorphization", str(poem_file)])
        assert result.exit_code == 0
        assert result.stdout == ""

    def test_empty_query_matches_all(self, cli_runner: CliRunner, poem_file: Path) -> None:
        result = cli_runner.invoke(cli, ["search", "", str(poem_file)])
        assert result.exit_code == 0
        assert len(result.stdout.splitlines()) == 9

    def test_missing_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["search", "the", str(tmp_path / "test.txt")])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "Cannot read" in result.stderr

    def test_missing_file_json(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "search", "the", str(tmp_path / "x.txt")])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "READ_ERROR"

    def test_not_enough_arguments(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["search", "the"])
        assert result.exit_code == 2
        assert "Missing argument" in result.stderr

    def test_json_output(self, cli_runner: CliRunner, poem_file: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "search", "frog", str(poem_file)])
        data = json.loads(result.stdout)
        assert data["ok"] is True
        assert data["data"]["count"] == 1
        assert data["data"]["case_sensitive"] is True
