"""Shared pytest fixtures and test helpers for deptctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from deptctl.domain.directory import Directory
from deptctl.services.directory import DirectoryService
from deptctl.services.telemetry import disable_telemetry

POEM = """\
I'm nobody! Who are you?
Are you nobody, too?
Then there's a pair of us - don't tell!
They'd banish us, you know.

How dreary to be somebody!
How public, like a frog
To tell your name the livelong day
To an admiring bog!
"""


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's environment from leaking into search/config tests."""
    monkeypatch.delenv("CASE_INSENSITIVE", raising=False)
    monkeypatch.delenv("DEPTCTL_CONFIG", raising=False)


@pytest.fixture(autouse=True)
def _restore_process_state() -> Generator[None]:
    """Undo logging and telemetry changes made by CLI invocations."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    root_level = root.level
    dept_level = logging.getLogger("deptctl").level
    disable_telemetry()
    yield
    disable_telemetry()
    root.handlers = handlers
    root.setLevel(root_level)
    logging.getLogger("deptctl").setLevel(dept_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def directory() -> Directory:
    return Directory()


@pytest.fixture
def service(directory: Directory) -> DirectoryService:
    return DirectoryService(directory)


@pytest.fixture
def poem_file(tmp_path: Path) -> Path:
    """A small text file to search."""
    path = tmp_path / "poem.txt"
    path.write_text(POEM, encoding="utf-8")
    return path


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory so no deptctl.toml is discovered."""
    monkeypatch.chdir(tmp_path)


def seed(svc: DirectoryService, *lines: str) -> None:
    """Execute command lines, asserting each succeeds."""
    for line in lines:
        result = svc.execute(line)
        assert result.ok, result.error
