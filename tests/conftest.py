"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import io
from collections.abc import Callable
from pathlib import Path

import pytest
from gitprune.core.config import AreaSettings, CleanupOptions
from gitprune.core.sink import ReportSink
from gitprune.core.theme import get_theme
from rich.console import Console


@pytest.fixture
def branch_lines() -> list[str]:
    """Sample for-each-ref output for refs/remotes/origin."""
    return [
        "refs/remotes/origin/HEAD|Mon Jan 4 10:00:00 2021 +0100|Mon Jan 4 10:00:00 2021 +0100|",
        "refs/remotes/origin/feat/login-fix|Fri Jan 1 09:00:00 2021 +0100|"
        "Fri Jan 1 09:00:00 2021 +0100|Jane Doe <jane@example.com> 1609488000 +0100",
        "refs/remotes/origin/fix/crash|Sat Jan 2 09:00:00 2021 +0100|"
        "Sat Jan 2 09:00:00 2021 +0100|John Roe <john@example.com> 1609574400 +0100",
        "refs/remotes/origin/feat/wip|Sun Jan 3 09:00:00 2021 +0100|"
        "Sun Jan 3 09:00:00 2021 +0100|Jane Doe <jane@example.com> 1609660800 +0100",
        "refs/remotes/origin/master|Mon Jan 4 10:00:00 2021 +0100|"
        "Mon Jan 4 10:00:00 2021 +0100|Jane Doe <jane@example.com> 1609750800 +0100",
    ]


@pytest.fixture
def unmerged_lines() -> list[str]:
    """Sample git branch -r --no-merged output."""
    return ["  origin/feat/wip"]


@pytest.fixture
def tag_lines() -> list[str]:
    """Sample for-each-ref output for refs/tags."""
    return [
        "refs/tags/v1.0.0|Fri Jan 1 09:00:00 2021 +0100|Fri Jan 1 09:00:00 2021 +0100|",
        "refs/tags/v1.0.1-nightly|Sat Jan 2 09:00:00 2021 +0100|Sat Jan 2 09:00:00 2021 +0100|",
        "refs/tags/v1.0.2-nightly|Sun Jan 3 09:00:00 2021 +0100|Sun Jan 3 09:00:00 2021 +0100|",
        "refs/tags/v1.1.0|Mon Jan 4 09:00:00 2021 +0100|Mon Jan 4 09:00:00 2021 +0100|",
    ]


@pytest.fixture
def repo_dir(tmp_path: Path) -> Path:
    """Existing directory standing in for a repository clone."""
    path = tmp_path / "repo"
    path.mkdir()
    return path


@pytest.fixture
def area_settings(repo_dir: Path) -> AreaSettings:
    """Area settings with branch and tag rules."""
    return AreaSettings(
        path=repo_dir,
        branch_patterns=[r"/feat/", r"/fix/"],
        tag_patterns=[r"-nightly"],
    )


@pytest.fixture
def report_console() -> Console:
    """Console writing into a buffer instead of the terminal."""
    return Console(file=io.StringIO(), width=240, color_system=None, theme=get_theme())


@pytest.fixture
def sink(tmp_path: Path, report_console: Console) -> ReportSink:
    """Report sink logging under the temporary directory."""
    return ReportSink(report_console, tmp_path / "state" / "output.log")


@pytest.fixture
def report_only() -> CleanupOptions:
    """Options that only report."""
    return CleanupOptions()


@pytest.fixture
def logged(sink: ReportSink) -> Callable[[], list[str]]:
    """Reader returning the logged lines without their timestamp prefix."""

    def read() -> list[str]:
        if not sink.log_path.exists():
            return []
        lines = sink.log_path.read_text(encoding="utf-8").splitlines()
        return [line.split("|", 1)[1] for line in lines]

    return read


@pytest.fixture
def config_file(tmp_path: Path, repo_dir: Path) -> Path:
    """Config file binding CORE to repo_dir and logging under tmp_path."""
    path = tmp_path / "config.toml"
    path.write_text(
        f"""
log_file = "{tmp_path / 'run.log'}"

[options]
allow_delete = false

[areas.CORE]
path = "{repo_dir}"
branch_patterns = ['/feat/', '/fix/']
tag_patterns = ['-nightly']

[areas.BLUEPRINTS]
path = "{repo_dir}"
branch_patterns = ['/chore/']
""",
        encoding="utf-8",
    )
    return path
