"""Unit tests for tags and run commands."""

from pathlib import Path
from unittest.mock import patch

from gitprune.cli.main import app
from gitprune.utils.shell import BatchResult
from typer.testing import CliRunner

runner = CliRunner()


def _read_log(tmp_path: Path) -> list[str]:
    lines = (tmp_path / "run.log").read_text(encoding="utf-8").splitlines()
    return [line.split("|", 1)[1] for line in lines]


class TestTagsCommand:
    """Tests for the tags command."""

    def test_reports_marked_tags(
        self, config_file: Path, tmp_path: Path, tag_lines: list[str]
    ) -> None:
        """Tags matching the area rules are reported."""
        with (
            patch("gitprune.cli.types.command_exists", return_value=True),
            patch("gitprune.scanners.base.run_batch", return_value=BatchResult(lines=tag_lines)),
        ):
            result = runner.invoke(app, ["tags", "-c", str(config_file), "-a", "CORE"])

        assert result.exit_code == 0
        lines = _read_log(tmp_path)
        assert lines[0] == "Running Tag commands for: CORE"
        assert "Total CORE Tags Count to Delete: 2" in lines
        assert "CORE Tags marked for deletion:" in lines

    def test_tags_help(self) -> None:
        """Tags command shows help."""
        result = runner.invoke(app, ["tags", "--help"])

        assert result.exit_code == 0
        assert "--area" in result.output


class TestRunCommand:
    """Tests for the run command."""

    def test_tags_run_before_branches(
        self,
        config_file: Path,
        tmp_path: Path,
        tag_lines: list[str],
        branch_lines: list[str],
    ) -> None:
        """The full run processes tags first, then branches."""

        def listing(commands: list[list[str]], cwd: str) -> BatchResult:
            if commands[-1][-1] == "refs/tags":
                return BatchResult(lines=tag_lines)
            return BatchResult(lines=branch_lines)

        with (
            patch("gitprune.cli.types.command_exists", return_value=True),
            patch("gitprune.scanners.base.run_batch", side_effect=listing),
            patch("gitprune.scanners.branches.run_batch", return_value=BatchResult()),
        ):
            result = runner.invoke(app, ["run", "-c", str(config_file)])

        assert result.exit_code == 0
        running = [line for line in _read_log(tmp_path) if line.startswith("Running")]
        assert running == [
            "Running Tag commands for: CORE",
            "Running Tag commands for: BLUEPRINTS",
            "Running Branch commands for: CORE",
            "Running Branch commands for: BLUEPRINTS",
        ]
        assert "All 4 area run(s) completed without errors." in result.output

    def test_missing_repository_is_reported(self, tmp_path: Path) -> None:
        """A repository path that does not exist is reported as an error."""
        config_file = tmp_path / "config.toml"
        config_file.write_text(
            f'log_file = "{tmp_path / "run.log"}"\n\n'
            f'[areas.TSR]\npath = "{tmp_path / "absent"}"\n',
            encoding="utf-8",
        )

        with patch("gitprune.cli.types.command_exists", return_value=True):
            result = runner.invoke(app, ["run", "-c", str(config_file)])

        assert result.exit_code == 0
        lines = _read_log(tmp_path)
        assert f"TSR: Error: Repository path does not exist: {tmp_path / 'absent'}" in lines
        assert "reported errors" in result.output
