"""Shared types and helpers for CLI commands.

This module provides the option types and setup helpers used by every
command that runs a workflow, to avoid code duplication.
"""

from pathlib import Path
from typing import Annotated

import typer

from gitprune.core.config import ConfigError, PruneConfig, resolve_config
from gitprune.core.sink import ReportSink
from gitprune.models.area import Area
from gitprune.utils.formatting import console, print_error
from gitprune.utils.shell import command_exists

AreaOption = Annotated[
    list[Area] | None,
    typer.Option(
        "--area",
        "-a",
        help="Area to process (repeatable). Defaults to every configured area.",
        case_sensitive=False,
    ),
]

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Configuration file. Defaults to ~/.config/gitprune/config.toml.",
    ),
]


def load_run_config(path: Path | None) -> PruneConfig:
    """Load the configuration for a run, exiting with code 1 on errors.

    Args:
        path: Explicit config path, or None for the default lookup.

    Returns:
        The effective configuration.

    Raises:
        typer.Exit: If the configuration cannot be loaded.
    """
    try:
        return resolve_config(path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def create_sink(config: PruneConfig) -> ReportSink:
    """Create the report sink for a run, exiting with code 1 on errors.

    Raises:
        typer.Exit: If the log directory cannot be created.
    """
    try:
        return ReportSink(console, config.effective_log_file)
    except RuntimeError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def check_areas(config: PruneConfig, areas: list[Area] | None) -> None:
    """Validate the requested areas against the configuration.

    Raises:
        typer.Exit: If a requested area is not configured.
    """
    missing = [area for area in areas or [] if area not in config.areas]
    if missing:
        names = ", ".join(area.value for area in missing)
        print_error(f"Area(s) not configured: {names}")
        raise typer.Exit(code=1)


def require_git() -> None:
    """Exit with code 1 when git is not installed.

    Raises:
        typer.Exit: If git is not found in PATH.
    """
    if not command_exists("git"):
        print_error("git is not available on this system.")
        raise typer.Exit(code=1)
