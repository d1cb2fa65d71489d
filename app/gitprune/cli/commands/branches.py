"""Branches command implementation.

Classifies the remote branches of every configured area and deletes
the safe ones when deletion is enabled.
"""

import typer

from gitprune.cli.display import print_run_summary
from gitprune.cli.types import (
    AreaOption,
    ConfigOption,
    check_areas,
    create_sink,
    load_run_config,
    require_git,
)
from gitprune.core.workflow import BranchWorkflow

app = typer.Typer(
    help="Clean up stale remote branches.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def clean_branches(
    area: AreaOption = None,
    config_path: ConfigOption = None,
) -> None:
    """Report, and optionally delete, stale remote branches.

    Branches matching an area's rules are split into those with and
    without unmerged changes. Only branches without unmerged changes
    are deleted, and only when allow_delete is set in the config.

    Examples:
        gitprune branches                   # All configured areas
        gitprune branches --area CORE       # One area
        gitprune branches -c ./config.toml  # Explicit config file
    """
    config = load_run_config(config_path)
    check_areas(config, area)
    require_git()

    sink = create_sink(config)
    reports = BranchWorkflow(sink, config.options).run(config.select(area))
    print_run_summary(reports)
