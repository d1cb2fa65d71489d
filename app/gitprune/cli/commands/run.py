"""Run command implementation.

Runs the tag workflow and then the branch workflow, the full cleanup
pass over every configured area.
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
from gitprune.core.workflow import BranchWorkflow, TagWorkflow

app = typer.Typer(
    help="Clean up tags, then branches.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def run_all(
    area: AreaOption = None,
    config_path: ConfigOption = None,
) -> None:
    """Run the tag and branch cleanup for every configured area."""
    config = load_run_config(config_path)
    check_areas(config, area)
    require_git()

    sink = create_sink(config)
    areas = config.select(area)
    reports = TagWorkflow(sink, config.options).run(areas)
    reports.extend(BranchWorkflow(sink, config.options).run(areas))
    print_run_summary(reports)
