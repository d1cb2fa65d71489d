"""Tags command implementation.

Classifies the tags of every configured area and deletes the matching
ones when deletion is enabled.
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
from gitprune.core.workflow import TagWorkflow

app = typer.Typer(
    help="Clean up stale tags.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def clean_tags(
    area: AreaOption = None,
    config_path: ConfigOption = None,
) -> None:
    """Report, and optionally delete, tags matching the area rules.

    Examples:
        gitprune tags                       # All configured areas
        gitprune tags --area BLUEPRINTS     # One area
    """
    config = load_run_config(config_path)
    check_areas(config, area)
    require_git()

    sink = create_sink(config)
    reports = TagWorkflow(sink, config.options).run(config.select(area))
    print_run_summary(reports)
