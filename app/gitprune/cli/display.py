"""Shared Rich display functions for run results.

Provides the summary table printed after a run and the rendering of
the effective configuration.
"""

from rich.markup import escape
from rich.table import Table

from gitprune.core.classifier import percentage
from gitprune.core.config import PruneConfig
from gitprune.models.action import AreaReport
from gitprune.models.ref import RefKind
from gitprune.utils.formatting import console, format_percentage, print_success


def create_summary_table(reports: list[AreaReport]) -> Table:
    """Create a Rich table summarizing a run.

    One row per processed area and ref kind, with the size of each
    partition tier and the number of names passed to deletion commands.

    Args:
        reports: Area reports in processing order.

    Returns:
        Rich Table configured for summary display.
    """
    table = Table(
        title="Cleanup Summary",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Area", no_wrap=True)
    table.add_column("Refs", width=8)
    table.add_column("Total", justify="right")
    table.add_column("Marked", justify="right", style="marked")
    table.add_column("Unsafe", justify="right", style="unsafe")
    table.add_column("Safe", justify="right", style="safe")
    table.add_column("Safe %", justify="right")
    table.add_column("Deleted", justify="right", style="deleted")
    table.add_column("Errors", justify="right")

    for report in reports:
        partition = report.partition
        unsafe = str(partition.unsafe_count) if report.kind is RefKind.BRANCH else "-"
        errors = len(report.errors) + len(report.failed_deletions)
        error_text = f"[error]{errors}[/error]" if errors else "0"
        table.add_row(
            report.area.value,
            report.kind.value,
            str(partition.total_count),
            str(partition.marked_count),
            unsafe,
            str(partition.safe_count),
            format_percentage(percentage(partition.safe_count, partition.total_count)),
            str(report.deleted_count),
            error_text,
        )

    return table


def print_run_summary(reports: list[AreaReport]) -> None:
    """Print the summary table followed by an overall status line.

    Args:
        reports: Area reports in processing order.
    """
    if not reports:
        return

    console.print()
    console.print(create_summary_table(reports))

    failed = sum(1 for r in reports if r.errors or r.failed_deletions)
    if failed == 0:
        print_success(f"All {len(reports)} area run(s) completed without errors.")
    else:
        console.print(
            f"\n[warning]{failed} of {len(reports)} area run(s) reported errors[/warning]"
        )


def create_config_table(config: PruneConfig) -> Table:
    """Create a Rich table describing the configured areas.

    Args:
        config: Configuration to render.

    Returns:
        Rich Table with one row per area.
    """
    table = Table(
        title="Areas",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Area", no_wrap=True)
    table.add_column("Path")
    table.add_column("Default branch", style="muted")
    table.add_column("Branch rules")
    table.add_column("Tag rules")

    for area, settings in config.areas.items():
        table.add_row(
            area.value,
            str(settings.path),
            settings.default_branch or "HEAD",
            escape("\n".join(settings.branch_patterns)) or "[muted]-[/muted]",
            escape("\n".join(settings.tag_patterns)) or "[muted]-[/muted]",
        )

    return table


def print_options(config: PruneConfig) -> None:
    """Print the cleanup toggles and the log file location."""
    options = config.options
    for name, value in options.model_dump().items():
        style = "success" if value else "muted"
        console.print(f"  {name}: [{style}]{str(value).lower()}[/{style}]")
    console.print(f"  log_file: [info]{config.effective_log_file}[/info]")
