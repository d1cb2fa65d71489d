"""Branch and tag cleanup workflows.

A workflow processes the configured areas one at a time. For each
area it fetches the refs, classifies them, reports counts and
percentages through the report sink, and deletes the safe refs when
deletion is enabled. Command failures are reported and never stop the
loop over areas.
"""

import logging
import re
from abc import ABC, abstractmethod

from gitprune.core.classifier import (
    classify_branches,
    classify_tags,
    extract_ref_name,
    percentage,
)
from gitprune.core.config import AreaSettings, CleanupOptions
from gitprune.core.sink import ReportSink
from gitprune.models.action import AreaReport
from gitprune.models.area import Area
from gitprune.models.partition import RefPartition
from gitprune.models.ref import RefKind
from gitprune.operators.base import RefOperator
from gitprune.operators.branches import BranchOperator
from gitprune.operators.tags import TagOperator
from gitprune.scanners.base import RefScanner
from gitprune.scanners.branches import BranchScanner
from gitprune.scanners.tags import TagScanner

logger = logging.getLogger(__name__)


class RefWorkflow(ABC):
    """Fetch, classify, report and delete refs of one kind.

    Attributes:
        sink: Destination of every report line.
        options: Toggles controlling deletion and pull requests.
    """

    def __init__(
        self,
        sink: ReportSink,
        options: CleanupOptions,
        scanner: RefScanner,
        operator: RefOperator,
    ) -> None:
        self._sink = sink
        self._options = options
        self._scanner = scanner
        self._operator = operator

    @property
    def kind(self) -> RefKind:
        return self._scanner.kind

    @abstractmethod
    def classify(
        self,
        area: Area,
        settings: AreaSettings,
        all_lines: list[str],
        report_errors: list[str],
    ) -> tuple[RefPartition, bool]:
        """Classify the fetched refs of one area.

        Args:
            area: Area being processed.
            settings: Repository binding and rules of the area.
            all_lines: Every ref line returned by the scanner.
            report_errors: Collector for command errors raised while classifying.

        Returns:
            The area's partition, and whether its safe tier may be deleted.
        """

    @abstractmethod
    def report(self, area: Area, partition: RefPartition) -> None:
        """Write counts, percentages and the deletable refs to the sink."""

    def run(self, areas: dict[Area, AreaSettings]) -> list[AreaReport]:
        """Process every area in order.

        Args:
            areas: Areas to process with their settings.

        Returns:
            One AreaReport per area, in processing order.
        """
        return [self.run_area(area, settings) for area, settings in areas.items()]

    def run_area(self, area: Area, settings: AreaSettings) -> AreaReport:
        """Run the full fetch, classify, report and delete sequence for one area."""
        self._sink.write(f"Running {self.kind.noun} commands for: {area}", style="bold_header")

        if not settings.path.is_dir():
            message = f"Repository path does not exist: {settings.path}"
            self._write_errors(area, [message])
            self._sink.separator()
            return AreaReport(
                area=area,
                kind=self.kind,
                partition=RefPartition(),
                errors=[message],
            )

        fetched = self._scanner.scan(settings.path)
        errors = list(fetched.errors)
        self._write_errors(area, fetched.errors)

        partition, deletable = self.classify(area, settings, fetched.lines, errors)
        self.report(area, partition)

        area_report = AreaReport(area=area, kind=self.kind, partition=partition, errors=errors)

        if self._options.allow_delete:
            if not deletable:
                self._sink.write(
                    f"Skipping {self.kind.label.lower()} deletion for {area}: "
                    "unmerged changes could not be determined",
                    style="warning",
                )
            else:
                self._delete(area, settings, area_report)

        if self._options.create_pull_requests:
            self._sink.write(
                f"Pull request creation is not implemented, skipped for {area}",
                style="warning",
            )

        self._sink.separator()
        return area_report

    def _delete(self, area: Area, settings: AreaSettings, area_report: AreaReport) -> None:
        names: list[str] = []
        for line in area_report.partition.safe:
            name = extract_ref_name(line, self.kind)
            if name is None:
                self._sink.write(f"Skipping malformed ref line: {line}", style="warning")
                area_report.skipped.append(line)
                continue
            names.append(name)

        for result in self._operator.iter_delete(settings.path, names):
            area_report.deletions.append(result)
            for name in result.names:
                self._sink.write(f"Deleted: {name}", style="deleted")
            if result.error:
                self._write_errors(area, result.error.splitlines())

    def _write_errors(self, area: Area, errors: list[str]) -> None:
        for error in errors:
            logger.debug("Command error in %s: %s", area, error)
            self._sink.write(f"{area}: Error: {error}", style="error")

    def _write_count(self, area: Area, description: str, count: int) -> None:
        self._sink.write(f"Total {area} {self.kind.label} {description}: {count}")

    def _write_percentage(self, area: Area, description: str, value: float | None) -> None:
        # No percentage line when the area has no refs at all
        if value is None:
            return
        self._sink.write(f"Percentage {area} {self.kind.label} {description}: {value}%")

    def _write_lines(self, area: Area, header: str, lines: tuple[str, ...], style: str) -> None:
        self._sink.write(header, style="header")
        for line in lines:
            self._sink.write(f"{area}: {line}", style=style)


class BranchWorkflow(RefWorkflow):
    """Workflow for remote branches.

    A branch marked for deletion is only deleted when it has no
    unmerged changes relative to the area's default branch.
    """

    def __init__(
        self,
        sink: ReportSink,
        options: CleanupOptions,
        scanner: BranchScanner | None = None,
        operator: BranchOperator | None = None,
    ) -> None:
        self._branch_scanner = scanner or BranchScanner()
        super().__init__(
            sink,
            options,
            self._branch_scanner,
            operator or BranchOperator(one_at_a_time=options.one_at_a_time),
        )

    def classify(
        self,
        area: Area,
        settings: AreaSettings,
        all_lines: list[str],
        report_errors: list[str],
    ) -> tuple[RefPartition, bool]:
        patterns: list[re.Pattern[str]] = settings.patterns_for(RefKind.BRANCH)

        unmerged = self._branch_scanner.scan_unmerged(settings.path, settings.default_branch)
        report_errors.extend(unmerged.errors)
        self._write_errors(area, unmerged.errors)
        partition = classify_branches(all_lines, unmerged.lines, patterns)
        # Without the unmerged listing every marked branch would look safe
        return partition, unmerged.success

    def report(self, area: Area, partition: RefPartition) -> None:
        total = partition.total_count
        self._write_count(area, "Count", total)
        self._write_count(area, "Count to Delete", partition.marked_count)
        self._write_percentage(
            area, "to be Deleted", percentage(partition.marked_count, total)
        )
        self._write_count(area, "with Unmerged changes Count", partition.unmerged_count)
        self._write_count(
            area, "to be deleted with unmerged changes Count", partition.unsafe_count
        )
        self._write_percentage(
            area,
            "to be deleted with unmerged changes",
            percentage(partition.unsafe_count, total),
        )
        self._write_count(
            area, "to be deleted with no unmerged changes Count", partition.safe_count
        )
        self._write_percentage(
            area,
            "to be deleted with no unmerged changes",
            percentage(partition.safe_count, total),
        )
        self._write_lines(
            area,
            f"{area} Branches safe to delete (no unmerged changes):",
            partition.safe,
            style="safe",
        )


class TagWorkflow(RefWorkflow):
    """Workflow for tags.

    Tags have no unmerged tier: every tag matching a rule is deletable.
    """

    def __init__(
        self,
        sink: ReportSink,
        options: CleanupOptions,
        scanner: TagScanner | None = None,
        operator: TagOperator | None = None,
    ) -> None:
        super().__init__(
            sink,
            options,
            scanner or TagScanner(),
            operator
            or TagOperator(
                one_at_a_time=options.one_at_a_time,
                delete_local=options.delete_local_tags,
            ),
        )

    def classify(
        self,
        area: Area,
        settings: AreaSettings,
        all_lines: list[str],
        report_errors: list[str],
    ) -> tuple[RefPartition, bool]:
        return classify_tags(all_lines, settings.patterns_for(RefKind.TAG)), True

    def report(self, area: Area, partition: RefPartition) -> None:
        total = partition.total_count
        self._write_count(area, "Count", total)
        self._write_count(area, "Count to Delete", partition.marked_count)
        self._write_percentage(
            area, "to be Deleted", percentage(partition.marked_count, total)
        )
        self._write_lines(
            area,
            f"{area} Tags marked for deletion:",
            partition.safe,
            style="marked",
        )
