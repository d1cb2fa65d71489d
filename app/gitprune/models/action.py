"""Deletion and per-area report models.

This module defines the records produced by running a workflow
against one area: the outcome of each deletion invocation and the
overall report for the area.
"""

from dataclasses import dataclass, field

from gitprune.models.area import Area
from gitprune.models.partition import RefPartition
from gitprune.models.ref import RefKind


@dataclass(frozen=True, slots=True)
class DeletionResult:
    """Result of one deletion invocation.

    A batched invocation covers several names; a one-at-a-time
    invocation covers exactly one. git does not report per-name
    outcomes, so success applies to the invocation as a whole.

    Attributes:
        kind: Kind of ref that was deleted.
        names: Bare ref names passed to the command.
        success: Whether every command of the invocation succeeded.
        error: Joined error lines if the invocation failed, None otherwise.
    """

    kind: RefKind
    names: tuple[str, ...]
    success: bool
    error: str | None = None

    def __post_init__(self) -> None:
        """Validate deletion result data after initialization."""
        if not self.names:
            msg = "Deletion result must name at least one ref"
            raise ValueError(msg)

    @property
    def failed(self) -> bool:
        """Check if the invocation failed."""
        return not self.success


@dataclass(slots=True)
class AreaReport:
    """Outcome of running one workflow against one area.

    Attributes:
        area: Area that was processed.
        kind: Kind of refs the workflow handled.
        partition: Classification of the area's refs.
        deletions: Results of deletion invocations (empty if deletion is disabled).
        errors: Command errors collected while fetching and classifying.
        skipped: Ref lines that could not be turned into a deletable name.
    """

    area: Area
    kind: RefKind
    partition: RefPartition
    deletions: list[DeletionResult] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def deleted_count(self) -> int:
        """Number of names passed to deletion commands."""
        return sum(len(d.names) for d in self.deletions)

    @property
    def failed_deletions(self) -> list[DeletionResult]:
        """Deletion invocations that reported an error."""
        return [d for d in self.deletions if d.failed]
