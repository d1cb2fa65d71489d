"""Partition of the refs of one area into deletion tiers.

Every run recomputes a RefPartition per area. Ref lines are kept as
the raw strings returned by git so they can be reported verbatim.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RefPartition:
    """Classification result for one area.

    Attributes:
        all: Every ref line returned by the listing query.
        marked: Lines matching at least one of the area's rules.
        unmerged: Lines reported as carrying unmerged changes (branches only).
        unsafe: Marked lines that still have unmerged changes.
        safe: Marked lines that can be deleted without losing work.
    """

    all: tuple[str, ...] = ()
    marked: tuple[str, ...] = ()
    unmerged: tuple[str, ...] = ()
    unsafe: tuple[str, ...] = ()
    safe: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate the partition laws."""
        marked = set(self.marked)
        if not marked <= set(self.all):
            msg = "Marked refs must be a subset of all refs"
            raise ValueError(msg)
        safe = set(self.safe)
        unsafe = set(self.unsafe)
        if safe & unsafe or (safe | unsafe) != marked:
            msg = "Safe and unsafe refs must partition the marked refs"
            raise ValueError(msg)

    @property
    def total_count(self) -> int:
        return len(self.all)

    @property
    def marked_count(self) -> int:
        return len(self.marked)

    @property
    def unmerged_count(self) -> int:
        return len(self.unmerged)

    @property
    def unsafe_count(self) -> int:
        return len(self.unsafe)

    @property
    def safe_count(self) -> int:
        return len(self.safe)
