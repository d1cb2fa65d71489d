"""Abstract base class for ref scanners.

This module defines the RefScanner interface that the branch and tag
scanners implement.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from gitprune.models.ref import REF_FORMAT, RefKind
from gitprune.utils.shell import BatchResult, run_batch

# Run between fetching and listing: prune stale remote refs, then compact
_MAINTENANCE_COMMANDS: list[list[str]] = [
    ["git", "remote", "prune", "origin"],
    ["git", "gc", "--auto"],
]


class RefScanner(ABC):
    """Abstract base class for all ref scanners.

    Scanners synchronize a repository with its remote and list the refs
    of one kind as raw lines in the ``REF_FORMAT`` wire format.

    Example:
        >>> result = BranchScanner().scan(Path("~/code/repo"))
        >>> for line in result.lines:
        ...     print(line)
    """

    @property
    @abstractmethod
    def kind(self) -> RefKind:
        """Return the ref kind this scanner lists."""

    @property
    @abstractmethod
    def fetch_command(self) -> list[str]:
        """Return the git command that synchronizes the repository."""

    def list_command(self) -> list[str]:
        """Build the for-each-ref command listing refs sorted by commit date."""
        namespace = self.kind.prefix.rstrip("/")
        return [
            "git",
            "for-each-ref",
            "--sort=committerdate",
            f"--format={REF_FORMAT}",
            namespace,
        ]

    def scan(self, repo_path: Path) -> BatchResult:
        """Synchronize the repository and list all refs of this kind.

        Args:
            repo_path: Local clone to run in.

        Returns:
            BatchResult whose lines are the listed refs.
        """
        commands = [self.fetch_command, *_MAINTENANCE_COMMANDS, self.list_command()]
        return run_batch(commands, str(repo_path))
