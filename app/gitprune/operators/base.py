"""Abstract base class for ref operators.

This module defines the RefOperator interface that the branch and tag
operators implement.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator
from pathlib import Path

from gitprune.models.action import DeletionResult
from gitprune.models.ref import RefKind
from gitprune.utils.shell import run_batch

logger = logging.getLogger(__name__)


class RefOperator(ABC):
    """Abstract base class for all ref operators.

    Operators delete refs, either with one git invocation per ref or
    with a single invocation covering every ref.

    Attributes:
        one_at_a_time: If True, issue one invocation per ref name.

    Example:
        >>> operator = BranchOperator(one_at_a_time=False)
        >>> for result in operator.iter_delete(Path("~/code/repo"), ["feat/x", "fix/y"]):
        ...     print(result.names, result.success)
    """

    def __init__(self, one_at_a_time: bool = True) -> None:
        """Initialize the operator.

        Args:
            one_at_a_time: If True, issue one invocation per ref name.
        """
        self._one_at_a_time = one_at_a_time

    @property
    def one_at_a_time(self) -> bool:
        """Check if refs are deleted one invocation at a time."""
        return self._one_at_a_time

    @property
    @abstractmethod
    def kind(self) -> RefKind:
        """Return the ref kind this operator deletes."""

    @abstractmethod
    def delete_commands(self, names: list[str]) -> list[list[str]]:
        """Build the git commands deleting the given refs.

        Args:
            names: Bare ref names (prefix already stripped).

        Returns:
            Ordered list of argument lists forming one invocation.
        """

    def iter_delete(self, repo_path: Path, names: list[str]) -> Iterator[DeletionResult]:
        """Delete refs, yielding a result after each invocation.

        git reports failures per invocation, not per name, so a batched
        invocation yields a single result covering all names.

        Args:
            repo_path: Local clone to run in.
            names: Bare ref names to delete.

        Yields:
            One DeletionResult per invocation.
        """
        if not names:
            return

        groups = [[name] for name in names] if self._one_at_a_time else [list(names)]

        for group in groups:
            logger.info(
                "Deleting %s(s) in %s: %s",
                self.kind.value,
                repo_path,
                ", ".join(group),
            )
            batch = run_batch(self.delete_commands(group), str(repo_path))
            yield DeletionResult(
                kind=self.kind,
                names=tuple(group),
                success=batch.success,
                error="\n".join(batch.errors) or None,
            )
