"""Remote branch scanner."""

import logging
from pathlib import Path

from gitprune.models.ref import RefKind
from gitprune.scanners.base import RefScanner
from gitprune.utils.shell import BatchResult, run_batch

logger = logging.getLogger(__name__)


class BranchScanner(RefScanner):
    """Scanner for remote-tracking branches of ``origin``.

    Besides the full listing, it reports which remote branches are not
    yet merged into the default branch.
    """

    @property
    def kind(self) -> RefKind:
        return RefKind.BRANCH

    @property
    def fetch_command(self) -> list[str]:
        return ["git", "fetch", "origin"]

    def scan_unmerged(self, repo_path: Path, default_branch: str | None = None) -> BatchResult:
        """List remote branches with changes not merged into the default branch.

        Output lines look like ``  origin/feat/x`` (leading spaces included).

        Args:
            repo_path: Local clone to run in.
            default_branch: Merge target. None compares against HEAD.

        Returns:
            BatchResult whose lines are the unmerged remote branches.
        """
        args = ["git", "branch", "-r", "--no-merged"]
        if default_branch:
            args.append(default_branch)
        logger.debug(
            "Listing unmerged branches of %s against %s",
            repo_path,
            default_branch or "HEAD",
        )
        return run_batch([args], str(repo_path))
