"""Remote branch operator."""

from gitprune.models.ref import RefKind
from gitprune.operators.base import RefOperator


class BranchOperator(RefOperator):
    """Deletes branches on ``origin`` with ``git push origin --delete``."""

    @property
    def kind(self) -> RefKind:
        return RefKind.BRANCH

    def delete_commands(self, names: list[str]) -> list[list[str]]:
        return [["git", "push", "origin", "--delete", *names]]
