"""Tag operator."""

from gitprune.models.ref import RefKind
from gitprune.operators.base import RefOperator


class TagOperator(RefOperator):
    """Deletes tags on ``origin`` and optionally in the local clone.

    The remote deletion pushes an empty source for each tag
    (``:refs/tags/<name>``), which git treats as a delete directive.

    Attributes:
        delete_local: If True, also run ``git tag -d`` for the same tags.
    """

    def __init__(self, one_at_a_time: bool = True, delete_local: bool = False) -> None:
        """Initialize the operator.

        Args:
            one_at_a_time: If True, issue one invocation per tag.
            delete_local: If True, also delete the tags locally.
        """
        super().__init__(one_at_a_time=one_at_a_time)
        self._delete_local = delete_local

    @property
    def delete_local(self) -> bool:
        return self._delete_local

    @property
    def kind(self) -> RefKind:
        return RefKind.TAG

    def delete_commands(self, names: list[str]) -> list[list[str]]:
        refspecs = [f":{RefKind.TAG.prefix}{name}" for name in names]
        commands = [["git", "push", "origin", *refspecs]]
        if self._delete_local:
            commands.append(["git", "tag", "-d", *names])
        return commands
