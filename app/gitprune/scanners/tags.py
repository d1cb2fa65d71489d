"""Tag scanner."""

from gitprune.models.ref import RefKind
from gitprune.scanners.base import RefScanner


class TagScanner(RefScanner):
    """Scanner for tags, fetched from ``origin`` before listing."""

    @property
    def kind(self) -> RefKind:
        return RefKind.TAG

    @property
    def fetch_command(self) -> list[str]:
        return ["git", "fetch", "origin", "--tags"]
