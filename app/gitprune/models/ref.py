"""Ref kinds and their wire-format constants."""

from enum import Enum

# git for-each-ref format shared by branch and tag queries
REF_FORMAT = "%(refname)|%(creatordate)|%(committerdate)|%(creator)"

REF_FIELD_DELIMITER = "|"


class RefKind(Enum):
    """Kind of git ref handled by a workflow.

    Attributes:
        BRANCH: Remote-tracking branch under refs/remotes/origin/.
        TAG: Tag under refs/tags/.
    """

    BRANCH = "branch"
    TAG = "tag"

    @property
    def prefix(self) -> str:
        """Full ref prefix stripped to obtain the bare name."""
        if self is RefKind.BRANCH:
            return "refs/remotes/origin/"
        return "refs/tags/"

    @property
    def noun(self) -> str:
        """Singular, capitalized label used in report lines."""
        return "Branch" if self is RefKind.BRANCH else "Tag"

    @property
    def label(self) -> str:
        """Plural, capitalized label used in report lines."""
        return "Branches" if self is RefKind.BRANCH else "Tags"
