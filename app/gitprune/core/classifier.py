"""Ref classification.

Matches raw ref lines against an area's rules and splits the matches
into refs that are safe to delete and refs that still carry unmerged
changes. Every function here is pure: the same input always yields
the same partition.
"""

import logging
import re
from collections.abc import Iterable, Sequence

from gitprune.models.partition import RefPartition
from gitprune.models.ref import REF_FIELD_DELIMITER, RefKind

logger = logging.getLogger(__name__)

# A bare ref name ends at the first field delimiter or whitespace
_NAME_END = re.compile(rf"[{re.escape(REF_FIELD_DELIMITER)}\s]")


def match_rules(lines: Iterable[str], patterns: Sequence[re.Pattern[str]]) -> list[str]:
    """Return the lines that match any of the given patterns.

    Duplicates are dropped by exact line equality. The result keeps the
    order in which lines first appear in the input.

    Args:
        lines: Raw ref lines.
        patterns: Compiled rules of a single area.

    Returns:
        Matching lines, deduplicated, in input order.
    """
    if not patterns:
        return []

    matched: dict[str, None] = {}
    for line in lines:
        if line in matched:
            continue
        if any(pattern.search(line) for pattern in patterns):
            matched[line] = None
    return list(matched)


def partition_unmerged(
    marked: Sequence[str],
    unmerged: Iterable[str],
) -> tuple[list[str], list[str]]:
    """Split marked refs into unsafe and safe tiers.

    A marked line is unsafe when it contains, as a substring, any
    unmerged entry with its leading whitespace trimmed. This is a
    containment test, not a name comparison.

    Args:
        marked: Lines marked for deletion.
        unmerged: Lines reported by ``git branch -r --no-merged``.

    Returns:
        Tuple of (unsafe, safe), both in the order of ``marked``.
    """
    needles = [entry.lstrip() for entry in unmerged]
    unsafe = [line for line in marked if any(needle in line for needle in needles)]
    unsafe_set = set(unsafe)
    safe = [line for line in marked if line not in unsafe_set]
    return unsafe, safe


def percentage(count: int, total: int) -> float | None:
    """Percentage of ``count`` in ``total`` rounded to 3 decimals.

    Returns:
        The percentage, or None when total is zero.
    """
    if total == 0:
        return None
    return round(count / total * 100, 3)


def extract_ref_name(line: str, kind: RefKind) -> str | None:
    """Extract the bare ref name from a raw ref line.

    Strips the fixed prefix of the ref kind and cuts at the first field
    delimiter or whitespace.

    Args:
        line: Raw ref line, e.g. ``refs/remotes/origin/feat/x|2021-01-01|...``.
        kind: Kind of ref the line describes.

    Returns:
        Bare name (e.g. ``feat/x``), or None if the line is malformed.
    """
    if not line.startswith(kind.prefix):
        logger.debug("Ref line lacks prefix %r: %r", kind.prefix, line[:100])
        return None

    name = _NAME_END.split(line[len(kind.prefix) :], maxsplit=1)[0]
    if not name:
        logger.debug("Ref line has an empty name: %r", line[:100])
        return None
    return name


def classify_branches(
    all_lines: Sequence[str],
    unmerged: Sequence[str],
    patterns: Sequence[re.Pattern[str]],
) -> RefPartition:
    """Classify the branch lines of one area."""
    marked = match_rules(all_lines, patterns)
    unsafe, safe = partition_unmerged(marked, unmerged)
    return RefPartition(
        all=tuple(all_lines),
        marked=tuple(marked),
        unmerged=tuple(unmerged),
        unsafe=tuple(unsafe),
        safe=tuple(safe),
    )


def classify_tags(
    all_lines: Sequence[str],
    patterns: Sequence[re.Pattern[str]],
) -> RefPartition:
    """Classify the tag lines of one area.

    Tags have no unmerged tier, so every marked tag is safe.
    """
    marked = tuple(match_rules(all_lines, patterns))
    return RefPartition(all=tuple(all_lines), marked=marked, safe=marked)
