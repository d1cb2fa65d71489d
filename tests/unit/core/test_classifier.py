"""Unit tests for ref classification.

Tests for rule matching, unmerged partitioning, percentages and
ref name extraction.
"""

import re

import pytest
from gitprune.core.classifier import (
    classify_branches,
    classify_tags,
    extract_ref_name,
    match_rules,
    partition_unmerged,
    percentage,
)
from gitprune.models.ref import RefKind


def _compile(*patterns: str) -> list[re.Pattern[str]]:
    return [re.compile(p) for p in patterns]


class TestMatchRules:
    """Tests for match_rules function."""

    def test_matches_feature_branch_only(self) -> None:
        """A /feat/ rule selects the feature branch and leaves main alone."""
        lines = ["refs/remotes/origin/feat/x ...", "refs/remotes/origin/main ..."]

        result = match_rules(lines, _compile(r"/feat/"))

        assert result == ["refs/remotes/origin/feat/x ..."]

    def test_result_is_subset_and_every_line_matches(self, branch_lines: list[str]) -> None:
        """Every returned line comes from the input and matches a rule."""
        patterns = _compile(r"/feat/", r"/fix/")

        result = match_rules(branch_lines, patterns)

        assert set(result) <= set(branch_lines)
        assert all(any(p.search(line) for p in patterns) for line in result)
        assert len(result) == 3

    def test_line_matching_several_rules_appears_once(self) -> None:
        """Lines matched by more than one rule are deduplicated."""
        lines = ["refs/remotes/origin/feat/fix/x|date"]

        result = match_rules(lines, _compile(r"/feat/", r"/fix/"))

        assert result == ["refs/remotes/origin/feat/fix/x|date"]

    def test_duplicate_input_lines_deduplicated(self) -> None:
        """Identical input lines produce a single result entry."""
        line = "refs/remotes/origin/feat/x|date"

        assert match_rules([line, line], _compile(r"/feat/")) == [line]

    def test_preserves_input_order(self) -> None:
        """Results follow input order regardless of rule order."""
        lines = [
            "refs/remotes/origin/fix/a|1",
            "refs/remotes/origin/feat/b|2",
            "refs/remotes/origin/fix/c|3",
        ]

        result = match_rules(lines, _compile(r"/feat/", r"/fix/"))

        assert result == lines

    def test_empty_lines(self) -> None:
        """No lines yields an empty result."""
        assert match_rules([], _compile(r"/feat/")) == []

    def test_empty_rules(self, branch_lines: list[str]) -> None:
        """No rules yields an empty result, not an error."""
        assert match_rules(branch_lines, []) == []


class TestPartitionUnmerged:
    """Tests for partition_unmerged function."""

    def test_trimmed_unmerged_name_marks_line_unsafe(self) -> None:
        """Leading spaces of git branch output are trimmed before matching."""
        marked = ["refs/remotes/origin/feat/x date1"]

        unsafe, safe = partition_unmerged(marked, ["  origin/feat/x"])

        assert unsafe == marked
        assert safe == []

    def test_no_unmerged_means_all_safe(self, branch_lines: list[str]) -> None:
        """With an empty unmerged set everything marked is safe."""
        unsafe, safe = partition_unmerged(branch_lines, [])

        assert unsafe == []
        assert safe == branch_lines

    def test_empty_marked(self) -> None:
        """With nothing marked both tiers are empty."""
        assert partition_unmerged([], ["  origin/feat/x"]) == ([], [])

    def test_partition_law(self, branch_lines: list[str], unmerged_lines: list[str]) -> None:
        """Safe and unsafe are disjoint and together form the marked set."""
        unsafe, safe = partition_unmerged(branch_lines, unmerged_lines)

        assert set(safe) | set(unsafe) == set(branch_lines)
        assert set(safe) & set(unsafe) == set()

    def test_substring_containment_flags_near_ambiguous_names(self) -> None:
        """An unmerged name that is a prefix of another ref flags both.

        Containment is a substring test: origin/feat/x is found inside
        origin/feat/x-2 as well, so the merged x-2 branch is also kept.
        """
        marked = [
            "refs/remotes/origin/feat/x|2021-01-01",
            "refs/remotes/origin/feat/x-2|2021-01-02",
            "refs/remotes/origin/feat/y|2021-01-03",
        ]

        unsafe, safe = partition_unmerged(marked, ["  origin/feat/x"])

        assert unsafe == marked[:2]
        assert safe == marked[2:]

    def test_untrimmed_trailing_whitespace_is_not_stripped(self) -> None:
        """Only leading whitespace is trimmed from unmerged entries."""
        marked = ["refs/remotes/origin/feat/x|2021-01-01"]

        unsafe, safe = partition_unmerged(marked, ["  origin/feat/x "])

        assert unsafe == []
        assert safe == marked


class TestPercentage:
    """Tests for percentage function."""

    def test_simple_ratio(self) -> None:
        """3 of 10 is 30 percent."""
        assert percentage(3, 10) == 30.0

    def test_rounds_to_three_decimals(self) -> None:
        """Percentages are rounded to three decimal digits."""
        assert percentage(1, 3) == 33.333
        assert percentage(2, 3) == 66.667

    def test_zero_total_returns_none(self) -> None:
        """A zero total yields None instead of raising."""
        assert percentage(0, 0) is None
        assert percentage(5, 0) is None


class TestExtractRefName:
    """Tests for extract_ref_name function."""

    def test_branch_name(self) -> None:
        """The 20-character remote prefix is stripped up to the delimiter."""
        line = "refs/remotes/origin/feat/login-fix|2021-01-01|..."

        assert extract_ref_name(line, RefKind.BRANCH) == "feat/login-fix"

    def test_branch_name_space_delimited(self) -> None:
        """Space-delimited lines are also supported."""
        line = "refs/remotes/origin/fix/crash Fri Jan 1 09:00:00 2021 +0100"

        assert extract_ref_name(line, RefKind.BRANCH) == "fix/crash"

    def test_tag_name(self) -> None:
        """The refs/tags/ prefix is stripped for tags."""
        assert extract_ref_name("refs/tags/v1.0.1-nightly|x|y|z", RefKind.TAG) == "v1.0.1-nightly"

    def test_line_without_delimiter(self) -> None:
        """A bare ref without metadata still yields its name."""
        assert extract_ref_name("refs/tags/v2", RefKind.TAG) == "v2"

    @pytest.mark.parametrize(
        "line",
        [
            "origin/feat/x|2021-01-01",
            "refs/heads/feat/x|2021-01-01",
            "refs/remotes/origin/|2021-01-01",
            "",
        ],
    )
    def test_malformed_lines_return_none(self, line: str) -> None:
        """Lines without the expected prefix or name yield None."""
        assert extract_ref_name(line, RefKind.BRANCH) is None

    def test_tag_line_is_not_a_branch(self) -> None:
        """A tag line is malformed when read as a branch."""
        assert extract_ref_name("refs/tags/v1|x", RefKind.BRANCH) is None


class TestClassify:
    """Tests for classify_branches and classify_tags."""

    def test_classify_branches(self, branch_lines: list[str], unmerged_lines: list[str]) -> None:
        """Branches are split into marked, unsafe and safe tiers."""
        partition = classify_branches(branch_lines, unmerged_lines, _compile(r"/feat/", r"/fix/"))

        assert partition.total_count == 5
        assert partition.marked_count == 3
        assert partition.unmerged_count == 1
        assert partition.unsafe == (branch_lines[3],)
        assert partition.safe == (branch_lines[1], branch_lines[2])

    def test_classify_is_idempotent(
        self, branch_lines: list[str], unmerged_lines: list[str]
    ) -> None:
        """Classifying the same input twice yields equal partitions."""
        patterns = _compile(r"/feat/", r"/fix/")

        first = classify_branches(branch_lines, unmerged_lines, patterns)
        second = classify_branches(branch_lines, unmerged_lines, patterns)

        assert first == second

    def test_classify_tags_has_no_unsafe_tier(self, tag_lines: list[str]) -> None:
        """Every marked tag is safe."""
        partition = classify_tags(tag_lines, _compile(r"-nightly"))

        assert partition.marked == (tag_lines[1], tag_lines[2])
        assert partition.safe == partition.marked
        assert partition.unsafe == ()
        assert partition.unmerged == ()
