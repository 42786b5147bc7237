"""Tests for commit classification."""

from __future__ import annotations

import logging

import pytest

from conventional_release.core.classifier import (
    BreakingEntry,
    BucketEntry,
    ClassificationResult,
    CommitType,
    UnrecognizedCommitType,
    classify_commit,
    classify_commits,
)
from conventional_release.core.records import RawCommit


class TestClassifyCommit:
    """Tests for classify_commit()."""

    @pytest.mark.parametrize("commit_type", list(CommitType))
    def test_every_known_type_has_a_bucket(self, commit_type: CommitType):
        """Each recognized type lands in its own bucket."""
        result = ClassificationResult()
        classify_commit(RawCommit("h1", f"{commit_type}: something"), result)

        assert result.bucket(commit_type) == [BucketEntry("", "something", "h1")]
        assert sum(result.counts().values()) == 1

    def test_scope_is_recorded(self, fix_commit: RawCommit):
        """Bucket entries carry the scope."""
        result = ClassificationResult()
        classify_commit(fix_commit, result)

        assert result.bucket(CommitType.FIX) == [
            BucketEntry(scope="core", description="handlenullresponse", hash="fix456")
        ]

    @pytest.mark.parametrize(
        ("subject", "scope"),
        [("feat(a)(b): x", "a)(b"), ("feat(a(b)): x", "a(b)"), ("feat(a:b): x", "a:b")],
    )
    def test_unusual_scope_still_a_feature(self, subject: str, scope: str):
        """Parentheses or colons inside the scope keep the commit a feature."""
        result = ClassificationResult()
        classify_commit(RawCommit("h1", subject), result)

        assert result.bucket(CommitType.FEAT) == [BucketEntry(scope, "x", "h1")]
        assert result.unrecognized == []

    def test_inline_breaking_in_both_buckets(self):
        """'feat!:' lands in Features and in the breaking bucket."""
        result = ClassificationResult()
        classify_commit(RawCommit("h1", "feat!: drop X"), result)

        assert result.bucket(CommitType.FEAT) == [BucketEntry("", "dropX", "h1")]
        assert result.breaking == [BreakingEntry(scope="", content="dropX")]

    def test_footer_breaking_uses_commit_scope(self, breaking_commit: RawCommit):
        """Footer entries are tagged with the commit's scope."""
        result = ClassificationResult()
        classify_commit(breaking_commit, result)

        assert result.breaking == [BreakingEntry(scope="api", content="/user is now /users")]
        assert len(result.bucket(CommitType.REFACTOR)) == 1

    def test_inline_and_footer_are_cumulative(self):
        """Marker and footers each add an entry."""
        commit = RawCommit(
            "h1",
            "fix(cli)!: rename flag",
            "BREAKING CHANGE: --foo is now --bar\n\nBREAKING CHANGE: -f removed",
        )
        result = ClassificationResult()
        classify_commit(commit, result)

        assert result.breaking == [
            BreakingEntry("cli", "renameflag"),
            BreakingEntry("cli", "--foo is now --bar"),
            BreakingEntry("cli", "-f removed"),
        ]
        assert len(result.bucket(CommitType.FIX)) == 1

    def test_unrecognized_type_is_observed(self, caplog: pytest.LogCaptureFixture):
        """Unknown types go to no bucket but are reported."""
        caplog.set_level(logging.WARNING, logger="conventional_release")
        result = ClassificationResult()
        parsed = classify_commit(RawCommit("h1", "wip: half done"), result)

        assert parsed is not None
        assert result.is_empty
        assert result.unrecognized == [UnrecognizedCommitType(hash="h1", type="wip")]
        assert "Unknown commit type 'wip'" in caplog.text

    def test_type_match_is_case_sensitive(self):
        """'Feat' is not 'feat'."""
        result = ClassificationResult()
        classify_commit(RawCommit("h1", "Feat: nope"), result)

        assert result.is_empty
        assert result.unrecognized[0].type == "Feat"

    def test_subject_without_colon_is_flagged(self):
        """Malformed subjects are reported, not dropped silently."""
        result = ClassificationResult()
        classify_commit(RawCommit("h1", "Merge branch main"), result)

        assert result.unrecognized == [
            UnrecognizedCommitType(hash="h1", type="Merge branch main", has_separator=False)
        ]

    def test_unrecognized_type_still_records_breaking(self):
        """Breaking markers count even when the type is unknown."""
        result = ClassificationResult()
        classify_commit(RawCommit("h1", "wip!: rip out api"), result)

        assert result.breaking == [BreakingEntry("", "ripoutapi")]
        assert not any(result.buckets.values())

    def test_initial_commit_is_skipped(self):
        """'initial commit' contributes nothing, not even footers."""
        commit = RawCommit("h1", "initial commit", "BREAKING CHANGE: everything")
        result = ClassificationResult()

        assert classify_commit(commit, result) is None
        assert result.is_empty
        assert result.unrecognized == []
        assert result.skipped_initial == 1


class TestClassifyCommits:
    """Tests for classify_commits()."""

    def test_sample_commits(self, sample_commits: list[RawCommit]):
        """Classify a mixed history."""
        result = classify_commits(sample_commits)

        assert result.counts() == {
            "breaking": 1,
            "feat": 1,
            "fix": 1,
            "perf": 0,
            "build": 0,
            "chore": 1,
            "ci": 0,
            "docs": 1,
            "style": 0,
            "refactor": 1,
            "test": 0,
            "revert": 0,
        }
        assert [u.type for u in result.unrecognized] == ["wip"]
        assert result.skipped_initial == 1

    def test_insertion_order_follows_input(self):
        """Bucket order is processing order."""
        commits = [
            RawCommit("c3", "feat: third"),
            RawCommit("c2", "feat: second"),
            RawCommit("c1", "feat: first"),
        ]
        result = classify_commits(commits)

        assert [e.hash for e in result.bucket(CommitType.FEAT)] == ["c3", "c2", "c1"]

    def test_each_call_gets_fresh_result(self, feat_commit: RawCommit):
        """No state leaks between invocations."""
        first = classify_commits([feat_commit])
        second = classify_commits([feat_commit])

        assert first is not second
        assert len(second.bucket(CommitType.FEAT)) == 1

    def test_accepts_generator(self):
        """Any iterable of commits works."""
        result = classify_commits(RawCommit(f"h{i}", "fix: x") for i in range(3))

        assert len(result.bucket(CommitType.FIX)) == 3
