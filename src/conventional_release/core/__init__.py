"""Core business logic for conventional-release.

This module contains the fundamental building blocks:
- Raw log record decoding
- Conventional commit subject and footer parsing
- Classification into changelog buckets
- Version bump decisions
- Changelog rendering
"""

from __future__ import annotations

from conventional_release.core.changelog import (
    ChangelogFragment,
    ChangelogSection,
    RepositoryLinks,
    build_release_entry,
    render_changelog,
)
from conventional_release.core.classifier import (
    BreakingEntry,
    BucketEntry,
    ClassificationResult,
    CommitType,
    UnrecognizedCommitType,
    classify_commit,
    classify_commits,
)
from conventional_release.core.commits import (
    BreakingChangeFooter,
    ParsedCommit,
    analyze_subject,
    scan_breaking_footers,
)
from conventional_release.core.records import RawCommit, decode_record, decode_records
from conventional_release.core.release import ReleasePlan, plan_release
from conventional_release.core.version import (
    BumpType,
    NoRelease,
    ReleaseDecision,
    Version,
    calculate_bump,
    decide_release,
    parse_version,
)

__all__ = [
    # Commits
    "BreakingChangeFooter",
    # Classification
    "BreakingEntry",
    "BucketEntry",
    # Version
    "BumpType",
    # Changelog
    "ChangelogFragment",
    "ChangelogSection",
    "ClassificationResult",
    "CommitType",
    "NoRelease",
    "ParsedCommit",
    # Records
    "RawCommit",
    "ReleaseDecision",
    # Release
    "ReleasePlan",
    "RepositoryLinks",
    "UnrecognizedCommitType",
    "Version",
    "analyze_subject",
    "build_release_entry",
    "calculate_bump",
    "classify_commit",
    "classify_commits",
    "decide_release",
    "decode_record",
    "decode_records",
    "parse_version",
    "plan_release",
    "render_changelog",
    "scan_breaking_footers",
]
