"""Classification of commits into changelog buckets.

``classify_commits`` folds the commit sequence into a fresh
``ClassificationResult``; nothing is shared between invocations.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

from conventional_release.core.commits import ParsedCommit, scan_breaking_footers
from conventional_release.log import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from conventional_release.core.records import RawCommit

logger = get_logger(__name__)


class CommitType(StrEnum):
    """Recognized commit types. Matching is exact and case-sensitive."""

    FEAT = "feat"
    FIX = "fix"
    PERF = "perf"
    BUILD = "build"
    CHORE = "chore"
    CI = "ci"
    DOCS = "docs"
    STYLE = "style"
    REFACTOR = "refactor"
    TEST = "test"
    REVERT = "revert"


_TYPES_BY_VALUE = {commit_type.value: commit_type for commit_type in CommitType}


@dataclass(frozen=True)
class BucketEntry:
    """One classified commit in a type bucket."""

    scope: str
    description: str
    hash: str


@dataclass(frozen=True)
class BreakingEntry:
    """One breaking change, from a ``!`` marker or a body footer."""

    scope: str
    content: str


@dataclass(frozen=True)
class UnrecognizedCommitType:
    """A commit whose type is not one of ``CommitType``.

    This is an observation for the caller, not an error.
    """

    hash: str
    type: str
    has_separator: bool = True


@dataclass
class ClassificationResult:
    """Buckets accumulated over one pass of the commit sequence.

    Attributes:
        buckets: Entries per recognized type, in processing order
        breaking: Breaking changes, in processing order
        unrecognized: Commits whose type matched no bucket
        skipped_initial: Number of ``initial commit`` records ignored
    """

    buckets: dict[CommitType, list[BucketEntry]] = field(
        default_factory=lambda: {commit_type: [] for commit_type in CommitType}
    )
    breaking: list[BreakingEntry] = field(default_factory=list)
    unrecognized: list[UnrecognizedCommitType] = field(default_factory=list)
    skipped_initial: int = 0

    def bucket(self, commit_type: CommitType) -> list[BucketEntry]:
        return self.buckets[commit_type]

    def counts(self) -> dict[str, int]:
        """Number of entries in every bucket, breaking changes first."""
        counts = {"breaking": len(self.breaking)}
        for commit_type, entries in self.buckets.items():
            counts[str(commit_type)] = len(entries)
        return counts

    @property
    def is_empty(self) -> bool:
        return not self.breaking and not any(self.buckets.values())


def classify_commit(commit: RawCommit, result: ClassificationResult) -> ParsedCommit | None:
    """Add one commit to ``result``.

    Args:
        commit: Decoded log record
        result: Accumulator to update

    Returns:
        The parsed commit, or None for the ``initial commit`` placeholder
    """
    if commit.is_initial_commit:
        logger.info("Skipping initial commit %s", commit.hash)
        result.skipped_initial += 1
        return None

    parsed = ParsedCommit.from_raw(commit)

    if parsed.breaking_inline:
        result.breaking.append(BreakingEntry(scope=parsed.scope, content=parsed.description))

    for footer in scan_breaking_footers(commit.body):
        result.breaking.append(BreakingEntry(scope=parsed.scope, content=footer.content))

    commit_type = _TYPES_BY_VALUE.get(parsed.type)
    if commit_type is None:
        if not parsed.has_separator:
            logger.warning("Commit %s has no type separator: %r", parsed.hash, commit.subject)
        else:
            logger.warning("Unknown commit type %r for commit %s", parsed.type, parsed.hash)
        result.unrecognized.append(
            UnrecognizedCommitType(
                hash=parsed.hash,
                type=parsed.type,
                has_separator=parsed.has_separator,
            )
        )
        return parsed

    result.buckets[commit_type].append(
        BucketEntry(scope=parsed.scope, description=parsed.description, hash=parsed.hash)
    )
    return parsed


def classify_commits(commits: Iterable[RawCommit]) -> ClassificationResult:
    """Classify commits in the order they are delivered."""
    result = ClassificationResult()
    for commit in commits:
        classify_commit(commit, result)
    logger.debug("Classified commits: %s", result.counts())
    return result
