"""Release planning: runs the pipeline from raw commits to a changelog.

``plan_release`` either returns a complete ``ReleasePlan`` or a
``NoRelease`` outcome. Malformed records and invalid prior versions raise
before any decision is made, so a partial plan is never produced.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from conventional_release.core.changelog import render_changelog
from conventional_release.core.classifier import classify_commits
from conventional_release.core.version import NoRelease, Version, decide_release
from conventional_release.log import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from conventional_release.core.changelog import ChangelogFragment, RepositoryLinks
    from conventional_release.core.classifier import ClassificationResult
    from conventional_release.core.records import RawCommit
    from conventional_release.core.version import ReleaseDecision

logger = get_logger(__name__)


@dataclass(frozen=True)
class ReleasePlan:
    """Everything needed to cut a release."""

    decision: ReleaseDecision
    changelog: ChangelogFragment
    classification: ClassificationResult

    @property
    def version(self) -> Version:
        return self.decision.next_version


def plan_release(
    commits: Iterable[RawCommit],
    previous: str | Version | None,
    links: RepositoryLinks,
) -> ReleasePlan | NoRelease:
    """Classify commits and derive the next release.

    Args:
        commits: Commits since the previous release, in log order
        previous: Prior version (without tag prefix), None on first release
        links: Permalink builder for the changelog

    Returns:
        ReleasePlan, or NoRelease when no commit affects the version

    Raises:
        InvalidVersionFormatError: If ``previous`` is not ``x.y.z``
        MalformedRecordError: Propagated from lazy record decoding
    """
    if isinstance(previous, str):
        previous = Version.parse(previous)

    classification = classify_commits(commits)
    if classification.unrecognized:
        logger.info("%d commit(s) with unrecognized type", len(classification.unrecognized))

    decision = decide_release(classification, previous)
    if isinstance(decision, NoRelease):
        return decision

    changelog = render_changelog(classification, decision, links)
    return ReleasePlan(decision=decision, changelog=changelog, classification=classification)
