"""Semantic versions and the release decision table.

The decision is evaluated in a fixed priority order:

1. No prior version: first release, ``0.1.0``, pre-release
2. Any breaking change: major bump
3. Any feature or performance improvement: minor bump
4. Any bug fix: patch bump
5. Otherwise: no release

A version with major ``0`` is always a pre-release.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

from conventional_release.core.classifier import CommitType
from conventional_release.exceptions import InvalidVersionFormatError
from conventional_release.log import get_logger

if TYPE_CHECKING:
    from conventional_release.core.classifier import ClassificationResult

logger = get_logger(__name__)

_VERSION_PATTERN = re.compile(r"([0-9]+)\.([0-9]+)\.([0-9]+)")


class BumpType(StrEnum):
    """Kind of version increment."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    INITIAL = "initial"
    NONE = "none"


@dataclass(frozen=True, order=True)
class Version:
    """A ``MAJOR.MINOR.PATCH`` version. Bumping always returns a new instance."""

    major: int
    minor: int
    patch: int

    def __post_init__(self) -> None:
        if min(self.major, self.minor, self.patch) < 0:
            raise InvalidVersionFormatError(f"{self.major}.{self.minor}.{self.patch}")

    @classmethod
    def parse(cls, value: str) -> Version:
        """Parse ``x.y.z`` where every component is a non-negative integer.

        Raises:
            InvalidVersionFormatError: For anything else, including a ``v``
                prefix or pre-release suffix
        """
        match = _VERSION_PATTERN.fullmatch(value)
        if match is None:
            raise InvalidVersionFormatError(value)
        major, minor, patch = (int(part) for part in match.groups())
        return cls(major, minor, patch)

    def bump(self, bump_type: BumpType) -> Version:
        if bump_type == BumpType.MAJOR:
            return Version(self.major + 1, 0, 0)
        if bump_type == BumpType.MINOR:
            return Version(self.major, self.minor + 1, 0)
        if bump_type == BumpType.PATCH:
            return Version(self.major, self.minor, self.patch + 1)
        return self

    @property
    def is_prerelease(self) -> bool:
        return self.major == 0

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


INITIAL_VERSION = Version(0, 1, 0)


def parse_version(value: str) -> Version:
    """Parse a version string. See ``Version.parse``."""
    return Version.parse(value)


@dataclass(frozen=True)
class ReleaseDecision:
    """Outcome of the calculator when a release should happen.

    Attributes:
        next_version: Version to release
        is_prerelease: Whether the release is flagged as not yet stable
        is_first_release: No prior version existed
        bump: Which rule produced the version
        previous_version: Version the decision was derived from, if any
    """

    next_version: Version
    is_prerelease: bool
    is_first_release: bool
    bump: BumpType
    previous_version: Version | None = None


@dataclass(frozen=True)
class NoRelease:
    """Terminal outcome when no commit affects the version.

    This is not a failure; ``counts`` reports every bucket for auditing.
    """

    version: Version
    counts: dict[str, int] = field(default_factory=dict)


def calculate_bump(result: ClassificationResult) -> BumpType:
    """Pick the strongest applicable bump for the classified commits."""
    if result.breaking:
        return BumpType.MAJOR
    if result.bucket(CommitType.FEAT) or result.bucket(CommitType.PERF):
        return BumpType.MINOR
    if result.bucket(CommitType.FIX):
        return BumpType.PATCH
    return BumpType.NONE


def decide_release(
    result: ClassificationResult,
    previous: Version | None,
) -> ReleaseDecision | NoRelease:
    """Reduce classified commits and the prior version to a release decision.

    Args:
        result: Classified commits
        previous: Version of the latest release, None on the first release

    Returns:
        ReleaseDecision, or NoRelease when nothing affects the version
    """
    if previous is None:
        logger.info("First release: %s (pre-release)", INITIAL_VERSION)
        return ReleaseDecision(
            next_version=INITIAL_VERSION,
            is_prerelease=True,
            is_first_release=True,
            bump=BumpType.INITIAL,
        )

    bump_type = calculate_bump(result)
    if bump_type == BumpType.NONE:
        counts = result.counts()
        logger.info("No version-impacting changes, version remains %s", previous)
        for name, count in counts.items():
            logger.info("  %s: %d", name, count)
        return NoRelease(version=previous, counts=counts)

    next_version = previous.bump(bump_type)
    logger.info("%s version bump: %s -> %s", bump_type.capitalize(), previous, next_version)

    return ReleaseDecision(
        next_version=next_version,
        is_prerelease=next_version.is_prerelease,
        is_first_release=False,
        bump=bump_type,
        previous_version=previous,
    )
