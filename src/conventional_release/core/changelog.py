"""Changelog rendering from classified commits.

Rendering is pure: the same buckets and links always produce the same
text. Writing the result to a file is handled by
``conventional_release.project.changelog_file``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING

from conventional_release.core.classifier import CommitType

if TYPE_CHECKING:
    from conventional_release.core.classifier import (
        BreakingEntry,
        BucketEntry,
        ClassificationResult,
    )
    from conventional_release.core.version import ReleaseDecision

DEFAULT_WEB_URL = "https://github.com"

INITIAL_RELEASE_NOTES = "initial commit"

BREAKING_CHANGES_TITLE = "Breaking Changes"

# Display order after the breaking changes section
SECTION_TITLES: dict[CommitType, str] = {
    CommitType.FEAT: "Features",
    CommitType.FIX: "Bug Fixes",
    CommitType.PERF: "Performance Improvements",
    CommitType.CI: "Continuous Integration",
    CommitType.DOCS: "Documentation",
    CommitType.STYLE: "Styles",
    CommitType.CHORE: "Chores",
    CommitType.REFACTOR: "Code Refactoring",
    CommitType.TEST: "Tests",
    CommitType.BUILD: "Build",
    CommitType.REVERT: "Reverts",
}


@dataclass(frozen=True)
class RepositoryLinks:
    """Builds permalinks for a hosted repository.

    Links are plain string templates; nothing checks that they resolve.
    """

    owner: str
    repository: str
    web_url: str = DEFAULT_WEB_URL
    tag_prefix: str = "v"

    @property
    def base(self) -> str:
        return f"{self.web_url.rstrip('/')}/{self.owner}/{self.repository}"

    def commit_url(self, commit_hash: str) -> str:
        return f"{self.base}/commit/{commit_hash}"

    def tag_url(self, version: object) -> str:
        return f"{self.base}/releases/tag/{self.tag_prefix}{version}"

    def compare_url(self, previous: object, current: object) -> str:
        return f"{self.base}/compare/{self.tag_prefix}{previous}...{self.tag_prefix}{current}"


@dataclass(frozen=True)
class ChangelogSection:
    title: str
    lines: tuple[str, ...]

    def render(self) -> str:
        return "\n".join([f"**{self.title}**", "", *self.lines])


@dataclass(frozen=True)
class ChangelogFragment:
    """Ordered changelog sections for one release.

    A fragment with ``placeholder`` set (first release) has no sections and
    renders as the placeholder text.
    """

    sections: tuple[ChangelogSection, ...] = field(default_factory=tuple)
    placeholder: str | None = None

    def render(self) -> str:
        if self.placeholder is not None:
            return self.placeholder
        return "\n\n".join(section.render() for section in self.sections)

    def __str__(self) -> str:
        return self.render()


def format_entry(entry: BucketEntry, links: RepositoryLinks) -> str:
    """Format a commit as ``* scope: description ([#hash](url))``."""
    link = f"([#{entry.hash}]({links.commit_url(entry.hash)}))"
    if entry.scope:
        return f"* {entry.scope}: {entry.description} {link}"
    return f"* {entry.description} {link}"


def format_breaking_entry(entry: BreakingEntry) -> str:
    """Format a breaking change. These carry no commit hash."""
    if entry.scope:
        return f"* {entry.scope}: {entry.content}"
    return f"* {entry.content}"


def render_changelog(
    result: ClassificationResult,
    decision: ReleaseDecision,
    links: RepositoryLinks,
) -> ChangelogFragment:
    """Build the changelog fragment for a release.

    Args:
        result: Classified commits
        decision: Release decision the fragment belongs to
        links: Permalink builder for commit hashes

    Returns:
        Fragment with one section per non-empty bucket, or the placeholder
        fragment on the first release
    """
    if decision.is_first_release:
        return ChangelogFragment(placeholder=INITIAL_RELEASE_NOTES)

    sections = []
    if result.breaking:
        sections.append(
            ChangelogSection(
                title=BREAKING_CHANGES_TITLE,
                lines=tuple(format_breaking_entry(entry) for entry in result.breaking),
            )
        )

    for commit_type, title in SECTION_TITLES.items():
        entries = result.bucket(commit_type)
        if entries:
            sections.append(
                ChangelogSection(
                    title=title,
                    lines=tuple(format_entry(entry, links) for entry in entries),
                )
            )

    return ChangelogFragment(sections=tuple(sections))


def release_heading(
    decision: ReleaseDecision,
    links: RepositoryLinks,
    release_date: date,
) -> str:
    """Heading line for a release, linking to the tag or the comparison."""
    if decision.is_first_release or decision.previous_version is None:
        url = links.tag_url(decision.next_version)
    else:
        url = links.compare_url(decision.previous_version, decision.next_version)
    return f"## [{decision.next_version}]({url}) ({release_date.isoformat()})"


def build_release_entry(
    decision: ReleaseDecision,
    fragment: ChangelogFragment,
    links: RepositoryLinks,
    release_date: date,
) -> str:
    """Full changelog entry: heading, blank line, fragment text."""
    return f"{release_heading(decision, links, release_date)}\n\n{fragment.render()}"
