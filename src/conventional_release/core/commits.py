"""Conventional commit subject and body analysis.

Subjects follow ``type(scope)!: description``:

- ``type`` is the text before the scope parenthesis, or before the first
  colon when there is no scope
- ``scope`` runs from the first ``(`` to the first ``)`` that is directly
  followed by ``:`` or ``!:``, so it may hold parentheses and colons
- ``!`` right before the colon marks an inline breaking change

Bodies are scanned paragraph by paragraph for ``BREAKING CHANGE: `` footers.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from conventional_release.core.records import RawCommit

BREAKING_CHANGE_MARKER = "BREAKING CHANGE: "

_PARAGRAPH_SPLIT = re.compile(r"\r?\n[ \t\r]*\n")

# First ")" directly followed by ":" or "!:"
_SCOPE_END = re.compile(r"\)(!?):")


@dataclass(frozen=True)
class ParsedCommit:
    """Structured view of a commit subject.

    Attributes:
        hash: Commit hash, copied from the raw record
        type: Commit type, e.g. ``feat``; the whole subject if it has no colon
        scope: Parenthesized scope, empty when absent
        description: Text after the type separator with all whitespace removed
        breaking_inline: Subject carries ``!`` right before the colon
        has_separator: Subject contains a colon at all
    """

    hash: str
    type: str
    scope: str = ""
    description: str = ""
    breaking_inline: bool = False
    has_separator: bool = True

    @classmethod
    def from_raw(cls, commit: RawCommit) -> ParsedCommit:
        """Analyze the subject of a raw commit."""
        return analyze_subject(commit.subject, commit_hash=commit.hash)


@dataclass(frozen=True)
class BreakingChangeFooter:
    """Content of one ``BREAKING CHANGE:`` paragraph."""

    content: str


def analyze_subject(subject: str, commit_hash: str = "") -> ParsedCommit:
    """Split a subject line into type, scope, breaking marker and description.

    A subject without any colon never raises: the whole subject becomes the
    type, the description is empty and ``has_separator`` is False.

    Args:
        subject: Trimmed subject line
        commit_hash: Hash to carry on the result

    Returns:
        ParsedCommit for the subject
    """
    open_paren = subject.find("(")
    scope_end = _SCOPE_END.search(subject)
    if open_paren != -1 and scope_end and open_paren < scope_end.start():
        commit_type = subject[:open_paren]
        # A colon before the parenthesis means the parenthesis is in the description
        if ":" not in commit_type:
            return ParsedCommit(
                hash=commit_hash,
                type=commit_type,
                scope=subject[open_paren + 1 : scope_end.start()],
                description="".join(subject[scope_end.end() :].split()),
                breaking_inline=bool(scope_end.group(1)),
            )

    colon = subject.find(":")
    if colon == -1:
        return ParsedCommit(hash=commit_hash, type=subject, has_separator=False)

    commit_type = subject[:colon]
    description = "".join(subject[colon + 1 :].split())

    breaking_inline = len(commit_type) > 1 and commit_type.endswith("!")
    if breaking_inline:
        commit_type = commit_type[:-1]

    return ParsedCommit(
        hash=commit_hash,
        type=commit_type,
        description=description,
        breaking_inline=breaking_inline,
    )


def scan_breaking_footers(body: str) -> list[BreakingChangeFooter]:
    """Extract every ``BREAKING CHANGE: `` paragraph from a commit body.

    Paragraphs are separated by blank lines; line breaks inside a paragraph
    are collapsed to single spaces. Matches are returned in body order and
    are not deduplicated.
    """
    footers = []
    for paragraph in _PARAGRAPH_SPLIT.split(body):
        text = " ".join(line.strip() for line in paragraph.strip().splitlines())
        if text.startswith(BREAKING_CHANGE_MARKER):
            footers.append(BreakingChangeFooter(content=text[len(BREAKING_CHANGE_MARKER) :]))
    return footers
