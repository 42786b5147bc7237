"""Decoding of raw git log records.

The git adapter asks ``git log`` for one record per commit, with the
hash, subject and body separated by ``FIELD_SEPARATOR`` and each record
terminated by ``RECORD_SEPARATOR``. Both are ASCII control characters
that do not occur in ordinary commit text.
"""

from __future__ import annotations

from dataclasses import dataclass

from conventional_release.exceptions import MalformedRecordError

FIELD_SEPARATOR = "\x1f"
RECORD_SEPARATOR = "\x1e"

# Python treats the ASCII separators as whitespace; only these count as blank
_BLANK = " \t\r\n"

# Format string for `git log --pretty=format:`
GIT_LOG_FORMAT = "%h%x1f%s%x1f%b%x1e"

INITIAL_COMMIT_SUBJECT = "initial commit"


@dataclass(frozen=True)
class RawCommit:
    """A single commit as read from the log.

    Attributes:
        hash: Abbreviated commit hash (opaque)
        subject: First line of the commit message
        body: Remainder of the commit message
    """

    hash: str
    subject: str
    body: str = ""

    @property
    def is_initial_commit(self) -> bool:
        """Whether this is the repository's placeholder first commit."""
        return self.subject == INITIAL_COMMIT_SUBJECT


def decode_record(record: str, field_separator: str = FIELD_SEPARATOR) -> RawCommit:
    """Decode one delimited record into a RawCommit.

    Args:
        record: ``hash<sep>subject<sep>body`` without the record terminator
        field_separator: Separator between the three fields

    Returns:
        RawCommit with every field trimmed

    Raises:
        MalformedRecordError: If the hash field is empty
    """
    fields = record.split(field_separator, 2)
    fields += [""] * (3 - len(fields))
    commit_hash, subject, body = (field.strip() for field in fields)

    if not commit_hash:
        raise MalformedRecordError("Failed to parse commit hash", record=record)

    return RawCommit(hash=commit_hash, subject=subject, body=body)


def decode_records(
    text: str,
    field_separator: str = FIELD_SEPARATOR,
    record_separator: str = RECORD_SEPARATOR,
) -> list[RawCommit]:
    """Decode a full log dump, preserving the order records appear in.

    Blank fragments (such as the one after the final terminator) are skipped.
    Only spaces and line breaks count as blank; a fragment holding nothing but
    field separators is a record with an empty hash.
    """
    return [
        decode_record(chunk, field_separator)
        for chunk in text.split(record_separator)
        if chunk.strip(_BLANK)
    ]
