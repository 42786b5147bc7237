"""Tests for raw log record decoding."""

from __future__ import annotations

import pytest

from conventional_release.core.records import (
    FIELD_SEPARATOR,
    RECORD_SEPARATOR,
    RawCommit,
    decode_record,
    decode_records,
)
from conventional_release.exceptions import MalformedRecordError


def _record(*fields: str) -> str:
    return FIELD_SEPARATOR.join(fields)


class TestDecodeRecord:
    """Tests for decode_record()."""

    def test_decode_full_record(self):
        """Decode hash, subject and body."""
        commit = decode_record(_record("abc123", "feat: add x", "details"))

        assert commit == RawCommit(hash="abc123", subject="feat: add x", body="details")

    def test_fields_are_trimmed(self):
        """Whitespace around every field is removed."""
        commit = decode_record(_record("  abc123 ", "  fix: y  ", "\nbody\n\n"))

        assert commit.hash == "abc123"
        assert commit.subject == "fix: y"
        assert commit.body == "body"

    def test_missing_body(self):
        """A record without a body field decodes with an empty body."""
        commit = decode_record(_record("abc123", "docs: readme"))

        assert commit.body == ""

    def test_body_may_contain_separator(self):
        """Only the first two separators split fields."""
        commit = decode_record(_record("abc123", "feat: x", "a", "b"))

        assert commit.body == f"a{FIELD_SEPARATOR}b"

    def test_subject_may_contain_commas(self):
        """Commas in commit text are not treated as separators."""
        commit = decode_record(_record("abc123", "fix: handle a, b and c", "x, y"))

        assert commit.subject == "fix: handle a, b and c"
        assert commit.body == "x, y"

    def test_empty_hash_raises(self):
        """Empty hash is rejected rather than defaulted."""
        with pytest.raises(MalformedRecordError, match="commit hash"):
            decode_record(_record("   ", "feat: x", ""))

    def test_malformed_record_keeps_raw_text(self):
        """The offending record is attached to the error."""
        raw = _record("", "feat: x")
        with pytest.raises(MalformedRecordError) as exc_info:
            decode_record(raw)

        assert exc_info.value.record == raw


class TestDecodeRecords:
    """Tests for decode_records()."""

    def test_decode_multiple_preserves_order(self):
        """Records come back in log order."""
        text = (
            _record("c3", "feat: third", "")
            + RECORD_SEPARATOR
            + "\n"
            + _record("c2", "fix: second", "multi\nline")
            + RECORD_SEPARATOR
            + "\n"
            + _record("c1", "docs: first", "")
            + RECORD_SEPARATOR
        )
        commits = decode_records(text)

        assert [c.hash for c in commits] == ["c3", "c2", "c1"]
        assert commits[1].body == "multi\nline"

    def test_empty_log(self):
        """An empty log decodes to no commits."""
        assert decode_records("") == []
        assert decode_records("\n") == []

    def test_malformed_record_aborts(self):
        """One record with an empty hash aborts decoding."""
        text = _record("c1", "feat: a", "") + RECORD_SEPARATOR + _record("", "fix: b", "")

        with pytest.raises(MalformedRecordError):
            decode_records(text)

    def test_record_of_only_field_separators_aborts(self):
        """A record with every field empty is malformed, not blank."""
        text = (
            _record("abc", "feat: x", "")
            + RECORD_SEPARATOR
            + "\n"
            + _record("", "", "")
            + RECORD_SEPARATOR
        )

        with pytest.raises(MalformedRecordError):
            decode_records(text)

    def test_whitespace_between_terminators_is_skipped(self):
        """Spaces and line breaks between records are not records."""
        text = _record("c1", "feat: a", "") + RECORD_SEPARATOR + " \r\n\t" + RECORD_SEPARATOR

        assert [c.hash for c in decode_records(text)] == ["c1"]


class TestRawCommit:
    """Tests for RawCommit."""

    def test_initial_commit_flag(self):
        """Only the exact subject 'initial commit' is the placeholder."""
        assert RawCommit("a", "initial commit").is_initial_commit
        assert not RawCommit("a", "Initial commit").is_initial_commit
        assert not RawCommit("a", "feat: initial commit").is_initial_commit
