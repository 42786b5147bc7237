"""Shared fixtures."""

from __future__ import annotations

import pytest

from conventional_release.core.changelog import RepositoryLinks
from conventional_release.core.records import RawCommit


@pytest.fixture
def links() -> RepositoryLinks:
    return RepositoryLinks(owner="octo", repository="widgets")


@pytest.fixture
def feat_commit() -> RawCommit:
    return RawCommit(hash="feat123", subject="feat: add user authentication")


@pytest.fixture
def fix_commit() -> RawCommit:
    return RawCommit(hash="fix456", subject="fix(core): handle null response")


@pytest.fixture
def breaking_commit() -> RawCommit:
    return RawCommit(
        hash="brk789",
        subject="refactor(api): rename endpoints",
        body="Endpoints now use plural nouns.\n\nBREAKING CHANGE: /user is now /users",
    )


@pytest.fixture
def sample_commits(
    feat_commit: RawCommit,
    fix_commit: RawCommit,
    breaking_commit: RawCommit,
) -> list[RawCommit]:
    return [
        feat_commit,
        fix_commit,
        breaking_commit,
        RawCommit(hash="doc001", subject="docs: update readme"),
        RawCommit(hash="chr002", subject="chore(deps): bump rich"),
        RawCommit(hash="wip003", subject="wip: half done"),
        RawCommit(hash="ini004", subject="initial commit"),
    ]
