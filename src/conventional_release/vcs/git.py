"""Git access through the ``git`` command line.

Only the read operations the release planner needs are provided: finding
the latest release tag and reading the log since that tag.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from conventional_release.core.records import GIT_LOG_FORMAT, RawCommit, decode_records
from conventional_release.exceptions import GitError
from conventional_release.log import get_logger

logger = get_logger(__name__)


class GitRepository:
    """A local git working tree."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        if not self.path.is_dir():
            raise GitError(f"Not a directory: {self.path}")

    def _run(self, *args: str) -> str:
        try:
            result = subprocess.run(
                ["git", *args],
                capture_output=True,
                text=True,
                check=True,
                cwd=self.path,
            )
        except FileNotFoundError as e:
            raise GitError("git executable not found") from e
        except subprocess.CalledProcessError as e:
            raise GitError(
                f"git {args[0]} failed with exit code {e.returncode}",
                stderr=e.stderr,
            ) from e
        return result.stdout

    def list_tags(self, pattern: str = "*") -> list[str]:
        output = self._run("tag", "--list", pattern)
        return [line.strip() for line in output.splitlines() if line.strip()]

    def get_latest_tag(self, pattern: str = "v*") -> str | None:
        """Most recent tag reachable from HEAD matching ``pattern``.

        Returns:
            Tag name, or None when no matching tag exists (first release)

        Raises:
            GitError: If tags exist but none can be resolved from HEAD
        """
        if not self.list_tags(pattern):
            logger.info("No tags matching %r found, this is likely the first release", pattern)
            return None

        tag = self._run("describe", "--tags", "--abbrev=0", "--match", pattern).strip()
        if not tag:
            raise GitError("Unable to determine the latest tag")
        logger.info("Latest tag found: %s", tag)
        return tag

    def get_log(self, since_tag: str | None = None) -> str:
        """Raw log output in the record format understood by ``decode_records``."""
        args = ["log", f"--pretty=format:{GIT_LOG_FORMAT}"]
        if since_tag:
            args.append(f"{since_tag}..HEAD")
        return self._run(*args)

    def get_commits_since_tag(self, tag: str | None) -> list[RawCommit]:
        """Commits after ``tag`` (all commits when ``tag`` is None), newest first."""
        commits = decode_records(self.get_log(tag))
        logger.info("Found %d commits since %s", len(commits), tag or "(repository start)")
        if not commits:
            logger.warning("No commits found since last tag")
        return commits
