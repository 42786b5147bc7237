"""Exception hierarchy for conventional-release.

Every error raised on purpose by this package derives from
``ConventionalReleaseError`` so that the CLI can report it in one place.
"""

from __future__ import annotations


class ConventionalReleaseError(Exception):
    """Base class for all conventional-release errors."""


class MalformedRecordError(ConventionalReleaseError):
    """A raw log record could not be decoded into a commit."""

    def __init__(self, message: str, record: str | None = None) -> None:
        super().__init__(message)
        self.record = record


class InvalidVersionFormatError(ConventionalReleaseError):
    """A version tag is not of the form ``MAJOR.MINOR.PATCH``."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid semantic version format. Expected 'x.y.z' but got {value!r}")
        self.value = value


class ConfigError(ConventionalReleaseError):
    """Configuration could not be loaded."""


class ConfigNotFoundError(ConfigError):
    """No pyproject.toml could be found."""


class ConfigValidationError(ConfigError):
    """Configuration values are invalid."""


class GitError(ConventionalReleaseError):
    """A git command failed."""

    def __init__(self, message: str, stderr: str | None = None) -> None:
        super().__init__(message)
        self.stderr = stderr

    def __str__(self) -> str:
        base = super().__str__()
        if self.stderr:
            return f"{base}: {self.stderr.strip()}"
        return base


class ChangelogFileError(ConventionalReleaseError):
    """The changelog file could not be updated."""
