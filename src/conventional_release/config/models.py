"""Configuration models.

Values come from the ``[tool.conventional-release]`` table in
pyproject.toml. Every field has a default so an empty table is valid.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GitHubConfig(BaseModel):
    """Repository identity used for permalinks."""

    model_config = ConfigDict(extra="forbid")

    owner: str | None = None
    repo: str | None = None
    web_url: str = "https://github.com"

    @field_validator("web_url")
    @classmethod
    def normalize_web_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("web_url must start with http:// or https://")
        return value.rstrip("/")


class ChangelogConfig(BaseModel):
    """Changelog file settings."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = True
    path: Path = Path("CHANGELOG.md")
    header: str = "# Changelog"


class ConventionalReleaseConfig(BaseModel):
    """Root configuration."""

    model_config = ConfigDict(extra="forbid")

    tag_prefix: str = "v"
    github: GitHubConfig = Field(default_factory=GitHubConfig)
    changelog: ChangelogConfig = Field(default_factory=ChangelogConfig)

    @property
    def effective_changelog_path(self) -> Path:
        return self.changelog.path
