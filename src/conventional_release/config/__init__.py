"""Configuration management for conventional-release."""

from __future__ import annotations

from conventional_release.config.loader import load_config
from conventional_release.config.models import (
    ChangelogConfig,
    ConventionalReleaseConfig,
    GitHubConfig,
)

__all__ = [
    "ChangelogConfig",
    "ConventionalReleaseConfig",
    "GitHubConfig",
    "load_config",
]
