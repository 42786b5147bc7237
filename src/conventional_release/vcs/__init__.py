"""Version control access."""

from __future__ import annotations

from conventional_release.vcs.git import GitRepository

__all__ = ["GitRepository"]
