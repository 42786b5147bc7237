"""Command line interface."""

from __future__ import annotations

from conventional_release.cli.app import app

__all__ = ["app"]
