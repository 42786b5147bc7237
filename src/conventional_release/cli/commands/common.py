"""Helpers shared by CLI commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from conventional_release.config import load_config
from conventional_release.core.changelog import RepositoryLinks
from conventional_release.core.release import plan_release
from conventional_release.exceptions import ConventionalReleaseError
from conventional_release.vcs import GitRepository

if TYPE_CHECKING:
    from rich.console import Console

    from conventional_release.config.models import ConventionalReleaseConfig
    from conventional_release.core.release import ReleasePlan
    from conventional_release.core.version import NoRelease


@dataclass(frozen=True)
class PlanContext:
    project_path: Path
    config: ConventionalReleaseConfig
    links: RepositoryLinks
    latest_tag: str | None
    commit_count: int
    outcome: ReleasePlan | NoRelease


def fail(err_console: Console, label: str, error: Exception) -> SystemExit:
    err_console.print(f"[red]{label}:[/] {error}")
    return SystemExit(1)


def strip_tag_prefix(tag: str, prefix: str) -> str:
    if prefix and tag.startswith(prefix):
        return tag[len(prefix) :]
    return tag


def build_plan_context(
    path: str | None,
    owner: str | None,
    repo_name: str | None,
    err_console: Console,
    *,
    require_links: bool = True,
) -> PlanContext | None:
    """Load config, read git history and plan the release.

    Returns:
        PlanContext, or None when there are no commits to release

    Raises:
        SystemExit: On any error, after printing it to ``err_console``
    """
    project_path = Path(path) if path else Path.cwd()

    try:
        config = load_config(project_path)
    except ConventionalReleaseError as e:
        raise fail(err_console, "Error loading config", e) from e

    owner = owner or config.github.owner
    repo_name = repo_name or config.github.repo
    if require_links and not (owner and repo_name):
        err_console.print(
            "[red]Error:[/] Repository owner and name are required.\n"
            "Use [cyan]--owner[/] and [cyan]--repo[/], or set them in "
            "[cyan][tool.conventional-release.github][/]."
        )
        raise SystemExit(1)

    links = RepositoryLinks(
        owner=owner or "",
        repository=repo_name or "",
        web_url=config.github.web_url,
        tag_prefix=config.tag_prefix,
    )

    try:
        repo = GitRepository(project_path)
        latest_tag = repo.get_latest_tag(f"{config.tag_prefix}*")
        commits = repo.get_commits_since_tag(latest_tag)
    except ConventionalReleaseError as e:
        raise fail(err_console, "Error reading git history", e) from e

    if not commits:
        return None

    previous = strip_tag_prefix(latest_tag, config.tag_prefix) if latest_tag else None
    try:
        outcome = plan_release(commits, previous, links)
    except ConventionalReleaseError as e:
        raise fail(err_console, "Error planning release", e) from e

    return PlanContext(
        project_path=project_path,
        config=config,
        links=links,
        latest_tag=latest_tag,
        commit_count=len(commits),
        outcome=outcome,
    )
