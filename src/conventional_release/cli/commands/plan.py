"""Implementation of the 'plan' command.

The plan command shows the next version and changelog, and with
``--execute`` prepends the release entry to the changelog file.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from conventional_release.cli.commands.common import build_plan_context, fail
from conventional_release.core.changelog import build_release_entry
from conventional_release.core.version import NoRelease
from conventional_release.exceptions import ChangelogFileError
from conventional_release.project.changelog_file import prepend_release_entry

if TYPE_CHECKING:
    from rich.console import Console

    from conventional_release.core.release import ReleasePlan


def counts_table(counts: dict[str, int]) -> Table:
    table = Table(title="Change summary", show_header=True, header_style="bold")
    table.add_column("Category")
    table.add_column("Commits", justify="right")
    for name, count in counts.items():
        table.add_row(name, str(count))
    return table


def run_plan(
    path: str | None,
    execute: bool,
    owner: str | None,
    repo: str | None,
    console: Console,
    err_console: Console,
    release_date: date | None = None,
) -> None:
    """Run the plan command.

    Args:
        path: Optional path to project directory
        execute: Whether to write the changelog file
        owner: Repository owner for permalinks
        repo: Repository name for permalinks
        console: Console for standard output
        err_console: Console for error output
        release_date: Date for the changelog heading (today by default)
    """
    context = build_plan_context(path, owner, repo, err_console)
    if context is None:
        console.print("[yellow]No commits found since last release. Nothing to do.[/]")
        return

    outcome = context.outcome
    if isinstance(outcome, NoRelease):
        console.print(
            "[yellow]No version-impacting changes detected.[/] "
            f"Current version remains [cyan]{context.config.tag_prefix}{outcome.version}[/]"
        )
        console.print(counts_table(outcome.counts))
        return

    _print_plan(outcome, context.commit_count, execute, console)

    if not execute:
        console.print(
            Panel(
                "[bold]Would make the following changes:[/]\n\n"
                f"  • Prepend notes to [cyan]{context.config.effective_changelog_path}[/]",
                title="[yellow]Dry Run Preview[/]",
                border_style="yellow",
            )
        )
        console.print("\n[dim]Run with [cyan]--execute[/] to apply these changes.[/]")
        return

    if not context.config.changelog.enabled:
        console.print("[dim]Changelog disabled in configuration, nothing written.[/]")
        return

    decision = outcome.decision
    entry = build_release_entry(
        decision,
        outcome.changelog,
        context.links,
        release_date or date.today(),
    )
    changelog_path = context.project_path / context.config.effective_changelog_path
    try:
        prepend_release_entry(
            changelog_path,
            entry,
            str(decision.next_version),
            header=context.config.changelog.header,
        )
    except ChangelogFileError as e:
        raise fail(err_console, "Error updating changelog", e) from e

    console.print(f"  [green]✓[/] Updated {context.config.effective_changelog_path}")
    console.print(
        Panel(
            f"[green]Release notes for {decision.next_version} written![/]\n\n"
            "Next steps:\n"
            "  1. Review the changes\n"
            f"  2. Commit: [cyan]git commit -am "
            f"'chore(release): update changelog for {context.config.tag_prefix}"
            f"{decision.next_version}'[/]\n"
            f"  3. Tag: [cyan]git tag -s {context.config.tag_prefix}{decision.next_version}[/]",
            title="[green]Changelog Updated[/]",
            border_style="green",
        )
    )


def _print_plan(plan: ReleasePlan, commit_count: int, execute: bool, console: Console) -> None:
    decision = plan.decision
    mode_str = "[green]EXECUTING[/]" if execute else "[yellow]DRY-RUN[/]"
    kind = "pre-release" if decision.is_prerelease else "release"

    if decision.is_first_release:
        console.print(
            f"\n{mode_str} - First release! Version [green]{decision.next_version}[/] ({kind})\n"
        )
    else:
        console.print(
            f"\n{mode_str} - {decision.bump.capitalize()} bump from "
            f"[cyan]{decision.previous_version}[/] to [green]{decision.next_version}[/] ({kind})\n"
        )

    console.print(f"Analyzed {commit_count} commit(s)")
    console.print(counts_table(plan.classification.counts()))

    for observation in plan.classification.unrecognized:
        console.print(
            f"[yellow]Warning:[/] unknown commit type {escape(repr(observation.type))} "
            f"for commit {escape(observation.hash)}",
            highlight=False,
        )

    console.print(
        Panel(
            Text(plan.changelog.render()),
            title="Release notes",
            border_style="cyan",
        )
    )
