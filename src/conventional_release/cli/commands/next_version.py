"""Implementation of the 'next-version' command.

Prints only the next version so release scripts can capture it. Nothing
is printed when no commit affects the version.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from conventional_release.cli.commands.common import build_plan_context
from conventional_release.core.version import NoRelease

if TYPE_CHECKING:
    from rich.console import Console


def run_next_version(
    path: str | None,
    with_prefix: bool,
    console: Console,
    err_console: Console,
) -> None:
    context = build_plan_context(path, None, None, err_console, require_links=False)
    if context is None or isinstance(context.outcome, NoRelease):
        err_console.print("[yellow]No release needed.[/]")
        return

    prefix = context.config.tag_prefix if with_prefix else ""
    console.print(f"{prefix}{context.outcome.version}", markup=False, highlight=False)
