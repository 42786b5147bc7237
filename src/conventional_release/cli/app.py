"""Command line interface for conventional-release."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from conventional_release import __version__
from conventional_release.cli.commands.next_version import run_next_version
from conventional_release.cli.commands.plan import run_plan
from conventional_release.log import configure_logging

app = typer.Typer(
    name="conventional-release",
    help="Semantic versions and changelogs from conventional commits.",
    no_args_is_help=True,
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)

PathArgument = Annotated[
    str | None,
    typer.Argument(help="Project directory (defaults to the current directory)"),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Show debug logging"),
]


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"conventional-release {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version"),
    ] = False,
) -> None:
    """Semantic versions and changelogs from conventional commits."""


@app.command()
def plan(
    path: PathArgument = None,
    owner: Annotated[
        str | None,
        typer.Option(envvar="CONVENTIONAL_RELEASE_OWNER", help="Repository owner for links"),
    ] = None,
    repo: Annotated[
        str | None,
        typer.Option(envvar="CONVENTIONAL_RELEASE_REPO", help="Repository name for links"),
    ] = None,
    execute: Annotated[
        bool,
        typer.Option("--execute", help="Write the release entry to the changelog"),
    ] = False,
    verbose: VerboseOption = False,
) -> None:
    """Show the next version and release notes."""
    configure_logging(verbose=verbose, console=err_console)
    run_plan(path, execute, owner, repo, console, err_console)


@app.command("next-version")
def next_version(
    path: PathArgument = None,
    tag: Annotated[
        bool,
        typer.Option("--tag", help="Include the tag prefix"),
    ] = False,
    verbose: VerboseOption = False,
) -> None:
    """Print the next version, or nothing when no release is needed."""
    configure_logging(verbose=verbose, console=err_console)
    run_next_version(path, tag, console, err_console)
