"""RulesKit command-line interface."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import typer
from rich.console import Console

from .branch import is_wip
from .deployer import install as run_install
from .exceptions import ManifestError, RulesKitError
from .identity import resolve_self_identity
from .logger import ConsoleLogger
from .models import DEFAULT_HOOKS_DIR, InstallOptions

app = typer.Typer(
    name="ruleskit",
    help="RulesKit: shared lint, format and git hook configuration",
    add_completion=False,
)
console = Console()


def _get_version_string() -> str:
    """Get version string from package metadata or pyproject.toml."""
    try:
        return resolve_self_identity(ConsoleLogger()).version
    except ManifestError:
        return "unknown"


def version_callback(value: bool) -> None:
    """Callback for --version flag."""
    if value:
        console.print(f"RulesKit version {_get_version_string()}")
        raise typer.Exit


def _install(path: Path, hooks_dir: str) -> None:
    try:
        asyncio.run(run_install(InstallOptions(root=path, hooks_dir=hooks_dir)))
    except (RulesKitError, OSError) as e:
        # The engine already reported the failure
        raise typer.Exit(1) from e


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """RulesKit: shared lint, format and git hook configuration.

    Runs `install` in the current directory when no command is given.
    """
    if ctx.invoked_subcommand is None:
        _install(Path.cwd(), DEFAULT_HOOKS_DIR)


@app.command()
def install(
    path: Path = typer.Option(
        Path.cwd(),
        "--path",
        "-p",
        help="Project directory receiving the configuration",
        exists=True,
        file_okay=False,
        dir_okay=True,
    ),
    hooks_dir: str = typer.Option(
        DEFAULT_HOOKS_DIR,
        "--hooks-dir",
        help="Git hooks directory, relative to the project directory",
    ),
) -> None:
    """Deploy lint and format configuration files and git hooks.

    Generated files are overwritten on every run:
    .eslintrc.yaml, .eslintignore, .prettierrc.yaml, .prettierignore,
    and the pre-commit and pre-push hooks.
    """
    _install(path, hooks_dir)


@app.command("is-wip")
def is_wip_command(
    path: Path = typer.Option(
        Path.cwd(),
        "--path",
        "-p",
        help="Repository to inspect",
        file_okay=False,
        dir_okay=True,
    ),
) -> None:
    """Exit with 0 when the current branch is a work in progress (.../wip/...)."""
    raise typer.Exit(0 if is_wip(path) else 1)


@app.command()
def version() -> None:
    """Show RulesKit version information."""
    console.print(f"RulesKit version {_get_version_string()}")


def main() -> None:
    """Entry point for the CLI."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    main()
