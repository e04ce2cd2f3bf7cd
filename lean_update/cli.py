"""CLI entry point for lean-update."""

from __future__ import annotations

import subprocess
from pathlib import Path

import click

from .config import ConfigError, ReleaseMode, UpdateConfig
from .github import DEFAULT_LABEL
from .metadata import LAKE_MANIFEST
from .shell import fatal
from .workflow_steps import check, previous_prs, update

directory_option = click.option(
    "--directory",
    "-C",
    envvar="LAKE_PACKAGE_DIRECTORY",
    type=click.Path(file_okay=False, path_type=Path),
    default=".",
    show_default=True,
    help="Lake package directory (containing the lakefile).",
)
github_output_option = click.option(
    "--github-output",
    envvar="GITHUB_OUTPUT",
    default=None,
    help="Path to GitHub step output file; outputs are printed if unset.",
)


def _describe(exc: Exception) -> str:
    """Render an exception, including captured stderr of failed commands."""
    if isinstance(exc, subprocess.CalledProcessError) and exc.stderr:
        return f"{exc}\n{exc.stderr.strip()}"
    return str(exc)


@click.group()
@click.version_option(package_name="lean-update")
def cli() -> None:
    """Step a Lean project through Mathlib releases, one lake update at a time."""


@cli.command("update")
@click.option(
    "--intermediate-releases",
    envvar="INTERMEDIATE_RELEASES",
    default="all",
    show_default=True,
    help="Mathlib releases to step through: 'all', 'latest' or 'master'.",
)
@click.option(
    "--legacy-update/--no-legacy-update",
    envvar="LEGACY_UPDATE",
    default=False,
    help="Use `lake -R -Kenv=dev update`.",
)
@directory_option
@github_output_option
def update_command(
    intermediate_releases: str,
    legacy_update: bool,
    directory: Path,
    github_output: str | None,
) -> None:
    """Pin Mathlib to each newer release (then master) and run lake update."""
    try:
        mode = ReleaseMode.parse(intermediate_releases)
    except ConfigError as exc:
        fatal(str(exc))
        return

    config = UpdateConfig(mode=mode, legacy_update=legacy_update, package_dir=directory)
    try:
        update(config, github_output)
    except Exception as exc:
        fatal(f"Error updating Lean version: {_describe(exc)}")


@cli.command("check-changes")
@click.option(
    "--update-if-modified",
    envvar="UPDATE_IF_MODIFIED",
    default=LAKE_MANIFEST,
    show_default=True,
    help="Metadata file whose change triggers an update.",
)
@directory_option
@github_output_option
def check_changes_command(
    update_if_modified: str, directory: Path, github_output: str | None
) -> None:
    """Report which metadata files changed after an update."""
    try:
        check(update_if_modified, directory, github_output)
    except ConfigError as exc:
        fatal(str(exc))


@cli.command("previous-prs")
@click.option(
    "--label",
    default=DEFAULT_LABEL,
    show_default=True,
    help="Label marking auto-update PRs and issues.",
)
@github_output_option
def previous_prs_command(label: str, github_output: str | None) -> None:
    """Summarize open auto-update PRs and issues."""
    try:
        previous_prs(github_output, label)
    except (subprocess.CalledProcessError, ValueError) as exc:
        fatal(f"Failed to list previous auto-update PRs: {_describe(exc)}")
