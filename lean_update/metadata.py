"""Detecting and staging changes to the project metadata files.

After `lake update`, the files that matter are the toolchain pin and the
lake manifest. Changed copies are staged per tag so that later workflow
jobs can build and open a pull request for each step separately.
"""

from __future__ import annotations

import json
import shutil
import subprocess
import sys
from pathlib import Path

from pydantic import BaseModel

from .config import ConfigError
from .shell import git

LEAN_TOOLCHAIN = "lean-toolchain"
LAKE_MANIFEST = "lake-manifest.json"
METADATA_FILES = (LEAN_TOOLCHAIN, LAKE_MANIFEST)


def file_changed(filename: str, root: Path | None = None) -> bool:
    """Check whether a file differs from HEAD, ignoring whitespace.

    A file that does not exist and is not tracked has an empty diff.
    """
    return len(git("diff", "-w", "--", filename, cwd=root)) > 0


def prepare_metadata(tag: str, root: Path, metadata_dir: str) -> bool:
    """Stage changed metadata files for subsequent workflow jobs.

    Copies the metadata files into `<root>/<metadata_dir>/<tag>/` if any
    of them changed.

    Args:
        tag: The Mathlib ref this step updated to.
        root: Package directory.
        metadata_dir: Staging directory, relative to root.

    Returns:
        Whether any metadata file changed.
    """
    if not any([file_changed(name, root) for name in METADATA_FILES]):
        print("  No changes to commit - skipping update.")
        return False

    dest_dir = root / metadata_dir / tag
    dest_dir.mkdir(parents=True, exist_ok=True)
    for name in METADATA_FILES:
        src = root / name
        if src.exists():
            shutil.copyfile(src, dest_dir / name)
    print(f"  Staged metadata in {dest_dir}")
    return True


class ChangeReport(BaseModel):
    """Which metadata files changed, and whether that warrants an update.

    Attributes:
        files_changed: Whether any metadata file changed.
        changed_files: Names of the changed files.
        do_update: Whether the workflow should go ahead with the update.
        lean_toolchain_updated: Whether lean-toolchain changed.
    """

    files_changed: bool
    changed_files: list[str]
    do_update: bool
    lean_toolchain_updated: bool


def check_changes(update_if_modified: str, root: Path | None = None) -> ChangeReport:
    """Decide whether the working tree holds an update worth proposing.

    With update_if_modified="lean-toolchain", only a toolchain bump counts;
    with "lake-manifest.json", a change to either metadata file does.

    Raises:
        ConfigError: If update_if_modified is not a metadata file name.
    """
    if update_if_modified not in METADATA_FILES:
        raise ConfigError(
            f"{update_if_modified} is not a valid option for update_if_modified\n"
            f"Valid options are: {', '.join(METADATA_FILES)}"
        )

    changes: dict[str, bool] = {}
    for name in METADATA_FILES:
        try:
            changes[name] = file_changed(name, root)
        except subprocess.CalledProcessError as exc:
            print(f"Error checking diff for {name}: {exc}", file=sys.stderr)
            changes[name] = False

    changed_files = [name for name in METADATA_FILES if changes[name]]
    if update_if_modified == LEAN_TOOLCHAIN:
        do_update = changes[LEAN_TOOLCHAIN]
    else:
        do_update = len(changed_files) > 0

    report = ChangeReport(
        files_changed=len(changed_files) > 0,
        changed_files=changed_files,
        do_update=do_update,
        lean_toolchain_updated=changes[LEAN_TOOLCHAIN],
    )
    print("info:", json.dumps(report.model_dump(), indent=2))
    return report
