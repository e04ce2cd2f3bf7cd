"""Shell, git and gh utilities.

Provides simple wrappers around subprocess calls for the three external
tools lean-update drives (git, lake, gh), plus output formatting helpers.
"""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping
from pathlib import Path


def git(*args: str, cwd: Path | None = None, check: bool = True) -> str:
    """Run a git command and return stdout.

    Args:
        *args: Arguments to pass to git (e.g., "tag", "--list").
        cwd: Directory to run in; defaults to the current directory.
        check: If True (default), raise on non-zero exit.

    Returns:
        Stripped stdout from the git command.
    """
    result = subprocess.run(
        ["git", *args], cwd=cwd, capture_output=True, text=True, check=check
    )
    return result.stdout.strip()


def gh(*args: str, cwd: Path | None = None, check: bool = True) -> str:
    """Run a GitHub CLI command and return stdout."""
    result = subprocess.run(
        ["gh", *args], cwd=cwd, capture_output=True, text=True, check=check
    )
    return result.stdout.strip()


def run(
    *args: str,
    cwd: Path | None = None,
    env: Mapping[str, str] | None = None,
    check: bool = True,
) -> subprocess.CompletedProcess[bytes]:
    """Run an arbitrary command, streaming its output to the terminal.

    Unlike git(), this doesn't capture output so users can follow the
    progress of long-running tools such as `lake update`.

    Args:
        *args: Command and arguments (e.g., "lake", "update").
        cwd: Directory to run in; defaults to the current directory.
        env: Default environment variables; inherited values take precedence.
        check: If True (default), raise on non-zero exit.
    """
    full_env = {**env, **os.environ} if env else None
    return subprocess.run(args, cwd=cwd, env=full_env, check=check)


def step(msg: str) -> None:
    """Print a visually distinct step header."""
    print(f"\n{'─' * 60}\n{msg}\n{'─' * 60}")


def fatal(msg: str) -> None:
    """Print an error message and exit with code 1.

    Use for unrecoverable errors that should halt the run.
    """
    print(f"ERROR: {msg}", file=sys.stderr)
    sys.exit(1)
