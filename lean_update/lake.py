"""Running `lake update`."""

from __future__ import annotations

from pathlib import Path

from .shell import run

# The walk runs one update per tag, so fetching the Mathlib cache on
# every step is wasted work.
NO_CACHE_ENV = {"MATHLIB_NO_CACHE_ON_UPDATE": "1"}


def lake_update(legacy: bool, root: Path | None = None) -> None:
    """Run `lake update`, streaming its output.

    Args:
        legacy: Use `lake -R -Kenv=dev update`, for toolchains that predate
            the standard command.
        root: Package directory to run in.

    Raises:
        subprocess.CalledProcessError: If lake exits non-zero.
    """
    if legacy:
        print("  Using legacy update command")
        run("lake", "-R", "-Kenv=dev", "update", cwd=root)
    else:
        print("  Using standard update command")
        run("lake", "update", cwd=root, env=NO_CACHE_ENV)
