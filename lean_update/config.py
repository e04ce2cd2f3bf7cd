"""Run configuration.

All inputs of an update run (the GitHub Action inputs, passed in as
environment variables or CLI options) are collected into one validated
UpdateConfig before any work starts.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict


class ConfigError(Exception):
    """An input value is not supported."""


class ReleaseMode(str, Enum):
    """Which Mathlib releases to step through before `master`.

    - ALL: every release newer than our latest release, in order.
    - LATEST: only the newest such release.
    - MASTER: go straight to `master`.
    """

    ALL = "all"
    LATEST = "latest"
    MASTER = "master"

    @classmethod
    def _missing_(cls, value: object) -> ReleaseMode | None:
        if value == "mainline-only":
            return cls.MASTER
        return None

    @classmethod
    def parse(cls, value: str) -> ReleaseMode:
        """Parse an `intermediate_releases` input value.

        Raises:
            ConfigError: If the value is not one of the supported modes.
        """
        try:
            return cls(value)
        except ValueError:
            raise ConfigError(
                f"Unsupported value for input 'intermediate_releases': got "
                f"'{value}', expected 'all', 'latest' or 'master'."
            ) from None


class UpdateConfig(BaseModel):
    """Configuration for a single update run.

    Attributes:
        mode: Which intermediate Mathlib releases to walk through.
        legacy_update: Use the legacy `lake -R -Kenv=dev update` command.
        package_dir: Directory containing the lakefile and metadata files.
        upstream_repo: GitHub repository (OWNER/REPO) to take release tags from.
        dependency_scope: `scope` of the lakefile requirement to pin.
        dependency_name: `name` of the lakefile requirement to pin.
        metadata_dir: Directory (under package_dir) to stage changed files in.
    """

    model_config = ConfigDict(frozen=True)

    mode: ReleaseMode = ReleaseMode.ALL
    legacy_update: bool = False
    package_dir: Path = Path(".")
    upstream_repo: str = "leanprover-community/mathlib4"
    dependency_scope: str = "leanprover-community"
    dependency_name: str = "mathlib"
    metadata_dir: str = "mathlib-update-metadata"
