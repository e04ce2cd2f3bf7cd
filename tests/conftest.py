"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

LAKEFILE_TOML = """\
name = "my_project"
defaultTargets = ["MyProject"]

# Mathlib, pinned by lean-update
[[require]]
name = "mathlib"
scope = "leanprover-community"
rev = "v1.0"

[[require]]
name = "batteries"
scope = "leanprover-community"
rev = "main"

[[lean_lib]]
name = "MyProject"
"""


@pytest.fixture
def lake_package(tmp_path: Path) -> Path:
    """Create a Lake package directory with a lakefile.toml."""
    (tmp_path / "lakefile.toml").write_text(LAKEFILE_TOML)
    (tmp_path / "lean-toolchain").write_text("leanprover/lean4:v1.0\n")
    (tmp_path / "lake-manifest.json").write_text('{"version": 7, "packages": []}\n')
    return tmp_path


@pytest.fixture
def lakefile_text() -> str:
    """The original contents of the lake_package lakefile."""
    return LAKEFILE_TOML
