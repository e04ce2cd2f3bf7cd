"""Lakefile editing.

Lake accepts either a `lakefile.lean` (a Lean script) or a `lakefile.toml`
and prefers the `.lean` file when both exist. Only the TOML format can be
rewritten, so a project that also ships a `lakefile.toml` has that one
pinned; a project with only a `lakefile.lean` is reported as unsupported.

Uses tomlkit to preserve formatting and comments, so the only difference
in the rewritten file is the pinned revision.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import tomlkit

WORKING_DIRECTORY_HINT = (
    "Hint: make sure the `lake_package_directory` input is set to a "
    "directory containing a lakefile."
)


class LakefileError(Exception):
    """The lakefile could not be updated."""


class UnsupportedLakefileError(LakefileError):
    """The project uses a lakefile format we cannot rewrite."""


class LakefileNotFoundError(LakefileError):
    """No lakefile was found in the package directory, or it can't be opened."""


def load_lakefile(path: Path) -> tomlkit.TOMLDocument:
    """Load and parse a lakefile.toml, preserving formatting."""
    return tomlkit.parse(path.read_text())


def save_lakefile(path: Path, doc: tomlkit.TOMLDocument) -> None:
    """Overwrite a lakefile.toml with the given document."""
    path.write_text(tomlkit.dumps(doc))


class Lakefile(ABC):
    """A lakefile format that can pin a requirement to a git revision."""

    filename: str
    supported: bool = True

    def path(self, root: Path) -> Path:
        return root / self.filename

    def exists(self, root: Path) -> bool:
        return self.path(root).is_file()

    @abstractmethod
    def pin(self, root: Path, rev: str, scope: str, name: str) -> None:
        """Pin the requirement `scope/name` to rev, rewriting the file."""


class LeanLakefile(Lakefile):
    filename = "lakefile.lean"
    supported = False

    def pin(self, root: Path, rev: str, scope: str, name: str) -> None:
        raise UnsupportedLakefileError(
            "Project uses `lakefile.lean`; this is not yet supported!"
        )


class TomlLakefile(Lakefile):
    filename = "lakefile.toml"

    def pin(self, root: Path, rev: str, scope: str, name: str) -> None:
        """Set `rev` on the `[[require]]` entry matching scope and name.

        Raises:
            LakefileError: If no such requirement exists.
            LakefileNotFoundError: If the file can't be read or written.
        """
        path = self.path(root)
        try:
            doc = load_lakefile(path)
        except OSError as exc:
            raise LakefileNotFoundError(
                f"Could not read `{path}`: {exc}.\n{WORKING_DIRECTORY_HINT}"
            ) from exc
        requirements: list[Any] = list(doc.get("require", []))
        matches = [
            req
            for req in requirements
            if req.get("scope") == scope and req.get("name") == name
        ]
        if not matches:
            raise LakefileError(
                f"No requirement with scope '{scope}' and name '{name}' "
                f"found in `{path}`."
            )
        for req in matches:
            req["rev"] = rev
        try:
            save_lakefile(path, doc)
        except OSError as exc:
            raise LakefileNotFoundError(
                f"Could not write `{path}`: {exc}.\n{WORKING_DIRECTORY_HINT}"
            ) from exc


# In the order Lake itself looks for them.
LAKEFILES: tuple[Lakefile, ...] = (LeanLakefile(), TomlLakefile())


def find_lakefile(root: Path) -> Lakefile:
    """Return the lakefile to edit in root.

    The first supported lakefile present wins. If only unsupported ones are
    present, the first of those is returned and fails when pinned.

    Raises:
        LakefileNotFoundError: If no lakefile exists.
    """
    present = [lakefile for lakefile in LAKEFILES if lakefile.exists(root)]
    if not present:
        names = " or ".join(f"`{lf.filename}`" for lf in LAKEFILES)
        raise LakefileNotFoundError(
            f"Could not find {names} in `{root}`.\n{WORKING_DIRECTORY_HINT}"
        )
    supported = [lakefile for lakefile in present if lakefile.supported]
    if not supported:
        return present[0]
    if supported[0] is not present[0]:
        print(
            f"  Cannot edit `{present[0].filename}`: trying again with "
            f"`{supported[0].filename}`."
        )
    return supported[0]


def pin_dependency(root: Path, rev: str, scope: str, name: str) -> None:
    """Make the project depend on `scope/name` at revision rev."""
    lakefile = find_lakefile(root)
    print(f"  Pinning {scope}/{name} to {rev} in {lakefile.filename}")
    lakefile.pin(root, rev, scope, name)
