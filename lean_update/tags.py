"""Release tag discovery for Mathlib and the current project.

Mathlib does not make GitHub releases for its version tags, so tags are
read with git rather than through the GitHub API.
"""

from __future__ import annotations

from pathlib import Path

from .models import VersionTag
from .shell import git
from .versions import is_release_tag, parse_tag, sort_tags

# Suffix git ls-remote uses for the peeled commit of an annotated tag
PEELED_SUFFIX = "^{}"


def remote_tag_names(repo: str, root: Path | None = None) -> list[str]:
    """List release tag names of a GitHub repository.

    Each line of `git ls-remote --tags` has the form
    `<sha>\\trefs/tags/<name>`. Annotated tags appear twice, once more
    with a `^{}` suffix; those duplicates are dropped.

    Args:
        repo: Repository in OWNER/REPO form.
        root: Directory to run git in.
    """
    output = git("ls-remote", "--tags", f"https://github.com/{repo}.git", cwd=root)
    names: list[str] = []
    for line in output.splitlines():
        if line.endswith(PEELED_SUFFIX):
            continue
        _, _, ref = line.rpartition("refs/tags/")
        if ref and is_release_tag(ref):
            names.append(ref)
    return names


def local_tag_names(root: Path | None = None) -> list[str]:
    """List release tag names of the current repository.

    Runs `git fetch --tags` first, since a shallow checkout does not
    reliably bring in all tags.
    """
    git("fetch", "--tags", cwd=root)
    output = git("tag", "--list", "v*.*", cwd=root)
    return [name for name in output.splitlines() if is_release_tag(name)]


def fetch_version_tags(repo: str | None, root: Path | None = None) -> list[VersionTag]:
    """Get the release tags of a repository, sorted ascending.

    Args:
        repo: Repository in OWNER/REPO format, or None for the current project.
        root: Directory to run git in.

    Raises:
        ValueError: If a release tag is not a valid semantic version.
    """
    if repo is not None:
        print(f"  Fetching tags from {repo}")
        names = remote_tag_names(repo, root)
    else:
        print("  Fetching release tags from current repository")
        names = local_tag_names(root)
    return sort_tags(parse_tag(name) for name in names)
