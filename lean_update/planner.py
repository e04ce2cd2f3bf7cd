"""Choose the sequence of Mathlib refs to update through."""

from __future__ import annotations

from collections.abc import Sequence

from .config import ConfigError, ReleaseMode
from .models import MAINLINE, VersionTag
from .versions import sort_tags


def plan_releases(
    mode: ReleaseMode,
    upstream: Sequence[VersionTag],
    local: Sequence[VersionTag],
) -> list[str]:
    """Compute the refs to pin Mathlib to, in order.

    Upstream releases strictly newer than the project's newest release are
    walked in ascending order (only the newest one in LATEST mode). The
    plan always ends with MAINLINE.

    If the project has no releases yet, the plan is just MAINLINE:
    otherwise every Mathlib release ever made would be replayed.

    Args:
        mode: Release selection mode.
        upstream: Mathlib release tags.
        local: The project's own release tags.

    Returns:
        Tag names followed by MAINLINE.
    """
    if mode is ReleaseMode.MASTER:
        return [MAINLINE]
    if mode not in (ReleaseMode.ALL, ReleaseMode.LATEST):
        raise ConfigError(f"Unsupported release mode: {mode!r}")

    if not local:
        print(
            "  No releases found in the current project; upgrading directly "
            f"to '{MAINLINE}'. Hint: use the lean-release-action to "
            "automatically create releases when the toolchain is updated."
        )
        return [MAINLINE]

    base = sort_tags(local)[-1]
    candidates = sort_tags(t for t in upstream if t.version > base.version)
    if mode is ReleaseMode.LATEST:
        candidates = candidates[-1:]

    names = [t.original for t in candidates]
    print(f"  Going to upgrade to: {names}, followed by '{MAINLINE}'")
    return [*names, MAINLINE]
