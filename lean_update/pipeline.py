"""Update pipeline: plan → (pin → lake update → stage) per ref.

This module orchestrates a lean-update run:
1. Find Mathlib's release tags and the project's own release tags
2. Plan the refs to walk through (newer releases, then `master`)
3. For each ref in turn:
   a. Pin Mathlib to the ref in the lakefile
   b. Run `lake update`
   c. Stage the metadata files if they changed

Steps share the lakefile and the git working tree, so they run strictly
in sequence. Any failure aborts the run; edits made by earlier steps are
left on disk.
"""

from __future__ import annotations

from .config import ReleaseMode, UpdateConfig
from .lake import lake_update
from .lakefile import pin_dependency
from .metadata import prepare_metadata
from .models import MAINLINE, UpdateOutcome, UpdateResult
from .planner import plan_releases
from .shell import step
from .tags import fetch_version_tags


def plan(config: UpdateConfig) -> list[str]:
    """Determine the refs to update to, ending with MAINLINE."""
    step("Planning releases")
    if config.mode is ReleaseMode.MASTER:
        print(f"  Upgrading directly to '{MAINLINE}'")
        return [MAINLINE]

    upstream = fetch_version_tags(config.upstream_repo, config.package_dir)
    local = fetch_version_tags(None, config.package_dir)
    print(
        f"  Found {len(upstream)} Mathlib releases and "
        f"{len(local)} project releases."
    )
    return plan_releases(config.mode, upstream, local)


def update_to(ref: str, config: UpdateConfig) -> UpdateResult:
    """Run one step of the walk: pin, update, and stage changes."""
    step(f"Updating to {ref}")
    pin_dependency(
        config.package_dir, ref, config.dependency_scope, config.dependency_name
    )
    lake_update(config.legacy_update, config.package_dir)
    changed = prepare_metadata(ref, config.package_dir, config.metadata_dir)
    return UpdateResult(tag=ref, changed=changed)


def run_update(config: UpdateConfig) -> UpdateOutcome:
    """Execute the full update walk.

    Returns:
        The per-ref results, in the order they were applied.
    """
    outcome = UpdateOutcome()
    for ref in plan(config):
        outcome.results.append(update_to(ref, config))

    step("Done")
    if outcome.is_update_available:
        print(f"  Updates available for: {', '.join(outcome.new_tags)}")
    else:
        print("  No updates available")
    return outcome
