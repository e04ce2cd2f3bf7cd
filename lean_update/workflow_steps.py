"""Helpers for script-based GitHub Actions workflow steps.

Each step runs part of lean-update and reports its results as step
outputs, appended to the file named by $GITHUB_OUTPUT.
"""

from __future__ import annotations

import json
import uuid
from pathlib import Path

from .config import UpdateConfig
from .github import DEFAULT_LABEL, list_open, summary_text
from .metadata import check_changes
from .models import UpdateOutcome
from .pipeline import run_update


def write_output(output_path: str | None, name: str, value: str) -> None:
    """Record a step output.

    Multi-line values use the `name<<DELIMITER` form. Without an output
    file (e.g. when run locally), the output is printed instead.
    """
    if "\n" in value:
        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        line = f"{name}<<{delimiter}\n{value}\n{delimiter}\n"
    else:
        line = f"{name}={value}\n"
    if not output_path:
        print(line, end="")
        return
    with open(output_path, "a") as fh:
        fh.write(line)


def _bool(value: bool) -> str:
    return json.dumps(value)


def update(config: UpdateConfig, github_output: str | None) -> UpdateOutcome:
    """Walk Mathlib releases and emit `new-tags` / `is-update-available`."""
    outcome = run_update(config)
    write_output(github_output, "new-tags", json.dumps(outcome.new_tags))
    write_output(
        github_output, "is-update-available", _bool(outcome.is_update_available)
    )
    return outcome


def check(update_if_modified: str, root: Path, github_output: str | None) -> None:
    """Report whether the metadata changes warrant an update."""
    report = check_changes(update_if_modified, root)
    write_output(github_output, "files_changed", _bool(report.files_changed))
    write_output(github_output, "changed_files", " ".join(report.changed_files))
    write_output(github_output, "do_update", _bool(report.do_update))
    write_output(
        github_output, "lean_toolchain_updated", _bool(report.lean_toolchain_updated)
    )


def previous_prs(
    github_output: str | None, label: str = DEFAULT_LABEL, root: Path | None = None
) -> None:
    """Report earlier auto-update PRs and issues that are still open."""
    prs = list_open("pr", label, root)
    issues = list_open("issue", label, root)
    write_output(github_output, "previous-issues-exist", _bool(len(issues) > 0))
    write_output(github_output, "previous-prs-exist", _bool(len(prs) > 0))
    write_output(github_output, "summary-text", summary_text(prs, issues))
