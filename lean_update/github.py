"""Listing earlier auto-update pull requests and issues on GitHub."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .shell import gh

DEFAULT_LABEL = "auto-update-lean"


def list_open(kind: str, label: str, root: Path | None = None) -> list[dict[str, Any]]:
    """List open pull requests or issues carrying label.

    Args:
        kind: "pr" or "issue".
        label: GitHub label to filter on.
        root: Directory to run gh in.
    """
    output = gh(
        kind, "list", "--label", label, "--state", "open", "--json", "number", cwd=root
    )
    return json.loads(output) if output else []


def format_issue_list(items: list[dict[str, Any]]) -> str:
    """Render issues/PRs as a bulleted list of references.

    For example [{"number": 1}, {"number": 37}] becomes "* #1\\n* #37".
    """
    return "\n".join(f"* #{item['number']}" for item in items)


def summary_text(prs: list[dict[str, Any]], issues: list[dict[str, Any]]) -> str:
    """Build the paragraph linking earlier auto-update PRs and issues."""
    text = ""
    if prs:
        text += f"\n\nPrevious unmerged auto-update PRs:\n{format_issue_list(prs)}"
    if issues:
        text += f"\n\nPrevious open auto-update issues:\n{format_issue_list(issues)}"
    return text
