"""Data models for lean-update.

These Pydantic models represent the values passed between the stages of
an update run: parsed release tags and the per-step results.
"""

from __future__ import annotations

import semver
from pydantic import BaseModel, ConfigDict, Field

# Final plan entry: track Mathlib's development branch rather than a release.
MAINLINE = "master"


class VersionTag(BaseModel):
    """A release tag parsed as a semantic version.

    Attributes:
        version: Parsed version; tags missing components are zero-padded.
        original: The tag name exactly as it appears in git (e.g. "v4.9").
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    version: semver.Version
    original: str

    def __str__(self) -> str:
        return self.original


class UpdateResult(BaseModel):
    """Outcome of a single step of the walk.

    Attributes:
        tag: The ref the lakefile was pinned to for this step.
        changed: Whether `lake update` changed any metadata file.
    """

    tag: str
    changed: bool


class UpdateOutcome(BaseModel):
    """Accumulated results of a whole run, in plan order."""

    results: list[UpdateResult] = Field(default_factory=list)

    @property
    def new_tags(self) -> list[str]:
        """Tags whose step produced a metadata change."""
        return [r.tag for r in self.results if r.changed]

    @property
    def is_update_available(self) -> bool:
        return len(self.new_tags) > 0
