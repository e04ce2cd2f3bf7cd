"""Release tag parsing and ordering.

Lean projects tag releases as `v<major>.<minor>[.<patch>]`, sometimes with a
prerelease suffix (`v4.9.0-rc1`). Tags without a patch component are padded
(`v4.9` → 4.9.0) but keep their verbatim name, since that is what gets
written into the lakefile.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from functools import cmp_to_key

import semver

from .models import VersionTag

RELEASE_TAG_RE = re.compile(
    r"^v\d+\.\d+(\.\d+)?(-[0-9A-Za-z.-]+)?(\+[0-9A-Za-z.-]+)?$"
)


def is_release_tag(name: str) -> bool:
    """Check whether a tag name looks like a release tag."""
    return RELEASE_TAG_RE.match(name) is not None


def parse_tag(name: str) -> VersionTag:
    """Parse a release tag name (with leading "v") into a VersionTag.

    Raises:
        ValueError: If the name is not a valid semantic version.
    """
    version = semver.Version.parse(
        name.removeprefix("v"), optional_minor_and_patch=True
    )
    return VersionTag(version=version, original=name)


def _compare_identifiers(a: str, b: str) -> int:
    # Numeric identifiers always sort before alphanumeric ones
    if a.isdigit() and b.isdigit():
        x, y = int(a), int(b)
    elif a.isdigit():
        return -1
    elif b.isdigit():
        return 1
    else:
        x, y = a, b
    return (x > y) - (x < y)


def compare_build(a: VersionTag, b: VersionTag) -> int:
    """Compare two tags by semver precedence, then by build metadata.

    Plain semver precedence ignores build metadata, so `1.0.0+a` and
    `1.0.0+b` would tie; this comparison orders them deterministically.
    A tag with fewer build identifiers sorts first.
    """
    result = a.version.compare(b.version)
    if result:
        return result
    a_build = a.version.build.split(".") if a.version.build else []
    b_build = b.version.build.split(".") if b.version.build else []
    for x, y in zip(a_build, b_build):
        if x != y:
            return _compare_identifiers(x, y)
    return (len(a_build) > len(b_build)) - (len(a_build) < len(b_build))


def sort_tags(tags: Iterable[VersionTag]) -> list[VersionTag]:
    """Sort tags ascending by precedence (see compare_build)."""
    return sorted(tags, key=cmp_to_key(compare_build))
