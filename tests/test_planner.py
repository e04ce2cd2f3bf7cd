"""Tests for lean_update.planner."""

from __future__ import annotations

import pytest

from lean_update.config import ConfigError, ReleaseMode
from lean_update.models import MAINLINE, VersionTag
from lean_update.planner import plan_releases
from lean_update.versions import parse_tag


def tags(*names: str) -> list[VersionTag]:
    return [parse_tag(n) for n in names]


class TestPlanReleases:
    def test_master_only(self) -> None:
        """MASTER mode ignores all tags."""
        plan = plan_releases(ReleaseMode.MASTER, tags("v1.0", "v2.0"), tags("v1.0"))
        assert plan == [MAINLINE]

    def test_all_walks_newer_releases(self) -> None:
        upstream = tags("v1.0", "v1.1", "v2.0")
        plan = plan_releases(ReleaseMode.ALL, upstream, tags("v1.0"))
        assert plan == ["v1.1", "v2.0", MAINLINE]

    def test_latest_keeps_newest_release(self) -> None:
        plan = plan_releases(
            ReleaseMode.LATEST, tags("v1.0", "v1.1", "v2.0"), tags("v1.0")
        )
        assert plan == ["v2.0", MAINLINE]

    @pytest.mark.parametrize("mode", [ReleaseMode.ALL, ReleaseMode.LATEST])
    def test_no_local_releases(self, mode: ReleaseMode) -> None:
        """Without a local release to start from, go straight to master."""
        assert plan_releases(mode, tags("v1.0", "v1.1"), []) == [MAINLINE]

    @pytest.mark.parametrize("mode", [ReleaseMode.ALL, ReleaseMode.LATEST])
    def test_up_to_date(self, mode: ReleaseMode) -> None:
        assert plan_releases(mode, tags("v1.0", "v1.1"), tags("v1.1")) == [MAINLINE]

    def test_unsorted_inputs(self) -> None:
        """Inputs need not be sorted; the base is the newest local release."""
        plan = plan_releases(
            ReleaseMode.ALL,
            tags("v2.0", "v1.0", "v1.3", "v1.2"),
            tags("v1.2", "v1.0", "v1.1"),
        )
        assert plan == ["v1.3", "v2.0", MAINLINE]

    def test_keeps_original_tag_names(self) -> None:
        """Tags are reported by their verbatim names, even without a patch."""
        plan = plan_releases(ReleaseMode.ALL, tags("v1.1", "v1.2.0"), tags("v1.0.0"))
        assert plan == ["v1.1", "v1.2.0", MAINLINE]

    def test_release_equal_to_base_is_skipped(self) -> None:
        plan = plan_releases(ReleaseMode.ALL, tags("v1.0.0", "v1.1"), tags("v1.0"))
        assert plan == ["v1.1", MAINLINE]

    def test_prerelease_newer_than_base(self) -> None:
        plan = plan_releases(
            ReleaseMode.ALL, tags("v1.1.0-rc1", "v1.1.0"), tags("v1.0.0")
        )
        assert plan == ["v1.1.0-rc1", "v1.1.0", MAINLINE]

    def test_plan_is_increasing(self) -> None:
        upstream = tags("v1.5", "v1.1", "v3.0", "v2.0-rc2", "v2.0")
        plan = plan_releases(ReleaseMode.ALL, upstream, tags("v1.0"))
        versions = [parse_tag(n).version for n in plan[:-1]]
        assert versions == sorted(versions)
        assert plan.count(MAINLINE) == 1
        assert plan[-1] == MAINLINE

    def test_unknown_mode_raises(self) -> None:
        with pytest.raises(ConfigError):
            plan_releases("sometimes", tags("v1.1"), tags("v1.0"))  # type: ignore
