from __future__ import annotations

import pytest
from robot.api import TestSuite

from TagSelection.execution.prerun_modifier import TagPreRunModifier


def _build_suite() -> TestSuite:
    """Root suite with two child suites and five tagged tests."""
    root = TestSuite(name="Shop")
    login = root.suites.create(name="Login")
    login.tests.create(name="Valid Login", tags=["smoke", "feature:login"])
    login.tests.create(name="Locked Account", tags=["feature:login", "speed:slow"])
    reports = root.suites.create(name="Reports")
    reports.tests.create(name="Export CSV", tags=["regression"])
    reports.tests.create(name="Nightly Rollup", tags=["regression", "speed:slow"])
    reports.tests.create(name="Untagged Report")
    return root


def _remaining(suite: TestSuite) -> list[str]:
    names = [t.name for t in suite.tests]
    for child in suite.suites:
        names.extend(_remaining(child))
    return names


class TestTagPreRunModifier:
    def test_positive_filter(self) -> None:
        suite = _build_suite()
        suite.visit(TagPreRunModifier("smoke"))
        assert _remaining(suite) == ["Valid Login"]

    def test_typed_filter(self) -> None:
        suite = _build_suite()
        suite.visit(TagPreRunModifier("feature:login"))
        assert _remaining(suite) == ["Valid Login", "Locked Account"]

    def test_negative_filter(self) -> None:
        suite = _build_suite()
        suite.visit(TagPreRunModifier("~speed:slow"))
        assert _remaining(suite) == ["Valid Login", "Export CSV", "Untagged Report"]

    def test_rejoins_arguments_split_by_robot(self) -> None:
        # robot passes "Modifier:feature:login,~speed:slow" as two arguments
        suite = _build_suite()
        suite.visit(TagPreRunModifier("feature", "login,~speed", "slow"))
        assert _remaining(suite) == ["Valid Login"]

    def test_prunes_empty_suites(self) -> None:
        suite = _build_suite()
        suite.visit(TagPreRunModifier("regression"))
        assert [s.name for s in suite.suites] == ["Reports"]

    def test_stats_track_kept_and_removed(self) -> None:
        suite = _build_suite()
        modifier = TagPreRunModifier("smoke,~speed:slow")
        suite.visit(modifier)
        assert modifier.stats == {"kept": 1, "removed": 4}

    def test_no_filters_keeps_everything(
        self, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.delenv("TAGS", raising=False)
        suite = _build_suite()
        modifier = TagPreRunModifier()
        suite.visit(modifier)
        assert suite.test_count == 5
        assert modifier.stats == {"kept": 5, "removed": 0}

    def test_reads_environment_without_argument(
        self, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("TAGS", "regression,~speed:slow")
        suite = _build_suite()
        suite.visit(TagPreRunModifier())
        assert _remaining(suite) == ["Export CSV"]
