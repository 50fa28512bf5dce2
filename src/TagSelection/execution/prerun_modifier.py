from __future__ import annotations

import logging

from robot.api import SuiteVisitor

from TagSelection.shared.config import TagFilterConfig
from TagSelection.tags.scanner import TagScanner

logger = logging.getLogger("TagSelection")


class TagPreRunModifier(SuiteVisitor):
    """PreRunModifier that keeps only tests whose tags pass the tag filters.

    Robot test tags are read as labels, so ``[Tags]  feature:login`` is a
    typed tag and ``~type:name`` filters exclude.

    Usage CLI::

        robot --prerunmodifier TagSelection.execution.prerun_modifier.TagPreRunModifier:smoke,~speed:slow tests/

    Without an argument the filters come from the ``TAGS`` environment
    variable.

    Usage programmatic:
        suite.visit(TagPreRunModifier('smoke,~speed:slow'))
    """

    def __init__(self, *tags: str) -> None:
        # Robot splits modifier arguments on ':', which also separates type:name.
        tag_list = ":".join(tags) if tags else TagFilterConfig.from_env().tags
        self._scanner = TagScanner(tag_list)
        self._stats = {"kept": 0, "removed": 0}

    def start_suite(self, suite) -> None:  # type: ignore[override]
        original = len(suite.tests)
        suite.tests = [
            t for t in suite.tests if self._scanner.should_run_for_tags(t.tags)
        ]
        self._stats["kept"] += len(suite.tests)
        self._stats["removed"] += original - len(suite.tests)

    def end_suite(self, suite) -> None:  # type: ignore[override]
        suite.suites = [s for s in suite.suites if s.test_count > 0]
        if suite.parent is None:
            logger.info(
                "[TAG-SELECT] Kept %d tests, removed %d.",
                self._stats["kept"], self._stats["removed"],
            )

    def visit_test(self, test) -> None:  # type: ignore[override]
        pass  # skip internals for performance

    @property
    def stats(self) -> dict[str, int]:
        return dict(self._stats)
