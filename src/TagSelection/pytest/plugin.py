"""pytest plugin for tag-based test selection.

Registered as a ``pytest11`` entry point. Tests declare tags with the
``tag`` marker and a run picks them with ``--tags``::

    @pytest.mark.tag("smoke", "feature:login")
    def test_login(): ...

    pytest --tags="smoke,~speed:slow" tests/

When ``--tags`` is empty (default: the ``TAGS`` environment variable), the
plugin is inactive and imposes zero overhead.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from TagSelection.shared.config import TagFilterConfig
from TagSelection.shared.types import TestTag, TestUnit
from TagSelection.tags.registry import default_registry
from TagSelection.tags.scanner import TagScanner

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger("TagSelection.pytest")

TAG_MARKER = "tag"
RUNNER_ATTRIBUTE = "__test_runner__"
DEFAULT_RUNNER = "pytest"


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register CLI options for tag-based test selection."""
    group = parser.getgroup("tagselection", "Tag-based test selection")
    group.addoption(
        "--tags",
        default=TagFilterConfig.from_env().tags,
        help="Comma-separated tag filters, e.g. 'smoke,~speed:slow'. "
        "A '~' before the type excludes. Empty disables filtering "
        "(default: $TAGS).",
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        f"{TAG_MARKER}(*values): attach 'name' or 'type:name' tags to a test, "
        "class or module for --tags selection.",
    )


def _tags_of(node) -> list[TestTag]:
    return [
        TestTag.with_value(str(value))
        for mark in node.iter_markers(TAG_MARKER)
        for value in mark.args
    ]


class MarkerTagSource:
    """Resolves tags from ``@pytest.mark.tag`` markers on collected nodes.

    A unit wraps the ``Class`` node (or ``Module`` node, for plain test
    functions) that holds the test; members are the collected items below
    it, looked up by item name so each parametrized case keeps its own
    marks. Markers are read with ``iter_markers``, so tags declared on the
    module, on base classes and through ``pytest.param(marks=...)`` apply.
    """

    def __init__(self, items: Sequence[pytest.Item]) -> None:
        self._items: dict[tuple[str, str], pytest.Item] = {
            (item.parent.nodeid, item.name): item
            for item in items
            if item.parent is not None
        }

    def tags_for_class(self, unit: TestUnit) -> Sequence[TestTag]:
        return _tags_of(unit.obj)

    def tags_for_member(self, unit: TestUnit, member_name: str) -> Sequence[TestTag]:
        item = self._items.get((unit.name, member_name))
        if item is None:
            return []
        return _tags_of(item)


def _unit_for(item: pytest.Item) -> TestUnit | None:
    if getattr(item, "function", None) is None or item.parent is None:
        return None
    container = item.parent
    return TestUnit(
        name=container.nodeid,
        runner=getattr(getattr(container, "obj", None), RUNNER_ATTRIBUTE, DEFAULT_RUNNER),
        obj=container,
    )


def _item_should_run(scanner: TagScanner, item: pytest.Item) -> bool:
    unit = _unit_for(item)
    if unit is None:
        return True  # not a python test, nothing to resolve tags from
    if not scanner.is_taggable(unit):
        # The runner filters its own tests; only the container's tags apply.
        return scanner.should_run_class(unit)
    return scanner.should_run_method(unit, item.name)


@pytest.hookimpl(trylast=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item],
) -> None:
    """Deselect collected tests that do not match the tag filters."""
    tag_list = config.getoption("--tags", default="")
    if not tag_list or not tag_list.strip():
        return  # Plugin disabled

    scanner = TagScanner(
        tag_list, tag_source=MarkerTagSource(items), capability=default_registry,
    )

    selected: list[pytest.Item] = []
    deselected: list[pytest.Item] = []
    for item in items:
        if _item_should_run(scanner, item):
            selected.append(item)
        else:
            deselected.append(item)

    if deselected:
        config.hook.pytest_deselected(items=deselected)
        items[:] = selected

    logger.info(
        "[TAG-SELECT] Selected %d/%d tests (tags=%s).",
        len(selected), len(selected) + len(deselected), tag_list,
    )
