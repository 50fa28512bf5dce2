"""Tag scanner: decides whether a test unit runs under the configured tag filters."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from TagSelection.shared.errors import TagScannerError
from TagSelection.tags.matching import (
    negative_filters,
    parse_tag_list,
    positive_filters,
    should_run,
    tags_from_values,
)
from TagSelection.tags.registry import default_registry

if TYPE_CHECKING:
    from collections.abc import Iterable

    from TagSelection.shared.config import TagFilterConfig
    from TagSelection.shared.types import TestTag, TestUnit
    from TagSelection.tags.ports import RunnerCapability, TagSource

logger = logging.getLogger("TagSelection")


class TagScanner:
    """Holds the filter tags requested for a run.

    The filter expression is parsed once at construction and never
    changes, so a scanner can be shared between callers. Class and label
    checks always apply the filters; member checks only apply them when
    the unit's runner is taggable.

    Usage::

        scanner = TagScanner("smoke,~speed:slow", tag_source=MyTagSource())
        scanner.should_run_for_tags(["smoke", "feature:login"])
    """

    def __init__(
        self,
        tag_list: str | None = None,
        tag_source: TagSource | None = None,
        capability: RunnerCapability | None = None,
    ) -> None:
        self._provided_tags: tuple[TestTag, ...] = tuple(parse_tag_list(tag_list))
        self._tag_source = tag_source
        self._capability = capability if capability is not None else default_registry
        if self._provided_tags:
            logger.debug(
                "[TAG-SELECT] Filtering on tags: %s",
                ", ".join(str(t) for t in self._provided_tags),
            )

    @classmethod
    def from_config(
        cls,
        config: TagFilterConfig,
        tag_source: TagSource | None = None,
        capability: RunnerCapability | None = None,
    ) -> TagScanner:
        return cls(config.tags, tag_source=tag_source, capability=capability)

    @property
    def provided_tags(self) -> tuple[TestTag, ...]:
        return self._provided_tags

    @property
    def positive_tags(self) -> list[TestTag]:
        return positive_filters(self._provided_tags)

    @property
    def negative_tags(self) -> list[TestTag]:
        return negative_filters(self._provided_tags)

    @property
    def is_filtering(self) -> bool:
        return bool(self._provided_tags)

    def is_taggable(self, unit: TestUnit) -> bool:
        """Whether member-level checks apply to ``unit``'s runner."""
        return self._capability.is_taggable(unit)

    def should_run_for_tags(self, labels: Iterable[str]) -> bool:
        """Check raw ``name`` / ``type:name`` labels against the filters."""
        if not self._provided_tags:
            return True
        return should_run(self._provided_tags, tags_from_values(labels))

    def should_run_class(self, unit: TestUnit) -> bool:
        if not self._provided_tags:
            return True
        tags = self._require_tag_source().tags_for_class(unit)
        return should_run(self._provided_tags, tags)

    def should_run_method(self, unit: TestUnit, member_name: str) -> bool:
        """Check a member's tags, unless its runner filters tags natively."""
        if not self.is_taggable(unit):
            return True
        if not self._provided_tags:
            return True
        tags = self._require_tag_source().tags_for_member(unit, member_name)
        return should_run(self._provided_tags, tags)

    def _require_tag_source(self) -> TagSource:
        if self._tag_source is None:
            msg = "TagScanner needs a tag source to look up class or member tags"
            raise TagScannerError(msg)
        return self._tag_source
