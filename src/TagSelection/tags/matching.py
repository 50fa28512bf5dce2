"""Filter-tag parsing, partitioning and the inclusion decision."""
from __future__ import annotations

from typing import TYPE_CHECKING

from TagSelection.shared.types import TestTag

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

TAG_LIST_SEPARATOR = ","


def parse_tag_list(raw: str | None) -> list[TestTag]:
    """Parse a comma-separated filter expression such as ``"smoke,~speed:slow"``."""
    if not raw or not raw.strip():
        return []
    return [
        TestTag.with_value(entry)
        for entry in (part.strip() for part in raw.split(TAG_LIST_SEPARATOR))
        if entry
    ]


def tags_from_values(values: Iterable[str]) -> list[TestTag]:
    return [TestTag.with_value(value) for value in values]


def positive_filters(filter_tags: Iterable[TestTag]) -> list[TestTag]:
    return [tag for tag in filter_tags if not tag.is_negative]


def negative_filters(filter_tags: Iterable[TestTag]) -> list[TestTag]:
    """Negative filters, stripped of ``~`` so they compare against subject tags."""
    return [tag.without_negation_marker() for tag in filter_tags if tag.is_negative]


def any_match(filter_tags: Iterable[TestTag], subject_tags: Iterable[TestTag]) -> bool:
    subjects = frozenset(subject_tags)
    return any(tag in subjects for tag in filter_tags)


def should_run(filter_tags: Sequence[TestTag], subject_tags: Iterable[TestTag]) -> bool:
    """Decide whether a unit carrying ``subject_tags`` runs under ``filter_tags``.

    No filters means everything runs. Without positive filters the positive
    side is satisfied; a negative match always excludes.
    """
    if not filter_tags:
        return True
    subjects = frozenset(subject_tags)

    positive = positive_filters(filter_tags)
    positive_match = not positive or any_match(positive, subjects)

    negative = negative_filters(filter_tags)
    negative_match = bool(negative) and any_match(negative, subjects)

    return positive_match and not negative_match
