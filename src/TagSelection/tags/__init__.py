"""Tags bounded context: tag parsing, matching and run/skip decisions."""

from TagSelection.tags.matching import (
    any_match,
    negative_filters,
    parse_tag_list,
    positive_filters,
    should_run,
    tags_from_values,
)
from TagSelection.tags.ports import RunnerCapability, TagSource
from TagSelection.tags.registry import RunnerRegistry, default_registry
from TagSelection.tags.scanner import TagScanner

__all__ = [
    "RunnerCapability",
    "RunnerRegistry",
    "TagScanner",
    "TagSource",
    "any_match",
    "default_registry",
    "negative_filters",
    "parse_tag_list",
    "positive_filters",
    "should_run",
    "tags_from_values",
]
