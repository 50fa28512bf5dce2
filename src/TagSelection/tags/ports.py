"""Collaborator protocols -- the ports the tag scanner resolves tags through."""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from TagSelection.shared.types import TestTag, TestUnit


@runtime_checkable
class TagSource(Protocol):
    """Protocol for tag lookups.

    Decouples the scanner from how tags are declared (pytest markers,
    decorators, runner metadata). Member tags are independent of class
    tags; callers ask for whichever set the check needs.
    """

    def tags_for_class(self, unit: TestUnit) -> Sequence[TestTag]: ...

    def tags_for_member(self, unit: TestUnit, member_name: str) -> Sequence[TestTag]: ...


@runtime_checkable
class RunnerCapability(Protocol):
    """Reports whether a unit's runner leaves member filtering to the scanner."""

    def is_taggable(self, unit: TestUnit) -> bool: ...
