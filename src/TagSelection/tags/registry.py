"""Runner registry: which test-runner kinds accept member-level tag filtering."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from TagSelection.shared.types import TestUnit


class RunnerRegistry:
    """Registry mapping runner kinds to their taggable capability.

    Self-filtering runners (behave, pytest-bdd) evaluate their own tag
    expressions, so member-level filtering is skipped for their units.
    Units without a registered runner are not taggable.
    """

    def __init__(self) -> None:
        self._runners: dict[str, bool] = {}

    def register(self, kind: str, taggable: bool = True) -> None:
        """Register a runner kind, replacing any previous entry."""
        self._runners[kind] = taggable

    def is_taggable(self, unit: TestUnit) -> bool:
        if unit.runner is None:
            return False
        return self._runners.get(unit.runner, False)

    def available(self) -> list[str]:
        """Return names of all registered runner kinds."""
        return sorted(self._runners)


def _build_default_registry() -> RunnerRegistry:
    registry = RunnerRegistry()
    registry.register("pytest")
    registry.register("unittest")
    registry.register("robot")
    registry.register("behave", taggable=False)
    registry.register("pytest-bdd", taggable=False)
    return registry


default_registry = _build_default_registry()
