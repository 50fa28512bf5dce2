from __future__ import annotations

from dataclasses import dataclass, field

from TagSelection.shared.errors import TagSyntaxError

NEGATION_MARKER = "~"
TYPE_SEPARATOR = ":"


@dataclass(frozen=True)
class TestTag:
    """A test tag identified by its ``(name, type)`` pair.

    The textual form is ``name`` for an untyped tag or ``type:name``.
    A type starting with ``~`` declares a negative filter; subject tags
    attached to tests never carry the marker.
    """

    __test__ = False

    name: str
    type: str = ""

    @classmethod
    def with_name(cls, name: str) -> TestTag:
        return cls(name=name)

    def and_type(self, type: str) -> TestTag:  # noqa: A002
        return TestTag(name=self.name, type=type)

    @classmethod
    def with_value(cls, value: str) -> TestTag:
        """Parse ``name`` or ``type:name``, splitting on the first ``:``."""
        if TYPE_SEPARATOR in value:
            type_, name = value.split(TYPE_SEPARATOR, 1)
        else:
            type_, name = "", value
        name = name.strip()
        if not name:
            msg = f"Tag {value!r} has no name"
            raise TagSyntaxError(msg)
        return cls(name=name, type=type_.strip())

    @property
    def is_negative(self) -> bool:
        return self.type.startswith(NEGATION_MARKER)

    def without_negation_marker(self) -> TestTag:
        if not self.is_negative:
            return self
        return TestTag(name=self.name, type=self.type[len(NEGATION_MARKER):])

    def __str__(self) -> str:
        if self.type:
            return f"{self.type}{TYPE_SEPARATOR}{self.name}"
        return self.name


@dataclass(frozen=True)
class TestUnit:
    """Opaque identity of a test class, suite or module handed to collaborators.

    ``runner`` names the test-runner kind the unit declares; ``obj`` is
    whatever the tag source needs to resolve tags (a class, a pytest item,
    a Robot Framework suite).
    """

    __test__ = False

    name: str
    runner: str | None = None
    obj: object = field(default=None, compare=False, repr=False)
