from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

TAGS_ENV_VAR = "TAGS"


@dataclass(frozen=True)
class TagFilterConfig:
    """Configuration for a tag-filtered run.

    ``tags`` is the raw comma-separated filter expression, for example
    ``"smoke,~speed:slow,feature:login"``.
    """

    tags: str = ""

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> TagFilterConfig:
        env = os.environ if environ is None else environ
        return cls(tags=env.get(TAGS_ENV_VAR, ""))
