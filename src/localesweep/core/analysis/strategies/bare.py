from __future__ import annotations

"""
Bare Section Access Strategy.

Matches `section.key[.more]` for a known top-level section name with no
`t.` prefix, covering sections that reached a component some other way
(props, parameters, manual assignment).
"""

import re
from typing import AbstractSet, Iterable, Optional, Set

from localesweep.core.analysis.strategies.base import (
    DOTTED_PATH,
    ReferenceStrategy,
    compile_ascii,
)
from localesweep.domain.constants import TOP_LEVEL_SECTIONS


class BareSectionStrategy(ReferenceStrategy):
    """Full-match lookup of `section.path` occurrences."""

    name = "bare-section"

    def __init__(self, sections: Iterable[str] = TOP_LEVEL_SECTIONS) -> None:
        self.sections = tuple(sections)
        self._pattern: Optional[re.Pattern] = None
        if self.sections:
            alternation = "|".join(re.escape(s) for s in self.sections)
            self._pattern = compile_ascii(rf"\b(?:{alternation})\.{DOTTED_PATH}")

    def find(self, text: str, key_space: AbstractSet[str]) -> Set[str]:
        if self._pattern is None:
            return set()
        return {m.group(0) for m in self._pattern.finditer(text) if m.group(0) in key_space}
