from __future__ import annotations

"""
Bracket Notation Strategy.

Three exact shapes, single or double quotes:

    t['section'].key.more
    t.section['key']
    t['section']['key']       (two levels only)
"""

from typing import AbstractSet, Final, Set

from localesweep.core.analysis.strategies.base import (
    DOTTED_PATH,
    QUOTE,
    SEGMENT,
    ReferenceStrategy,
    compile_ascii,
)

_BRACKET_THEN_DOT_RX: Final = compile_ascii(rf"t\[{QUOTE}({SEGMENT}){QUOTE}\]\.({DOTTED_PATH})")
_DOT_THEN_BRACKET_RX: Final = compile_ascii(rf"t\.({SEGMENT})\[{QUOTE}({SEGMENT}){QUOTE}\]")
_DOUBLE_BRACKET_RX: Final = compile_ascii(
    rf"t\[{QUOTE}({SEGMENT}){QUOTE}\]\[{QUOTE}({SEGMENT}){QUOTE}\]"
)


class BracketAccessStrategy(ReferenceStrategy):
    """Joins the two captured parts with '.' and checks membership."""

    name = "bracket"

    def find(self, text: str, key_space: AbstractSet[str]) -> Set[str]:
        used: Set[str] = set()
        for pattern in (_BRACKET_THEN_DOT_RX, _DOT_THEN_BRACKET_RX, _DOUBLE_BRACKET_RX):
            for match in pattern.finditer(text):
                key = f"{match.group(1)}.{match.group(2)}"
                if key in key_space:
                    used.add(key)
        return used
