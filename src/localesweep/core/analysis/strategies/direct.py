from __future__ import annotations

"""
Direct Dotted Access Strategy.

Matches `t.section.key[.more]`: the identifier `t` followed by at least two
dotted segments. A single-segment access such as `t.title` is never matched.
"""

from typing import AbstractSet, Final, Set

from localesweep.core.analysis.strategies.base import (
    SEGMENT,
    ReferenceStrategy,
    compile_ascii,
    longest_known_prefix,
)

_DIRECT_RX: Final = compile_ascii(rf"\bt\.{SEGMENT}(?:\.{SEGMENT})+")


class DirectAccessStrategy(ReferenceStrategy):
    """
    Looks up the path after `t.` in the key space.

    With `trim_member_access`, trailing segments are dropped until a known
    key of at least two segments is found.
    """

    name = "direct"

    def __init__(self, trim_member_access: bool = False) -> None:
        self.trim_member_access = trim_member_access

    def find(self, text: str, key_space: AbstractSet[str]) -> Set[str]:
        used: Set[str] = set()
        for match in _DIRECT_RX.finditer(text):
            path = match.group(0)[2:]
            if self.trim_member_access:
                known = longest_known_prefix(path.split("."), key_space, min_segments=2)
                if known:
                    used.add(known)
            elif path in key_space:
                used.add(path)
        return used
