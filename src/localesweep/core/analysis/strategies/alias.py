from __future__ import annotations

"""
Destructured Alias Access Strategy.

Resolves locals bound by `const { section: local } = t` and rescans the
file for `local.path` and `local['leaf']`, rewriting each hit to
`section.path` before the key-space check.
"""

import re
from typing import AbstractSet, Optional, Set

from localesweep.core.analysis.aliases import AliasResolver, DestructuringAliasResolver
from localesweep.core.analysis.strategies.base import (
    DOTTED_PATH,
    QUOTE,
    SEGMENT,
    ReferenceStrategy,
    compile_ascii,
    longest_known_prefix,
)


class AliasAccessStrategy(ReferenceStrategy):
    """
    Alias-aware lookup delegating alias discovery to an AliasResolver.

    With `trim_member_access`, dotted hits drop trailing segments until a
    known key is found (keeping at least one segment after the section).
    """

    name = "alias"

    def __init__(
            self,
            resolver: Optional[AliasResolver] = None,
            trim_member_access: bool = False,
    ) -> None:
        self.resolver = resolver or DestructuringAliasResolver()
        self.trim_member_access = trim_member_access

    def find(self, text: str, key_space: AbstractSet[str]) -> Set[str]:
        used: Set[str] = set()
        for local, section in self.resolver.resolve(text).items():
            name = re.escape(local)

            for match in compile_ascii(rf"\b{name}\.({DOTTED_PATH})").finditer(text):
                path = match.group(1)
                if self.trim_member_access:
                    known = longest_known_prefix(path.split("."), key_space, 1, head=section)
                    if known:
                        used.add(known)
                else:
                    key = f"{section}.{path}"
                    if key in key_space:
                        used.add(key)

            for match in compile_ascii(rf"{name}\[{QUOTE}({SEGMENT}){QUOTE}\]").finditer(text):
                key = f"{section}.{match.group(1)}"
                if key in key_space:
                    used.add(key)
        return used
