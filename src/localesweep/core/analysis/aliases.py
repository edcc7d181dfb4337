from __future__ import annotations

"""
Destructuring Alias Resolution.

Detects local names bound to a top-level translation section through
object destructuring of the translation root, e.g.

    const { invitation } = t;
    const { invitation: inv, common } = t;

The resulting map is flat and scope-unaware: a later binding of the same
local name overwrites an earlier one anywhere in the file.
"""

import re
from abc import ABC, abstractmethod
from typing import Dict, Final, Iterable

from localesweep.domain.constants import TOP_LEVEL_SECTIONS

# A bare `t` (optionally followed by ';') on the right-hand side
_DESTRUCTURE_RX: Final[re.Pattern] = re.compile(r"const\s*\{([^}]+)\}\s*=\s*t\s*;?", re.ASCII)
_RENAMED_BINDING_RX: Final[re.Pattern] = re.compile(r"(\w+)\s*:\s*(\w+)", re.ASCII)


class AliasResolver(ABC):
    """Builds the local identifier -> section map for one file."""

    @abstractmethod
    def resolve(self, text: str) -> Dict[str, str]:
        """
        Args:
            text: Full content of one source file.

        Returns:
            Dict[str, str]: Local identifier mapped to its section name.
        """


class DestructuringAliasResolver(AliasResolver):
    """Regex-based resolver for `const { ... } = t` statements."""

    def __init__(self, sections: Iterable[str] = TOP_LEVEL_SECTIONS) -> None:
        self.sections = frozenset(sections)

    def resolve(self, text: str) -> Dict[str, str]:
        aliases: Dict[str, str] = {}
        for match in _DESTRUCTURE_RX.finditer(text):
            for part in match.group(1).split(","):
                binding = part.strip()
                if not binding:
                    continue
                renamed = _RENAMED_BINDING_RX.search(binding)
                if renamed:
                    section, local = renamed.group(1), renamed.group(2)
                    if section in self.sections:
                        aliases[local] = section
                elif binding in self.sections:
                    aliases[binding] = binding
        return aliases
