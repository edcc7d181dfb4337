from __future__ import annotations

"""
Base Definitions for Reference Detection Strategies.

Every strategy is a pure function of (file text, key space) returning the
subset of keys it considers referenced. Strategies never veto each other:
the extractor simply unions their results.
"""

import re
from abc import ABC, abstractmethod
from typing import AbstractSet, Final, List, Optional, Set

# One identifier-like path segment (ASCII word characters only)
SEGMENT: Final[str] = r"[a-zA-Z0-9_]+"
# One or more segments joined by dots
DOTTED_PATH: Final[str] = rf"{SEGMENT}(?:\.{SEGMENT})*"
# Either quote character around a bracketed key
QUOTE: Final[str] = r"['\"]"


class ReferenceStrategy(ABC):
    """
    Abstract base class for one textual reference-detection rule.
    """

    name: str = "base"

    @abstractmethod
    def find(self, text: str, key_space: AbstractSet[str]) -> Set[str]:
        """
        Detect referenced keys in a single file.

        Args:
            text: Full content of the file.
            key_space: Every known key path, for membership checks.

        Returns:
            Set[str]: Keys of `key_space` referenced in `text`.
        """


def longest_known_prefix(
        segments: List[str],
        key_space: AbstractSet[str],
        min_segments: int,
        head: str = "",
) -> Optional[str]:
    """
    Drop trailing segments until the remaining path is a known key.

    Used to see through member access on a translation string
    (`t.common.save.length` -> `common.save`).

    Args:
        segments: Path segments as matched in the source.
        key_space: Known key paths.
        min_segments: Never try paths shorter than this many segments.
        head: Optional leading path (e.g. the section of an alias).

    Returns:
        Optional[str]: The first known candidate, or None.
    """
    parts = list(segments)
    while len(parts) >= min_segments and parts:
        candidate = ".".join(parts)
        if head:
            candidate = f"{head}.{candidate}"
        if candidate in key_space:
            return candidate
        parts.pop()
    return None


def compile_ascii(pattern: str) -> re.Pattern:
    """Compile with ASCII word semantics, matching JavaScript's \\b and \\w."""
    return re.compile(pattern, re.ASCII)
