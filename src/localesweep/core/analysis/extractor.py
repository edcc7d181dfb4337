from __future__ import annotations

"""
Reference Extraction Engine.

Composite over the individual detection strategies. Each file's used-key
set is the plain union of what every strategy reports; no strategy can
remove another's hit.

All detection is textual. Dynamic access (`t[key]`), scope and comments are
not understood, so results can both miss and over-count references.
"""

import logging
from typing import AbstractSet, Iterable, List, Optional, Sequence, Set

from localesweep.core.analysis.aliases import DestructuringAliasResolver
from localesweep.core.analysis.strategies import (
    AliasAccessStrategy,
    BareSectionStrategy,
    BracketAccessStrategy,
    DirectAccessStrategy,
    ReferenceStrategy,
)
from localesweep.domain.constants import TOP_LEVEL_SECTIONS

logger = logging.getLogger(__name__)


def default_strategies(
        sections: Iterable[str] = TOP_LEVEL_SECTIONS,
        trim_member_access: bool = False,
) -> List[ReferenceStrategy]:
    """
    Build the standard strategy set: direct, bare section, bracket, alias.

    Args:
        sections: Top-level section names used by the bare and alias rules.
        trim_member_access: Let direct/alias hits drop trailing segments.

    Returns:
        List[ReferenceStrategy]: Strategies in evaluation order.
    """
    sections = tuple(sections)
    return [
        DirectAccessStrategy(trim_member_access=trim_member_access),
        BareSectionStrategy(sections),
        BracketAccessStrategy(),
        AliasAccessStrategy(
            DestructuringAliasResolver(sections),
            trim_member_access=trim_member_access,
        ),
    ]


class ReferenceExtractor:
    """Unions the hits of a fixed set of strategies."""

    def __init__(self, strategies: Optional[Sequence[ReferenceStrategy]] = None) -> None:
        self.strategies: List[ReferenceStrategy] = (
            list(strategies) if strategies is not None else default_strategies()
        )

    def extract(self, text: str, key_space: AbstractSet[str]) -> Set[str]:
        """
        Compute the keys referenced in one file.

        Args:
            text: Full file content.
            key_space: Known key paths (a set, for O(1) lookups).

        Returns:
            Set[str]: Union of all strategies' hits.
        """
        used: Set[str] = set()
        if not text or not key_space:
            return used
        for strategy in self.strategies:
            hits = strategy.find(text, key_space)
            if hits:
                logger.debug(f"Strategy '{strategy.name}' matched {len(hits)} key(s)")
            used |= hits
        return used
