from __future__ import annotations

from .alias import AliasAccessStrategy
from .bare import BareSectionStrategy
from .base import ReferenceStrategy, longest_known_prefix
from .bracket import BracketAccessStrategy
from .direct import DirectAccessStrategy

__all__ = [
    "ReferenceStrategy",
    "longest_known_prefix",
    "DirectAccessStrategy",
    "BareSectionStrategy",
    "BracketAccessStrategy",
    "AliasAccessStrategy",
]
