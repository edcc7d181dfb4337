from __future__ import annotations

"""
Analysis Domain Data Models.

Immutable result objects passed between the engine and the interface
layer. Translation trees themselves stay plain dictionaries.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

# Nested mapping whose leaves are strings (or arrays / scalars, treated as leaves)
TranslationTree = Dict[str, Any]

# -----------------------------------------------------------------------------
# LOCALE SOURCE MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class LocaleModule:
    """
    A locale source file reduced to its exported translation object.

    Attributes:
        export_name: Name of the exported constant (e.g. 'englishTranslations').
        tree: The parsed translation tree.
    """
    export_name: str
    tree: TranslationTree = field(default_factory=dict)

# -----------------------------------------------------------------------------
# RESULT MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class UsageReport:
    """
    Partition of the key space into referenced and unreferenced keys.

    Attributes:
        all_keys: Every key path, in flattening order.
        used_keys: Keys referenced by at least one scanned file.
        unused_keys: Keys referenced nowhere, in flattening order.
        files_scanned: Number of corpus files analyzed.
    """
    all_keys: List[str]
    used_keys: List[str]
    unused_keys: List[str]
    files_scanned: int = 0

    @property
    def total_count(self) -> int:
        return len(self.all_keys)

    @property
    def used_count(self) -> int:
        return len(self.used_keys)

    @property
    def unused_count(self) -> int:
        return len(self.unused_keys)


@dataclass(frozen=True)
class PruneResult:
    """
    Outcome of a prune-and-regenerate run.

    Attributes:
        usage: The usage report the prune was computed from.
        removed: Number of leaves deleted from the primary tree.
        skipped: Unused paths whose deletion was skipped.
        written: Files overwritten on disk (empty on dry run).
        dry_run: Whether writes were suppressed.
    """
    usage: UsageReport
    removed: int
    skipped: List[str] = field(default_factory=list)
    written: List[str] = field(default_factory=list)
    dry_run: bool = False
