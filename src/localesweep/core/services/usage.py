from __future__ import annotations

"""
Usage Aggregation Service.

Unions per-file reference sets into a global used-key set and derives the
unused keys. Because every strategy only reports keys that exist in the key
space, the result is an exact partition of it.
"""

import logging
from typing import AbstractSet, Iterable, Optional, Sequence, Set

from localesweep.core.analysis.extractor import ReferenceExtractor
from localesweep.core.locale.tree import flatten_keys
from localesweep.core.services.scanner import iter_corpus
from localesweep.domain.constants import DEFAULT_EXTENSIONS
from localesweep.domain.models import TranslationTree, UsageReport

logger = logging.getLogger(__name__)


def aggregate_usage(
        all_keys: Sequence[str],
        per_file_hits: Iterable[AbstractSet[str]],
) -> UsageReport:
    """
    Combine per-file hits into a usage report.

    Args:
        all_keys: The key space in flattening order.
        per_file_hits: One used-key set per scanned file.

    Returns:
        UsageReport: Used and unused keys, both in key-space order.
    """
    known = frozenset(all_keys)
    used_global: Set[str] = set()
    files = 0
    for hits in per_file_hits:
        files += 1
        used_global |= known & hits

    ordered = list(dict.fromkeys(all_keys))
    return UsageReport(
        all_keys=ordered,
        used_keys=[k for k in ordered if k in used_global],
        unused_keys=[k for k in ordered if k not in used_global],
        files_scanned=files,
    )


def analyze_corpus(
        tree: TranslationTree,
        src_dir: str,
        extractor: Optional[ReferenceExtractor] = None,
        extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> UsageReport:
    """
    Scan a source tree for references to the keys of a translation tree.

    Args:
        tree: Primary translation tree.
        src_dir: Corpus root directory.
        extractor: Reference extractor (default strategies if omitted).
        extensions: Accepted source extensions.

    Returns:
        UsageReport: The usage partition of the tree's key space.

    Raises:
        CorpusReadError: The corpus cannot be read.
    """
    extractor = extractor or ReferenceExtractor()
    all_keys = flatten_keys(tree)
    key_space = frozenset(all_keys)
    logger.info(f"Scanning '{src_dir}' for {len(key_space)} translation keys.")

    def _hits():
        for path, text in iter_corpus(src_dir, extensions):
            used = extractor.extract(text, key_space)
            logger.debug(f"{path}: {len(used)} key(s) referenced")
            yield used

    report = aggregate_usage(all_keys, _hits())
    logger.info(
        f"Scanned {report.files_scanned} file(s): "
        f"{report.used_count} used, {report.unused_count} unused."
    )
    return report
