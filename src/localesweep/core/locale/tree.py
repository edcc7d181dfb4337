from __future__ import annotations

"""
Translation Tree Operations.

Pure functions over nested translation dictionaries: flattening into dotted
key paths, navigation, in-place deletion of unused leaves, and rebuilding a
secondary locale so it mirrors the shape of the primary one.

Only dictionaries are internal nodes. Lists and scalars are leaves, even
though lists are not primitive.
"""

import logging
from typing import Any, Iterable, List, Optional, Tuple

from localesweep.domain.models import TranslationTree

logger = logging.getLogger(__name__)

_SEPARATOR = "."

# -----------------------------------------------------------------------------
# FLATTENING AND NAVIGATION
# -----------------------------------------------------------------------------

def flatten_keys(tree: TranslationTree, prefix: str = "") -> List[str]:
    """
    Collect every dotted key path that ends on a leaf.

    Order is depth-first in insertion order, which is the order used for
    reporting unused keys.

    Args:
        tree: Root (or sub-tree) mapping.
        prefix: Path of `tree` inside the full tree.

    Returns:
        List[str]: Key paths, one per leaf, without duplicates.
    """
    keys: List[str] = []
    for key, value in tree.items():
        path = f"{prefix}{_SEPARATOR}{key}" if prefix else key
        if isinstance(value, dict):
            keys.extend(flatten_keys(value, path))
        else:
            keys.append(path)
    return keys


def resolve_path(tree: TranslationTree, path: str) -> Optional[Any]:
    """Return the node at a dotted path, or None if it does not exist."""
    node: Any = tree
    for segment in path.split(_SEPARATOR):
        if not isinstance(node, dict) or segment not in node:
            return None
        node = node[segment]
    return node

# -----------------------------------------------------------------------------
# PRUNING
# -----------------------------------------------------------------------------

def delete_path(tree: TranslationTree, path: str) -> bool:
    """
    Delete the entry named by the last segment of `path`, in place.

    Navigation that hits a missing or non-mapping intermediate node aborts
    the deletion without touching the tree.

    Returns:
        bool: True if an entry was removed.
    """
    *parents, last = path.split(_SEPARATOR)
    node: Any = tree
    for segment in parents:
        child = node.get(segment)
        if not isinstance(child, dict):
            if child is None:
                logger.debug(f"Skip prune of '{path}': '{segment}' no longer exists.")
            else:
                logger.warning(
                    f"Skip prune of '{path}': '{segment}' is a {type(child).__name__}, not a mapping."
                )
            return False
        node = child

    if last not in node:
        logger.debug(f"Skip prune of '{path}': already absent.")
        return False

    del node[last]
    return True


def prune_tree(tree: TranslationTree, paths: Iterable[str]) -> Tuple[int, List[str]]:
    """
    Delete every given key path from the tree, in place.

    Re-applying the same paths is a no-op.

    Returns:
        Tuple[int, List[str]]: Number of removed entries and the skipped paths.
    """
    removed = 0
    skipped: List[str] = []
    for path in paths:
        if delete_path(tree, path):
            removed += 1
        else:
            skipped.append(path)
    return removed, skipped

# -----------------------------------------------------------------------------
# LOCALE ALIGNMENT
# -----------------------------------------------------------------------------

def align_to_template(target: TranslationTree, template: TranslationTree) -> TranslationTree:
    """
    Rebuild `target` key-for-key in the shape of `template`.

    Keys missing from the target are backfilled with the template value, so
    untranslated text shows up in the template's language instead of going
    missing at runtime. Keys present only in the target are dropped.

    Args:
        target: Secondary locale tree (not modified).
        template: Authoritative primary tree.

    Returns:
        TranslationTree: A new tree with exactly the template's key paths.
    """
    out: TranslationTree = {}
    for key, tmpl_val in template.items():
        tgt_val = target.get(key) if isinstance(target, dict) else None
        if isinstance(tmpl_val, list):
            out[key] = tgt_val if isinstance(tgt_val, list) else tmpl_val
        elif isinstance(tmpl_val, dict):
            out[key] = align_to_template(tgt_val if isinstance(tgt_val, dict) else {}, tmpl_val)
        else:
            out[key] = tgt_val if isinstance(tgt_val, str) else tmpl_val
    return out
