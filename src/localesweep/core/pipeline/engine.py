from __future__ import annotations

"""
Core orchestration pipeline.

Two workflows share the same analysis front end:

Report:
1. Validates configuration and resolves paths.
2. Loads the primary locale (parse failures degrade to an empty tree).
3. Scans the corpus and returns the usage partition.

Prune:
1. Validates configuration and resolves paths.
2. Loads primary locale, secondary locale and types file up front; any
   locale failure aborts before anything is modified.
3. Scans the corpus for unused keys.
4. Deletes the unused keys from the primary tree.
5. Rebuilds the secondary tree in the primary's shape.
6. Renders and overwrites both locale modules and the types file.
"""

import logging
import os
from typing import Any, Dict, List, Optional, Tuple

from localesweep.core.analysis.extractor import ReferenceExtractor, default_strategies
from localesweep.core.locale.codegen import render_locale_module, render_types_module
from localesweep.core.locale.parser import read_locale_module
from localesweep.core.locale.tree import align_to_template, prune_tree
from localesweep.core.pipeline.validator import validate_config
from localesweep.core.services.usage import analyze_corpus
from localesweep.domain.errors import LocaleReadError
from localesweep.domain.models import PruneResult, UsageReport
from localesweep.infra.fs import normalize_path, read_text, resolve_project_path, write_text

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def run_report(config: Optional[Dict[str, Any]] = None) -> UsageReport:
    """
    Compute which keys of the primary locale are referenced in the corpus.

    Args:
        config: Raw or partial configuration.

    Returns:
        UsageReport: Usage partition of the primary key space.

    Raises:
        CorpusReadError: The source directory cannot be read.
        LocaleReadError: The primary locale file cannot be read.
    """
    cfg = _prepare_config(config)
    paths = resolve_paths(cfg)

    primary = read_locale_module(paths["primary_locale"], strict=False)
    return analyze_corpus(
        primary.tree,
        paths["src_dir"],
        extractor=build_extractor(cfg),
        extensions=cfg["extensions"],
    )


def run_prune(config: Optional[Dict[str, Any]] = None, *, dry_run: bool = False) -> PruneResult:
    """
    Remove unused keys from the locales and regenerate the translation type.

    Args:
        config: Raw or partial configuration.
        dry_run: Compute everything but write nothing.

    Returns:
        PruneResult: Usage report, prune counters and written files.

    Raises:
        CorpusReadError: The source directory cannot be read.
        LocaleReadError: A locale or the types file cannot be read.
        LocaleParseError: A locale does not contain a supported object literal.
        OSError: An output file cannot be written.
    """
    cfg = _prepare_config(config)
    paths = resolve_paths(cfg)

    # 1) Front-loaded reads
    primary = read_locale_module(paths["primary_locale"], strict=True)
    secondary = read_locale_module(paths["secondary_locale"], strict=True)
    types_source = _read_types_source(paths["types_file"])

    # 2) Analysis
    usage = analyze_corpus(
        primary.tree,
        paths["src_dir"],
        extractor=build_extractor(cfg),
        extensions=cfg["extensions"],
    )

    # 3) Transform
    removed, skipped = prune_tree(primary.tree, usage.unused_keys)
    aligned = align_to_template(secondary.tree, primary.tree)
    logger.info(f"Pruned {removed} key(s); {len(skipped)} path(s) skipped.")

    # 4) Render
    outputs: List[Tuple[str, str]] = [
        (
            paths["primary_locale"],
            render_locale_module(
                primary.export_name or cfg["primary_export"],
                primary.tree,
                cfg["type_name"],
                cfg["type_import"],
            ),
        ),
        (
            paths["secondary_locale"],
            render_locale_module(
                secondary.export_name or cfg["secondary_export"],
                aligned,
                cfg["type_name"],
                cfg["type_import"],
            ),
        ),
        (
            paths["types_file"],
            render_types_module(primary.tree, types_source, cfg["type_name"]),
        ),
    ]

    if dry_run:
        logger.info("Dry run: no files written.")
        return PruneResult(usage=usage, removed=removed, skipped=skipped, written=[], dry_run=True)

    # 5) Persist
    written: List[str] = []
    for path, content in outputs:
        write_text(path, content)
        written.append(path)
        logger.info(f"Updated {path}")

    return PruneResult(usage=usage, removed=removed, skipped=skipped, written=written, dry_run=False)


def build_extractor(cfg: Dict[str, Any]) -> ReferenceExtractor:
    """Instantiate the reference extractor described by a validated config."""
    return ReferenceExtractor(
        default_strategies(cfg["sections"], trim_member_access=cfg["trim_member_access"])
    )


def resolve_paths(cfg: Dict[str, Any]) -> Dict[str, str]:
    """
    Resolve every configured path against the project root.

    The root is `root_dir` when set, otherwise the working directory.
    """
    root = normalize_path(cfg.get("root_dir", ""), os.getcwd())
    return {
        "root_dir": root,
        "src_dir": resolve_project_path(root, cfg["src_dir"]),
        "primary_locale": resolve_project_path(root, cfg["primary_locale"]),
        "secondary_locale": resolve_project_path(root, cfg["secondary_locale"]),
        "types_file": resolve_project_path(root, cfg["types_file"]),
    }


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _prepare_config(config: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    cfg, warnings = validate_config(config if config is not None else {}, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")
    return cfg


def _read_types_source(path: str) -> str:
    """Read the existing types file; a missing file yields an empty source."""
    if not os.path.exists(path):
        logger.info(f"Types file '{path}' not found. Using the default Language block.")
        return ""
    try:
        return read_text(path)
    except (OSError, UnicodeDecodeError) as e:
        raise LocaleReadError(f"Cannot read types file '{path}': {e}") from e
