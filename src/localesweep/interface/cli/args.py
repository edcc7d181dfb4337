from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema of both tools and translates the parsed
namespace into configuration overrides. Every flag is optional: with no
arguments the tools use the conventional project layout under the working
directory.
"""

import argparse
from typing import Any, Dict, List, Optional

from localesweep.domain.constants import CONFIG_FILE_NAME

TOOL_REPORT = "report"
TOOL_PRUNE = "prune"

_PROGS = {
    TOOL_REPORT: "find-unused-i18n",
    TOOL_PRUNE: "prune-i18n",
}

_DESCRIPTIONS = {
    TOOL_REPORT: "List translation keys of the primary locale that no source file references.",
    TOOL_PRUNE: (
        "Delete unreferenced translation keys from the primary locale, realign the "
        "secondary locale to its shape and regenerate the translation type. "
        "Overwrites the files in place."
    ),
}

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser(tool: str = TOOL_REPORT, prog: Optional[str] = None) -> argparse.ArgumentParser:
    """
    Construct the argument parser for one of the tools.

    Args:
        tool: 'report' or 'prune'.
        prog: Program name override (used by the unified entry point).

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=prog or _PROGS[tool],
        description=_DESCRIPTIONS[tool],
    )

    # --- Path Management ---
    p.add_argument(
        "--root",
        dest="root_dir",
        default=None,
        help="Project root all other paths are relative to (default: current directory).",
    )
    p.add_argument(
        "--src",
        dest="src_dir",
        default=None,
        help="Source directory to scan (default: src).",
    )
    p.add_argument(
        "--primary",
        dest="primary_locale",
        default=None,
        help="Primary locale module (default: src/locales/en.ts).",
    )
    if tool == TOOL_PRUNE:
        p.add_argument(
            "--secondary",
            dest="secondary_locale",
            default=None,
            help="Secondary locale module realigned to the primary (default: src/locales/es.ts).",
        )
        p.add_argument(
            "--types",
            dest="types_file",
            default=None,
            help="Translation type declaration file (default: src/types/i18n.ts).",
        )

    # --- Reference Detection ---
    p.add_argument(
        "--ext",
        dest="extensions",
        default=None,
        help="Comma-separated source extensions (default: .ts,.tsx,.js,.jsx).",
    )
    p.add_argument(
        "--sections",
        dest="sections",
        default=None,
        help="Comma-separated top-level sections recognized without a 't.' prefix.",
    )
    p.add_argument(
        "--trim-members",
        action="store_true",
        help="Match 't.a.b.length' as key 'a.b' by dropping trailing segments.",
    )

    # --- Runtime Safety ---
    if tool == TOOL_PRUNE:
        p.add_argument(
            "--dry-run",
            action="store_true",
            help="Compute the prune but do not write any file.",
        )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help=f"JSON configuration file (default: ./{CONFIG_FILE_NAME} if present).",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this rotating log file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the result as JSON instead of plain text.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Only options the user actually passed are included, so values from the
    configuration file survive.
    """
    overrides: Dict[str, Any] = {}

    for key in ("root_dir", "src_dir", "primary_locale", "secondary_locale", "types_file"):
        value = getattr(args, key, None)
        if value:
            overrides[key] = value

    if args.extensions:
        overrides["extensions"] = _split_csv(args.extensions)
    if args.sections:
        overrides["sections"] = _split_csv(args.sections)
    if args.trim_members:
        overrides["trim_member_access"] = True

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """Convert a comma-separated string into a list of stripped items."""
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
