from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle of both tools: logging bootstrap, merging of
configuration sources (defaults, project file, command-line overrides),
engine execution and result rendering. Results go to stdout; diagnostics go
to stderr through logging.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from localesweep.core.pipeline.engine import resolve_paths, run_prune, run_report
from localesweep.core.pipeline.validator import validate_config
from localesweep.domain.config import load_config
from localesweep.domain.errors import LocalesweepError
from localesweep.domain.models import PruneResult, UsageReport
from localesweep.infra.logging import LoggingConfig, configure_logging, get_logger
from localesweep.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None, tool: str = cli_args.TOOL_REPORT, prog: Optional[str] = None) -> int:
    """
    Execute one of the CLI tools.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:]).
        tool: 'report' or 'prune'.
        prog: Program name shown in usage messages.

    Returns:
        int: Process exit code (0 success, 1 fatal error, 2 missing source
             directory, 130 interrupted).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser(tool, prog=prog)
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console on stderr, optional file)
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    # 3. Configuration hierarchy: defaults < project file < CLI flags
    base_conf = load_config(args.config_path)
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    cfg, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    # 4. Pre-flight input verification
    src_dir = resolve_paths(cfg)["src_dir"]
    if not os.path.isdir(src_dir):
        msg = f"Source directory does not exist: {src_dir}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    # 5. Engine execution phase
    try:
        if tool == cli_args.TOOL_PRUNE:
            result: Any = run_prune(cfg, dry_run=bool(args.dry_run))
        else:
            result = run_report(cfg)
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130
    except (LocalesweepError, OSError) as e:
        logger.critical(f"Run aborted: {e}", exc_info=args.debug)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    # 6. Output rendering phase
    if args.json_output:
        print(json.dumps(_to_json(result), ensure_ascii=False, indent=2))
    elif isinstance(result, PruneResult):
        _print_prune_summary(result)
    else:
        _print_usage_report(result)

    return 0


def report_main(argv: Optional[List[str]] = None) -> int:
    """Console entry point of `find-unused-i18n`."""
    return main(argv, tool=cli_args.TOOL_REPORT)


def prune_main(argv: Optional[List[str]] = None) -> int:
    """Console entry point of `prune-i18n`."""
    return main(argv, tool=cli_args.TOOL_PRUNE)

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow-merge non-null overrides into the base configuration."""
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _print_counts(report: UsageReport) -> None:
    print(f"Total keys: {report.total_count}")
    print(f"Used keys:  {report.used_count}")
    print(f"Unused:     {report.unused_count}")


def _print_usage_report(report: UsageReport) -> None:
    """Counts followed by one unused key path per line."""
    _print_counts(report)
    print("\nUnused keys:\n")
    for key in report.unused_keys:
        print(key)


def _print_prune_summary(result: PruneResult) -> None:
    _print_counts(result.usage)
    if result.dry_run:
        print(f"Dry run: {result.removed} key(s) would be pruned. No files were written.")
        return
    print("Pruned locales, aligned secondary locale to primary shape, and updated types.")


def _to_json(result: Any) -> Dict[str, Any]:
    """Serialize a result dataclass, adding the derived counts."""
    usage = result.usage if isinstance(result, PruneResult) else result
    data = asdict(result)
    data["counts"] = {
        "total": usage.total_count,
        "used": usage.used_count,
        "unused": usage.unused_count,
    }
    return data

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(report_main())
