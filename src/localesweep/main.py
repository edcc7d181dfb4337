from __future__ import annotations

"""
Main Entry Point and Global Supervisor.

Routes `localesweep report ...` and `localesweep prune ...` to the CLI
controller and installs a global exception hook so unexpected crashes are
logged before the stack trace reaches stderr.
"""

import logging
import os
import sys
import traceback
from typing import Any, List, Optional

# -----------------------------------------------------------------------------
# ENVIRONMENT INITIALIZATION
# -----------------------------------------------------------------------------

# Allow running this file directly from a source checkout
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
SRC_DIR = os.path.dirname(BASE_DIR)
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

_USAGE = "usage: localesweep {report,prune} [options]   (use '<command> --help' for options)"


# -----------------------------------------------------------------------------
# GLOBAL SUPERVISOR (EXCEPTION HANDLING)
# -----------------------------------------------------------------------------

def global_exception_handler(exctype: type[BaseException], value: BaseException, tb: Any) -> None:
    """
    Log an unhandled exception, then print the full trace to stderr.

    Args:
        exctype: Exception class.
        value: Exception instance.
        tb: Traceback object.
    """
    stack_trace = "".join(traceback.format_exception(exctype, value, tb))

    logger = logging.getLogger("localesweep.supervisor")
    logger.critical(f"FATAL EXCEPTION DETECTED: {value}")

    print("\n" + "=" * 80, file=sys.stderr)
    print("CRITICAL ERROR (LOCALESWEEP)", file=sys.stderr)
    print("=" * 80, file=sys.stderr)
    print(stack_trace, file=sys.stderr)


# -----------------------------------------------------------------------------
# ROUTING
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Dispatch to the report or prune tool.

    Args:
        argv: Arguments including the command name (defaults to sys.argv[1:]).

    Returns:
        int: Process exit code.
    """
    sys.excepthook = global_exception_handler

    from localesweep.interface.cli import app
    from localesweep.interface.cli.args import TOOL_PRUNE, TOOL_REPORT

    args = list(sys.argv[1:] if argv is None else argv)
    if not args or args[0] in ("-h", "--help"):
        print(_USAGE)
        return 0 if args else 2

    command, rest = args[0], args[1:]
    if command not in (TOOL_REPORT, TOOL_PRUNE):
        print(f"localesweep: unknown command '{command}'", file=sys.stderr)
        print(_USAGE, file=sys.stderr)
        return 2

    return app.main(rest, tool=command, prog=f"localesweep {command}")


if __name__ == "__main__":
    sys.exit(main())
