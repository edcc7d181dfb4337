from __future__ import annotations

"""
Unit tests for CLI Argument Definition and Mapping.
"""

import pytest

from localesweep.interface.cli.args import (
    TOOL_PRUNE,
    TOOL_REPORT,
    args_to_overrides,
    build_parser,
)


def test_no_arguments_means_no_overrides():
    """TC-01: No flags produce no overrides."""
    args = build_parser(TOOL_REPORT).parse_args([])

    assert args_to_overrides(args) == {}
    assert args.json_output is False
    assert args.debug is False


def test_path_flags_map_to_config_keys():
    """TC-02: Path flags map to their config keys."""
    args = build_parser(TOOL_PRUNE).parse_args(
        ["--root", "/proj", "--src", "app", "--primary", "a.ts", "--secondary", "b.ts", "--types", "t.ts"]
    )

    assert args_to_overrides(args) == {
        "root_dir": "/proj",
        "src_dir": "app",
        "primary_locale": "a.ts",
        "secondary_locale": "b.ts",
        "types_file": "t.ts",
    }


def test_csv_flags_are_split():
    """TC-03: Comma-separated flags become lists."""
    args = build_parser(TOOL_REPORT).parse_args(["--ext", ".ts, .vue,", "--sections", "common,nav"])

    overrides = args_to_overrides(args)

    assert overrides["extensions"] == [".ts", ".vue"]
    assert overrides["sections"] == ["common", "nav"]


def test_trim_members_flag():
    """TC-04: --trim-members enables member trimming."""
    args = build_parser(TOOL_REPORT).parse_args(["--trim-members"])

    assert args_to_overrides(args) == {"trim_member_access": True}


def test_report_tool_has_no_write_options():
    """TC-05: The report tool rejects prune-only flags."""
    parser = build_parser(TOOL_REPORT)

    with pytest.raises(SystemExit):
        parser.parse_args(["--dry-run"])
    with pytest.raises(SystemExit):
        parser.parse_args(["--secondary", "es.ts"])


def test_prune_dry_run_and_diagnostics():
    """TC-06: Diagnostic flags never become config overrides."""
    args = build_parser(TOOL_PRUNE).parse_args(
        ["--dry-run", "--debug", "--json", "--config", "c.json", "--log-file", "x.log"]
    )

    assert args.dry_run is True
    assert args.debug is True
    assert args.json_output is True
    assert args.config_path == "c.json"
    assert args.log_file == "x.log"
    assert args_to_overrides(args) == {}


def test_default_program_names():
    """TC-07: Each tool has its own program name."""
    assert build_parser(TOOL_REPORT).prog == "find-unused-i18n"
    assert build_parser(TOOL_PRUNE).prog == "prune-i18n"
    assert build_parser(TOOL_PRUNE, prog="localesweep prune").prog == "localesweep prune"
