#!/usr/bin/env python3
"""
actionlimits CLI - check limit values and resolve limits files.

Usage:
    actionlimits check 384
    actionlimits resolve action.yaml --format json
    actionlimits range
"""

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from typing import Any

import yaml  # type: ignore[import-untyped]

import actionlimits
from actionlimits.cli.output import ConsoleOutput, OutputWriter
from actionlimits.config import DEFAULT_SECTION, load_limits_file
from actionlimits.exceptions import LimitError
from actionlimits.memory import MAX_MEMORY, MIN_MEMORY, STD_MEMORY, MemoryLimit

_LOG_LEVELS = ["debug", "info", "warning", "error"]


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all commands registered."""
    parser = argparse.ArgumentParser(
        prog="actionlimits", description="Action limit utility commands"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"actionlimits {actionlimits.__version__}",
    )
    parser.add_argument(
        "--log-level",
        choices=_LOG_LEVELS,
        default="warning",
        help="Log level (default: warning)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    check = commands.add_parser("check", help="Validate a memory limit JSON value")
    check.add_argument("value", help="JSON value, e.g. 256")

    resolve = commands.add_parser(
        "resolve", help="Display the resolved limits section of a YAML file"
    )
    resolve.add_argument("config_file", help="Path to the action definition file")
    resolve.add_argument(
        "--section",
        "-s",
        default=DEFAULT_SECTION,
        help=f"Limits section key (default: {DEFAULT_SECTION})",
    )
    resolve.add_argument(
        "--format",
        "-f",
        choices=["yaml", "json"],
        default="yaml",
        help="Output format (default: yaml)",
    )
    resolve.add_argument(
        "--no-env",
        action="store_true",
        help="Disable environment variable overrides",
    )

    commands.add_parser("range", help="Display the permissible memory range")
    return parser


def _check(args: argparse.Namespace, out: OutputWriter) -> int:
    limit = MemoryLimit.from_json(args.value)
    out.write(limit.to_json())
    return 0


def _resolve(args: argparse.Namespace, out: OutputWriter) -> int:
    limits = load_limits_file(
        args.config_file,
        section=args.section,
        enable_env_overrides=not args.no_env,
    )
    out.write(_format_output(limits.model_dump(mode="json"), args.format))
    return 0


def _range(args: argparse.Namespace, out: OutputWriter) -> int:
    out.write(f"min={MIN_MEMORY}")
    out.write(f"max={MAX_MEMORY}")
    out.write(f"default={STD_MEMORY}")
    return 0


def _format_output(data: dict[str, Any], output_format: str) -> str:
    """Format data according to selected format."""
    if output_format == "json":
        return json.dumps(data, indent=2, sort_keys=False)

    result: str = yaml.dump(
        data,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
        indent=2,
    )
    return result.rstrip()


_COMMANDS = {
    "check": _check,
    "resolve": _resolve,
    "range": _range,
}


def main(
    argv: Sequence[str] | None = None,
    out: OutputWriter | None = None,
    err: OutputWriter | None = None,
) -> int:
    """
    Main entry point for the actionlimits CLI.

    Results go to out (stdout by default) and error lines to err (stderr
    by default), so resolved output can be piped safely.
    """
    args = _build_parser().parse_args(argv)
    out = out or ConsoleOutput()
    err = err or ConsoleOutput(sys.stderr)

    logging.basicConfig(level=args.log_level.upper())
    lg = logging.getLogger("actionlimits.cli")

    try:
        return _COMMANDS[args.command](args, out)
    except LimitError as e:
        lg.debug("command failed", extra={"command": args.command, "exception": e})
        err.write(f"error: {e}")
        return 1


if __name__ == "__main__":
    exit(main())
