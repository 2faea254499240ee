"""gearcheck command-line interface.

Usage:
    gearcheck validate [ROOT] [-e vendor,docs] [-f text|rich|json]
    gearcheck rules
    gearcheck config [--force]
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from gearcheck import __version__
from gearcheck.application.reporters import BaseReporter, ConsoleReporter, JSONReporter, PlainTextReporter
from gearcheck.application.rules import default_registry
from gearcheck.application.services import GearValidator
from gearcheck.domain.exceptions import GearCheckError
from gearcheck.domain.model.enums import ExitCode
from gearcheck.infrastructure.adapters.gearrc import find_config, load_config, write_default_config
from gearcheck.presentation.logs import setup_logging, verbosity_level

logger = logging.getLogger(__name__)

FORMATS = ("text", "rich", "json")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="gearcheck",
        description="Validate Go projects against the GEAR architecture rules",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  gearcheck validate                    # Validate the current directory
  gearcheck validate ./svc -e vendor    # Extra exclusion pattern
  gearcheck validate -f json            # Machine-readable output
  gearcheck rules                       # List the rules
  gearcheck config                      # Write a default .gearrc
""",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"gearcheck {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (-vv for debug)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    validate_parser = subparsers.add_parser("validate", help="Validate a Go source tree")
    validate_parser.add_argument(
        "root",
        nargs="?",
        type=Path,
        default=Path("."),
        help="Root of the Go source tree (default: current directory)",
    )
    validate_parser.add_argument(
        "-e",
        "--exclude",
        action="append",
        default=[],
        metavar="PATTERNS",
        help="Comma-separated exclusion patterns (can be repeated)",
    )
    validate_parser.add_argument(
        "--override-exclude",
        action="store_true",
        help="Replace the configured exclusions instead of adding to them",
    )
    validate_parser.add_argument(
        "-c",
        "--config",
        type=Path,
        metavar="PATH",
        help="Configuration file (default: ROOT/.gearrc)",
    )
    validate_parser.add_argument(
        "-f",
        "--format",
        choices=FORMATS,
        default="text",
        help="Output format (default: text)",
    )
    validate_parser.add_argument(
        "-j",
        "--jobs",
        type=int,
        metavar="N",
        help="Parse and check with N threads",
    )

    subparsers.add_parser("rules", help="List the architecture rules")

    config_parser = subparsers.add_parser("config", help="Write a default .gearrc")
    config_parser.add_argument(
        "root",
        nargs="?",
        type=Path,
        default=Path("."),
        help="Directory to write .gearrc into (default: current directory)",
    )
    config_parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite an existing .gearrc",
    )

    return parser


def split_patterns(values: Sequence[str]) -> tuple[str, ...]:
    """Flatten repeated, comma-separated -e values."""
    return tuple(p.strip() for value in values for p in value.split(",") if p.strip())


def make_reporter(fmt: str, output: TextIO) -> BaseReporter:
    """Reporter for an output format name."""
    match fmt:
        case "json":
            return JSONReporter(output)
        case "rich":
            return ConsoleReporter(output)
        case _:
            return PlainTextReporter(output)


def run_validate(args: argparse.Namespace, output: TextIO) -> int:
    """Handle `gearcheck validate`."""
    if args.jobs is not None and args.jobs < 1:
        raise GearCheckError(f"--jobs must be >= 1, got {args.jobs}")

    root: Path = args.root
    config_path = args.config if args.config is not None else find_config(root)
    config = load_config(config_path)

    patterns = split_patterns(args.exclude)
    if patterns or args.override_exclude:
        config = config.with_exclusions(patterns, override=args.override_exclude)

    report = GearValidator(config, max_workers=args.jobs).validate(root)
    make_reporter(args.format, output).report(report)
    return int(report.exit_code)


def run_rules(output: TextIO) -> int:
    """Handle `gearcheck rules`."""
    for rule in default_registry():
        print(f"{rule.rule_id}  {rule.default_severity.value:<8} {rule.name}: {rule.description}", file=output)
    return int(ExitCode.OK)


def run_config(args: argparse.Namespace, output: TextIO) -> int:
    """Handle `gearcheck config`."""
    try:
        path = write_default_config(args.root, force=args.force)
    except FileExistsError as e:
        raise GearCheckError(f"{e} (use --force to overwrite)") from e
    print(f"Wrote {path}", file=output)
    return int(ExitCode.OK)


def main(argv: Sequence[str] | None = None, output: TextIO | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])
        output: Report stream (defaults to sys.stdout)

    Returns:
        0 clean, 1 violations, 2 fatal error
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    output = output if output is not None else sys.stdout

    if args.verbose:
        setup_logging(verbosity_level(args.verbose))

    if not args.command:
        parser.print_help(output)
        return int(ExitCode.OK)

    try:
        match args.command:
            case "validate":
                return run_validate(args, output)
            case "rules":
                return run_rules(output)
            case "config":
                return run_config(args, output)
            case _:
                parser.print_help(output)
                return int(ExitCode.FATAL)
    except GearCheckError as e:
        logger.debug("Fatal error", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return int(ExitCode.FATAL)
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        return int(ExitCode.FATAL)


if __name__ == "__main__":
    sys.exit(main())
