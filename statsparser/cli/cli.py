#!/usr/bin/env python3
"""
Command-line argument parsing for the statsparser tool.
"""
import argparse
from typing import List, Optional

from statsparser.consts.OutputFormat import OutputFormat

PRESETS = ("default", "compatibility")


def build_parser() -> argparse.ArgumentParser:
    """
    Create the top-level parser with the `parse`, `single` and `abtest` sub-commands.

    Returns:
        argparse.ArgumentParser: parser for the statsparser command line.
    """
    parser = argparse.ArgumentParser(
        prog="statsparser",
        description="Parse SQL Server STATISTICS IO / STATISTICS TIME output",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Report from messages copied out of SSMS
  statsparser parse messages.txt

  # JSON document from stdin
  statsparser parse - --format json < messages.txt

  # Report for one captured run
  statsparser single --config-dir experiments/orders --configuration "MAXDOP 1"

  # Compare captured runs of several configurations
  statsparser abtest --config-dir experiments/orders --env dev
        """
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_parser = subparsers.add_parser("parse", help="Parse one block of statistics output")
    parse_parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="File holding the statistics messages, or '-' for stdin (default: -)",
    )
    parse_parser.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.TEXT.value,
        help="Output format: text | json | both (default: text)",
    )
    parse_parser.add_argument("--out", type=str, default="", help="Write output to this path instead of stdout")

    single_parser = subparsers.add_parser("single", help="Report one captured run of a single configuration")
    single_parser.add_argument("--config-dir", type=str, required=True, help="Directory holding config.yaml")
    single_parser.add_argument("--env", type=str, default=None, help="Environment name for configuration override")
    single_parser.add_argument(
        "--configuration",
        type=str,
        default=None,
        help="Name of the configuration to replay (default: the first one in config.yaml)",
    )

    abtest_parser = subparsers.add_parser("abtest", help="Compare captured runs across database configurations")
    abtest_parser.add_argument("--config-dir", type=str, required=True, help="Directory holding config.yaml")
    abtest_parser.add_argument(
        "--env",
        type=str,
        default=None,
        help=(
            "Environment name for configuration override (e.g., 'dev', 'prod'). "
            "Loads config_<env>.yaml in addition to the base config.yaml."
        ),
    )
    abtest_parser.add_argument(
        "--preset",
        choices=PRESETS,
        default=None,
        help="Use a built-in configuration set instead of the configurations in config.yaml",
    )
    abtest_parser.add_argument("--csv", type=str, default="", help="Export per-configuration results as CSV")
    abtest_parser.add_argument("--json", type=str, default="", help="Export per-configuration results as JSON")

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)
