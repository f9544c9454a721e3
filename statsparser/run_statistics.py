#!/usr/bin/env python3
"""
Entry point of the statsparser command line.

`parse` turns captured STATISTICS IO / TIME messages into a report or JSON
document. `single` reports one captured run of a configuration. `abtest` replays captured runs of several database configurations
and prints a comparison table.
"""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from statsparser.cli.cli import parse_args
from statsparser.config.config_loader import ConfigLoader
from statsparser.config.database_configuration import (
    DatabaseConfiguration,
    compatibility_configurations,
    default_ab_configurations,
)
from statsparser.consts.OutputFormat import OutputFormat
from statsparser.errors import InputError
from statsparser.service.profile_parser.statistics_parser import parse
from statsparser.service.report.comparison import (
    COMPATIBILITY_HEADER,
    COMPARISON_HEADERS,
    format_comparison_table,
    format_execution_report,
    results_to_dataframe,
)
from statsparser.service.report.formatter import format_statistics
from statsparser.service.report.serializer import to_json
from statsparser.service.runner.captured_runner import CapturedRunner
from statsparser.service.task_executor.ab_test_executor import ABTestExecutor
from statsparser.util.file_utils import read_text, write_text
from statsparser.util.log_config import set_level, setup_logger

logger = setup_logger(__name__)


def render(text: str, output_format: OutputFormat) -> str:
    result = parse(text)
    if output_format == OutputFormat.TEXT:
        return format_statistics(result)
    if output_format == OutputFormat.JSON:
        return to_json(result) + "\n"
    return format_statistics(result) + "\n" + to_json(result) + "\n"


def run_parse(args: argparse.Namespace) -> int:
    text = read_text(args.input)
    write_text(render(text, OutputFormat(args.format)), args.out)
    if args.out:
        logger.info(f"✓ Statistics written to: {Path(args.out).resolve()}")
    return 0


def select_configurations(preset: Optional[str], configured: List[DatabaseConfiguration]) -> List[DatabaseConfiguration]:
    if preset == "compatibility":
        return compatibility_configurations()
    if preset == "default" or not configured:
        return default_ab_configurations()
    return configured


def select_configuration(name: Optional[str], configured: List[DatabaseConfiguration]) -> DatabaseConfiguration:
    """Configuration for a single run: by name (case-insensitive), else the first configured one."""
    if name is None:
        return configured[0] if configured else DatabaseConfiguration(name="Default Configuration")

    candidates = configured + default_ab_configurations() + compatibility_configurations()
    for configuration in candidates:
        if configuration.name.lower() == name.lower():
            return configuration
    raise ValueError(f"Unknown configuration '{name}', expected one of: {', '.join(c.name for c in candidates)}")


def run_single(args: argparse.Namespace) -> int:
    config = ConfigLoader(Path(args.config_dir), env=args.env).config_data
    configuration = select_configuration(args.configuration, config.configurations)
    logger.info(f"Single run: {configuration.name}")

    runner = CapturedRunner(Path(config.captures_dir), database=config.database)
    result = runner.execute(config.query, configuration)
    write_text(format_execution_report(result), None)
    return 0 if result.success else 1


def run_abtest(args: argparse.Namespace) -> int:
    config = ConfigLoader(Path(args.config_dir), env=args.env).config_data
    if args.env:
        logger.info(f"Loaded configuration with environment override: {args.env}")

    configurations = select_configurations(args.preset, config.configurations)
    logger.info("=" * 60)
    logger.info(f"A/B test: {len(configurations)} configuration(s), {config.iterations} iteration(s) each")
    logger.info("=" * 60)

    runner = CapturedRunner(Path(config.captures_dir), database=config.database)
    executor = ABTestExecutor(runner, iterations=config.iterations)
    results = executor.run(config.query, configurations)

    if args.preset == "compatibility":
        title, name_header = "COMPATIBILITY LEVEL TEST RESULTS", COMPATIBILITY_HEADER
    else:
        title, name_header = "A/B TEST RESULTS", COMPARISON_HEADERS[0]
    table = format_comparison_table(results, name_header=name_header)
    write_text(f"\n=== {title} ===\n" + table + "\n", None)

    if args.csv:
        results_to_dataframe(results).to_csv(args.csv, index=False)
        logger.info(f"✓ Results exported to: {Path(args.csv).resolve()}")
    if args.json:
        write_text(json.dumps([r.to_dict() for r in results], indent=2) + "\n", args.json)
        logger.info(f"✓ Results exported to: {Path(args.json).resolve()}")

    failed = [r for r in results if not r.success]
    if failed:
        logger.warning(f"{len(failed)} configuration(s) failed: {', '.join(r.configuration.name for r in failed)}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        set_level(logging.DEBUG)

    try:
        if args.command == "parse":
            return run_parse(args)
        if args.command == "single":
            return run_single(args)
        return run_abtest(args)
    except InputError as e:
        logger.error(f"Invalid input: {e}")
    except (FileNotFoundError, IsADirectoryError, ValueError) as e:
        logger.error(str(e))
    return 1


if __name__ == "__main__":
    sys.exit(main())
