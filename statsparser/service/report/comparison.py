"""Run-level output: single-run report, A/B comparison table and pandas export."""

from typing import List

import pandas as pd
from tabulate import tabulate

from statsparser.models.query_execution_result import QueryExecutionResult
from statsparser.models.statistics_result import ParseResult, Totals
from statsparser.service.report.formatter import format_number, format_statistics

COMPARISON_HEADERS = ["Configuration", "Avg Time (ms)", "Logical Reads", "Physical Reads"]
COMPATIBILITY_HEADER = "Compatibility Level"


def _totals(result: QueryExecutionResult) -> Totals:
    if result.parsed_statistics is None:
        return Totals()
    return result.parsed_statistics.totals


def format_comparison_table(
    results: List[QueryExecutionResult],
    tablefmt: str = "github",
    name_header: str = COMPARISON_HEADERS[0],
) -> str:
    """One row per successful configuration; failed results are left out."""
    rows = []
    for result in results:
        if not result.success:
            continue
        totals = _totals(result)
        rows.append([
            result.configuration.name,
            f"{result.execution_time_ms:.2f}",
            format_number(totals.total_logical_reads),
            format_number(totals.total_physical_reads),
        ])
    headers = [name_header] + COMPARISON_HEADERS[1:]
    return tabulate(rows, headers=headers, tablefmt=tablefmt, stralign="left", numalign="left")


def results_to_dataframe(results: List[QueryExecutionResult]) -> pd.DataFrame:
    """Flatten results (failed ones included) into one row per configuration."""
    rows = []
    for result in results:
        totals = _totals(result)
        time_statistics = result.parsed_statistics.time_statistics if result.parsed_statistics else None
        rows.append({
            "configuration": result.configuration.name,
            "success": result.success,
            "error": str(result.error) if result.error is not None else None,
            "execution_time_ms": result.execution_time_ms,
            "tables": len(result.parsed_statistics.io_statistics) if result.parsed_statistics else 0,
            "total_scan_count": totals.total_scan_count,
            "total_logical_reads": totals.total_logical_reads,
            "total_physical_reads": totals.total_physical_reads,
            "total_read_ahead_reads": totals.total_read_ahead_reads,
            "total_lob_logical_reads": totals.total_lob_logical_reads,
            "cpu_time_ms": time_statistics.cpu_time if time_statistics else None,
            "elapsed_time_ms": time_statistics.elapsed_time if time_statistics else None,
        })
    return pd.DataFrame(rows, columns=[
        "configuration", "success", "error", "execution_time_ms", "tables",
        "total_scan_count", "total_logical_reads", "total_physical_reads",
        "total_read_ahead_reads", "total_lob_logical_reads",
        "cpu_time_ms", "elapsed_time_ms",
    ])


def format_execution_report(result: QueryExecutionResult) -> str:
    """
    Report for a single run: execution time, the parsed statistics and the
    connection counters sorted by name.

        Execution Time: 12.50 ms

        === PARSED STATISTICS ===
        ...

        === SQL CONNECTION STATISTICS ===
        BytesReceived: 1,024
    """
    if not result.success:
        return f"Query execution failed: {result.error}\n"

    parsed = result.parsed_statistics if result.parsed_statistics is not None else ParseResult()
    lines = [
        f"Execution Time: {result.execution_time_ms:.2f} ms",
        "",
        "=== PARSED STATISTICS ===",
        format_statistics(parsed),
        "=== SQL CONNECTION STATISTICS ===",
    ]
    for key, value in sorted(result.connection_statistics.items()):
        lines.append(f"{key}: {format_number(value)}")
    return "\n".join(lines) + "\n"
