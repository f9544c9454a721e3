"""
Plain-text report for a ParseResult.

Layout:

    === STATISTICS IO ===

    Table: Orders
      Scan count: 1
      Logical reads: 3
      Physical reads: 0

    === TOTALS ===            (only with more than one table)
    Total scan count: 6
    ...

    === STATISTICS TIME ===   (only when timing was captured)
    CPU time: 140 ms
    Elapsed time: 1,223 ms

Optional counters are printed only when greater than zero.
"""
import math
from typing import Callable, List

from statsparser.models.statistics_result import MANDATORY_COUNTER_FIELDS, OPTIONAL_COUNTER_FIELDS, ParseResult

# Report wording per counter, lower-case form as used after "Total ".
COUNTER_LABELS = {
    "scan_count": "scan count",
    "logical_reads": "logical reads",
    "physical_reads": "physical reads",
    "page_server_reads": "page server reads",
    "read_ahead_reads": "read-ahead reads",
    "page_server_read_ahead_reads": "page server read-ahead reads",
    "lob_logical_reads": "LOB logical reads",
    "lob_physical_reads": "LOB physical reads",
    "lob_page_server_reads": "LOB page server reads",
    "lob_read_ahead_reads": "LOB read-ahead reads",
    "lob_page_server_read_ahead_reads": "LOB page server read-ahead reads",
}


def format_number(value: int) -> str:
    """Group thousands with ',' independent of the current locale."""
    return f"{value:,}"


def format_milliseconds(value: float) -> str:
    # half-up; values are never negative
    return format_number(int(math.floor(value + 0.5)))


def _capitalize(label: str) -> str:
    return label[0].upper() + label[1:]


def _counter_lines(get: Callable[[str], int], line: Callable[[str, int], str]) -> List[str]:
    lines = [line(name, get(name)) for name in MANDATORY_COUNTER_FIELDS]
    lines += [line(name, get(name)) for name in OPTIONAL_COUNTER_FIELDS if get(name) > 0]
    return lines


def format_statistics(result: ParseResult) -> str:
    """Render a ParseResult as the human-readable statistics report."""
    lines: List[str] = []

    if result.io_statistics:
        lines.append("=== STATISTICS IO ===")
        lines.append("")

        for record in result.io_statistics:
            lines.append(f"Table: {record.table_name}")
            lines += _counter_lines(
                lambda name: getattr(record, name),
                lambda name, value: f"  {_capitalize(COUNTER_LABELS[name])}: {format_number(value)}",
            )
            lines.append("")

        if len(result.io_statistics) > 1:
            lines.append("=== TOTALS ===")
            lines += _counter_lines(
                result.totals.counter,
                lambda name, value: f"Total {COUNTER_LABELS[name]}: {format_number(value)}",
            )
            lines.append("")

    if result.time_statistics is not None:
        lines.append("=== STATISTICS TIME ===")
        lines.append(f"CPU time: {format_milliseconds(result.time_statistics.cpu_time)} ms")
        lines.append(f"Elapsed time: {format_milliseconds(result.time_statistics.elapsed_time)} ms")

    return "".join(f"{line}\n" for line in lines)
