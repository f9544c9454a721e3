"""Parsed STATISTICS IO / STATISTICS TIME data models."""

from dataclasses import dataclass, fields
from typing import Optional, Tuple


@dataclass(frozen=True)
class TableIoRecord:
    """IO counters reported for one scanned table"""
    table_name: str
    scan_count: int = 0
    logical_reads: int = 0
    physical_reads: int = 0
    page_server_reads: int = 0
    read_ahead_reads: int = 0
    page_server_read_ahead_reads: int = 0
    lob_logical_reads: int = 0
    lob_physical_reads: int = 0
    lob_page_server_reads: int = 0
    lob_read_ahead_reads: int = 0
    lob_page_server_read_ahead_reads: int = 0


# Order matters: it is the order counters appear in the engine output,
# in the report and in the JSON document.
COUNTER_FIELDS: Tuple[str, ...] = tuple(
    f.name for f in fields(TableIoRecord) if f.name != "table_name"
)

# Scan count, logical reads and physical reads are always reported.
MANDATORY_COUNTER_FIELDS = COUNTER_FIELDS[:3]
OPTIONAL_COUNTER_FIELDS = COUNTER_FIELDS[3:]


@dataclass(frozen=True)
class TimeRecord:
    """Accumulated CPU / elapsed time across all timing messages"""
    cpu_time: float = 0.0  # ms
    elapsed_time: float = 0.0  # ms


@dataclass(frozen=True)
class Totals:
    """Per-counter sums over every TableIoRecord of a parse"""
    total_scan_count: int = 0
    total_logical_reads: int = 0
    total_physical_reads: int = 0
    total_page_server_reads: int = 0
    total_read_ahead_reads: int = 0
    total_page_server_read_ahead_reads: int = 0
    total_lob_logical_reads: int = 0
    total_lob_physical_reads: int = 0
    total_lob_page_server_reads: int = 0
    total_lob_read_ahead_reads: int = 0
    total_lob_page_server_read_ahead_reads: int = 0

    def counter(self, name: str) -> int:
        """Total for a TableIoRecord counter name, e.g. ``logical_reads``."""
        return getattr(self, f"total_{name}")


@dataclass(frozen=True)
class ParseResult:
    """
    Complete result of parsing one block of statistics output.

    Built once by ``parse()`` and never modified afterwards.
    """
    io_statistics: Tuple[TableIoRecord, ...] = ()
    time_statistics: Optional[TimeRecord] = None
    totals: Totals = Totals()
