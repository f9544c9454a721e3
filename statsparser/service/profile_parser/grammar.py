"""
Grammar of the SQL Server STATISTICS IO / STATISTICS TIME messages.

The table message is described as an ordered list of counter clauses rather
than one hand-written expression:

    Table 'Orders'. Scan count 1, logical reads 3, physical reads 0,
    page server reads 0, read-ahead reads 0, page server read-ahead reads 0,
    lob logical reads 0, lob physical reads 0, lob page server reads 0,
    lob read-ahead reads 0, lob page server read-ahead reads 0.

The first three clauses are mandatory. The remaining eight are optional but,
when present, always appear in the order listed in OPTIONAL_CLAUSES and never
repeat. Each clause becomes a named capture group whose name is the matching
TableIoRecord field.
"""
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple

from statsparser.consts.QuoteStyle import QuoteStyle


@dataclass(frozen=True)
class CounterClause:
    field: str  # TableIoRecord attribute / capture group name
    label: str  # text printed by the engine before the number


MANDATORY_CLAUSES: Tuple[CounterClause, ...] = (
    CounterClause("scan_count", "Scan count"),
    CounterClause("logical_reads", "logical reads"),
    CounterClause("physical_reads", "physical reads"),
)

OPTIONAL_CLAUSES: Tuple[CounterClause, ...] = (
    CounterClause("page_server_reads", "page server reads"),
    CounterClause("read_ahead_reads", "read-ahead reads"),
    CounterClause("page_server_read_ahead_reads", "page server read-ahead reads"),
    CounterClause("lob_logical_reads", "lob logical reads"),
    CounterClause("lob_physical_reads", "lob physical reads"),
    CounterClause("lob_page_server_reads", "lob page server reads"),
    CounterClause("lob_read_ahead_reads", "lob read-ahead reads"),
    CounterClause("lob_page_server_read_ahead_reads", "lob page server read-ahead reads"),
)

# Quote conventions in the order they are tried.
QUOTE_FALLBACK_ORDER: Tuple[QuoteStyle, ...] = (QuoteStyle.SINGLE, QuoteStyle.DOUBLE)

TIME_PHRASES: Tuple[str, ...] = (
    "SQL Server parse and compile time:",
    "SQL Server Execution Times:",
)

_FLAGS = re.IGNORECASE | re.MULTILINE


def _label_pattern(label: str) -> str:
    # words of a label may be split by any whitespace, including newlines
    return r"\s+".join(re.escape(word) for word in label.split())


def _clause_pattern(clause: CounterClause) -> str:
    return rf"{_label_pattern(clause.label)}\s+(?P<{clause.field}>\d+)"


def _table_name_pattern(quote: QuoteStyle) -> str:
    q = re.escape(quote.value)
    return rf"Table\s+{q}(?P<table_name>[^{q}]+){q}"


@lru_cache(maxsize=None)
def io_pattern(quote: QuoteStyle) -> "re.Pattern[str]":
    """Compiled table message pattern for one quoting convention."""
    mandatory = r",\s*".join(_clause_pattern(c) for c in MANDATORY_CLAUSES)
    optional = "".join(rf"(?:,\s*{_clause_pattern(c)})?" for c in OPTIONAL_CLAUSES)
    return re.compile(rf"{_table_name_pattern(quote)}[.\s]*{mandatory}{optional}", _FLAGS)


@lru_cache(maxsize=None)
def time_pattern() -> "re.Pattern[str]":
    """Compiled pattern matching either timing message shape."""
    phrases = "|".join(_label_pattern(p) for p in TIME_PHRASES)
    return re.compile(
        rf"(?P<phrase>{phrases})\s*"
        r"CPU\s+time\s*=\s*(?P<cpu_time>\d+)\s*ms,\s*"
        r"elapsed\s+time\s*=\s*(?P<elapsed_time>\d+)\s*ms\.",
        _FLAGS,
    )
