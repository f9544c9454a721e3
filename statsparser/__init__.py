"""
statsparser - SQL Server STATISTICS IO / STATISTICS TIME parser

Turns the informational messages SQL Server prints with
`SET STATISTICS IO, TIME ON` into typed records, totals, a text report and
a JSON document.

Usage:
    from statsparser import parse, format_statistics, to_json

    result = parse(messages)
    print(format_statistics(result))
    print(to_json(result))
"""

__version__ = "1.0.0"

from .errors import InputError
from .models.statistics_result import ParseResult, TableIoRecord, TimeRecord, Totals
from .service.profile_parser import extract_io, extract_time, parse
from .service.profile_parser.totals import calculate_totals
from .service.report import format_statistics, serialize, to_json

__all__ = [
    "__version__",
    "InputError",
    "ParseResult",
    "TableIoRecord",
    "TimeRecord",
    "Totals",
    "calculate_totals",
    "extract_io",
    "extract_time",
    "format_statistics",
    "parse",
    "serialize",
    "to_json",
]
