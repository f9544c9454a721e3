"""Models for parsed statistics and query executions."""

from .statistics_result import ParseResult, TableIoRecord, TimeRecord, Totals

__all__ = ["ParseResult", "TableIoRecord", "TimeRecord", "Totals"]
