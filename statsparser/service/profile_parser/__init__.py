"""Extraction of STATISTICS IO / STATISTICS TIME messages."""

from .io_extractor import extract_io
from .statistics_parser import parse
from .time_extractor import extract_time

__all__ = ["extract_io", "extract_time", "parse"]
