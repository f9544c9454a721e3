"""Rendering of parsed statistics: text report, JSON document, A/B comparison."""

from .formatter import format_statistics
from .serializer import serialize, to_json

__all__ = ["format_statistics", "serialize", "to_json"]
