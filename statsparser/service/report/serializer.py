"""
JSON document for a ParseResult.

Field names are camelCase and their order is fixed; downstream consumers
rely on both. Every counter is always written, zeros included, and
"timeStatistics" is null when no timing message was captured.
"""
import json
from typing import Any, Dict, Optional

from statsparser.models.statistics_result import COUNTER_FIELDS, ParseResult, TableIoRecord, TimeRecord, Totals


def camel_case(name: str) -> str:
    """'lob_read_ahead_reads' -> 'lobReadAheadReads'"""
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def table_to_dict(record: TableIoRecord) -> Dict[str, Any]:
    data: Dict[str, Any] = {"tableName": record.table_name}
    for name in COUNTER_FIELDS:
        data[camel_case(name)] = getattr(record, name)
    return data


def time_to_dict(record: Optional[TimeRecord]) -> Optional[Dict[str, float]]:
    if record is None:
        return None
    return {"cpuTime": record.cpu_time, "elapsedTime": record.elapsed_time}


def totals_to_dict(totals: Totals) -> Dict[str, int]:
    return {camel_case(f"total_{name}"): totals.counter(name) for name in COUNTER_FIELDS}


def serialize(result: ParseResult) -> Dict[str, Any]:
    """Convert to dictionary for JSON serialization"""
    return {
        "ioStatistics": [table_to_dict(record) for record in result.io_statistics],
        "timeStatistics": time_to_dict(result.time_statistics),
        "totals": totals_to_dict(result.totals),
    }


def to_json(result: ParseResult, indent: int = 2) -> str:
    """Serialize to an indented JSON string."""
    return json.dumps(serialize(result), ensure_ascii=False, indent=indent)
