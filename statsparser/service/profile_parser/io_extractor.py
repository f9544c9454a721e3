import re
from typing import List, Optional

from statsparser.models.statistics_result import TableIoRecord
from statsparser.service.profile_parser.grammar import (
    MANDATORY_CLAUSES,
    OPTIONAL_CLAUSES,
    QUOTE_FALLBACK_ORDER,
    io_pattern,
)
from statsparser.util.log_config import setup_logger

logger = setup_logger(__name__)


def parse_counter(raw: Optional[str]) -> int:
    """
    Convert a captured counter to int.

    A missing clause and digits that cannot be converted both yield 0; a
    single bad number must not cost the rest of the table record.
    """
    if raw is None:
        return 0
    try:
        return int(raw)
    except (TypeError, ValueError):
        logger.debug(f"Unparsable counter value {raw!r}, using 0")
        return 0


def _to_record(match: "re.Match[str]") -> TableIoRecord:
    counters = {
        clause.field: parse_counter(match.group(clause.field))
        for clause in MANDATORY_CLAUSES + OPTIONAL_CLAUSES
    }
    return TableIoRecord(table_name=match.group("table_name"), **counters)


def extract_io(text: str) -> List[TableIoRecord]:
    """
    Extract one TableIoRecord per table message, in encounter order.

    Single-quoted table names are tried over the whole text first. Only when
    that finds nothing is the whole text scanned again for double-quoted
    names. The two conventions are never mixed within one input.
    """
    for quote in QUOTE_FALLBACK_ORDER:
        matches = list(io_pattern(quote).finditer(text))
        if matches:
            logger.debug(f"Matched {len(matches)} table message(s) using {quote.name.lower()} quotes")
            return [_to_record(m) for m in matches]
    return []
