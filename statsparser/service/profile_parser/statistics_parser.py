from typing import Optional

from statsparser.errors import InputError
from statsparser.models.statistics_result import ParseResult
from statsparser.service.profile_parser.io_extractor import extract_io
from statsparser.service.profile_parser.time_extractor import extract_time
from statsparser.service.profile_parser.totals import calculate_totals
from statsparser.util.log_config import setup_logger

logger = setup_logger(__name__)


def parse(text: Optional[str]) -> ParseResult:
    """
    Parse SQL Server STATISTICS IO / STATISTICS TIME output.

    Args:
        text: Raw message text captured from one query execution

    Returns:
        ParseResult with per-table IO records, accumulated timing (or None when
        no timing message was found) and IO totals

    Raises:
        InputError: If text is None, empty or whitespace only
    """
    if text is None or not text.strip():
        raise InputError("Input cannot be null or empty")

    records = extract_io(text)
    time_statistics = extract_time(text)

    result = ParseResult(
        io_statistics=tuple(records),
        time_statistics=time_statistics,
        totals=calculate_totals(records),
    )
    logger.debug(f"Parsed {len(records)} table record(s), "
                 f"timing {'present' if time_statistics is not None else 'absent'}")
    return result
