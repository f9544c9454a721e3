from typing import Optional

from statsparser.models.statistics_result import TimeRecord
from statsparser.service.profile_parser.grammar import time_pattern
from statsparser.util.log_config import setup_logger

logger = setup_logger(__name__)


def extract_time(text: str) -> Optional[TimeRecord]:
    """
    Sum CPU and elapsed time over every parse/compile and execution message.

    Returns None when the text holds no timing message at all, which is
    different from a TimeRecord of zeros.
    """
    # Format: "SQL Server Execution Times:\n   CPU time = 125 ms,  elapsed time = 1205 ms."
    matches = list(time_pattern().finditer(text))
    if not matches:
        return None

    total_cpu_time = 0.0
    total_elapsed_time = 0.0
    for match in matches:
        total_cpu_time += float(match.group("cpu_time"))
        total_elapsed_time += float(match.group("elapsed_time"))

    logger.debug(f"Matched {len(matches)} timing message(s)")
    return TimeRecord(cpu_time=total_cpu_time, elapsed_time=total_elapsed_time)
