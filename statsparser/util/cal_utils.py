from typing import Dict, List

import numpy as np

from statsparser.models.query_execution_result import QueryExecutionResult


def average_connection_statistics(results: List[QueryExecutionResult]) -> Dict[str, int]:
    """Per-key mean of the connection counters, truncated to int."""
    grouped: Dict[str, List[int]] = {}
    for result in results:
        for key, value in result.connection_statistics.items():
            grouped.setdefault(key, []).append(value)
    return {key: int(np.mean(values)) for key, values in grouped.items()}


def calculate_average_result(results: List[QueryExecutionResult]) -> QueryExecutionResult:
    """
    Collapse the iterations of one configuration into a single result.

    Only successful iterations are averaged. The statistics text and the
    parsed statistics are taken from the first successful iteration, since
    IO counters do not vary between identical runs the way timings do.
    When no iteration succeeded the first (failed) result is returned.
    """
    if not results:
        raise ValueError("Cannot average an empty list of results")

    successful = [r for r in results if r.success]
    if not successful:
        return results[0]

    first = successful[0]
    return QueryExecutionResult(
        configuration=first.configuration,
        execution_time_ms=float(np.mean([r.execution_time_ms for r in successful])),
        raw_statistics_output=first.raw_statistics_output,
        parsed_statistics=first.parsed_statistics,
        connection_statistics=average_connection_statistics(successful),
    )
