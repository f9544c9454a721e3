from abc import ABC, abstractmethod

from statsparser.config.database_configuration import DatabaseConfiguration
from statsparser.models.query_execution_result import QueryExecutionResult


class ExecutionService(ABC):
    """Abstract source of query executions.

    An implementation runs (or replays) `query` under `configuration` and
    returns the captured statistics text together with wall-clock duration
    and connection counters. Failures are reported on the returned result's
    `error` instead of being raised, so one bad configuration does not stop
    an A/B run.
    """

    @abstractmethod
    def execute(self, query: str, configuration: DatabaseConfiguration, iteration: int = 1) -> QueryExecutionResult:
        pass
