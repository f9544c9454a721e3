import time
from typing import List

from statsparser.config.database_configuration import DatabaseConfiguration
from statsparser.models.query_execution_result import QueryExecutionResult
from statsparser.service.runner.runner import ExecutionService
from statsparser.util.cal_utils import calculate_average_result
from statsparser.util.log_config import setup_logger

logger = setup_logger(__name__)


class ABTestExecutor:
    def __init__(self, runner: ExecutionService, iterations: int = 1, delay_seconds: float = 0.0):
        if iterations < 1:
            raise ValueError(f"iterations must be at least 1, got {iterations}")
        self.runner = runner
        self.iterations = iterations
        self.delay_seconds = delay_seconds

    def run_configuration(self, query: str, configuration: DatabaseConfiguration) -> QueryExecutionResult:
        """Run every iteration of one configuration and collapse them into one result."""
        results = []
        for i in range(self.iterations):
            logger.info(f"  Iteration {i + 1}/{self.iterations}")
            result = self.runner.execute(query, configuration, iteration=i + 1)
            results.append(result)

            if not result.success:
                logger.error(f"  Error: {result.error}")

            if self.delay_seconds and i < self.iterations - 1:
                time.sleep(self.delay_seconds)

        if len(results) > 1:
            return calculate_average_result(results)
        return results[0]

    def run(self, query: str, configurations: List[DatabaseConfiguration]) -> List[QueryExecutionResult]:
        """One result per configuration, in configuration order."""
        results = []
        for idx, configuration in enumerate(configurations, 1):
            logger.info(f"Testing configuration {idx}/{len(configurations)}: {configuration.name}")
            result = self.run_configuration(query, configuration)
            if result.success:
                logger.info(f"✓ {configuration.name}: Time(avg)={result.execution_time_ms:.2f}ms")
            results.append(result)
        return results
