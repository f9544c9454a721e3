import json
from pathlib import Path

from statsparser.config.database_configuration import DatabaseConfiguration
from statsparser.models.query_execution_result import QueryExecutionResult
from statsparser.service.profile_parser.log_parser import MESSAGES_FILE, StatisticsLogParser
from statsparser.service.profile_parser.statistics_parser import parse
from statsparser.util.log_config import setup_logger
from .runner import ExecutionService

logger = setup_logger(__name__)

EXECUTION_FILE = "execution.json"


class CapturedRunner(ExecutionService):
    """
    Replays executions captured earlier.

    Expected layout, one directory per configuration (named by its slug) and
    one per iteration:

        <captures_dir>/maxdop_1/run_1/messages.log
        <captures_dir>/maxdop_1/run_1/execution.json   (optional)

    execution.json may hold "execution_time_ms" and "connection_statistics".
    A configuration captured only once may keep messages.log directly in its
    own directory; that capture is then used for every iteration.
    """

    def __init__(self, captures_dir: Path, database: str = "master"):
        self.captures_dir = captures_dir
        self.database = database

    def run_dir(self, configuration: DatabaseConfiguration, iteration: int) -> Path:
        config_dir = self.captures_dir / configuration.slug
        iteration_dir = config_dir / f"run_{iteration}"
        if not iteration_dir.is_dir() and (config_dir / MESSAGES_FILE).exists():
            return config_dir
        return iteration_dir

    def execute(self, query: str, configuration: DatabaseConfiguration, iteration: int = 1) -> QueryExecutionResult:
        result = QueryExecutionResult(configuration=configuration)
        run_dir = self.run_dir(configuration, iteration)
        for command in configuration.to_set_commands(self.database):
            logger.debug(f"[{configuration.name}] {command}")
        logger.debug(f"Replaying '{configuration.final_query(query)}' from {run_dir}")

        try:
            raw = StatisticsLogParser(log_path=run_dir).read_messages()
            result.raw_statistics_output = raw
            self._load_execution_info(run_dir / EXECUTION_FILE, result)
            if raw.strip():
                result.parsed_statistics = parse(raw)
            else:
                logger.warning(f"No statistics messages captured in {run_dir / MESSAGES_FILE}")
        except Exception as e:
            logger.warning(f"Could not replay {configuration.name} run {iteration}: {e}")
            result.error = e

        return result

    def _load_execution_info(self, execution_file: Path, result: QueryExecutionResult) -> None:
        if not execution_file.exists():
            return

        with open(execution_file, "r", encoding="utf-8") as f:
            info = json.load(f)

        result.execution_time_ms = float(info.get("execution_time_ms", 0.0))
        result.connection_statistics = {
            str(key): int(value) for key, value in (info.get("connection_statistics") or {}).items()
        }
