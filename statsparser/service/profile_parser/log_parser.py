from pathlib import Path
from typing import Optional

from statsparser.models.statistics_result import ParseResult
from statsparser.service.profile_parser.statistics_parser import parse
from statsparser.util.log_config import setup_logger

logger = setup_logger(__name__)

MESSAGES_FILE = "messages.log"


class LogParser:
    def __init__(self, log_path: Path):
        self.log_path = log_path

    def parse_log(self) -> Optional[ParseResult]:
        raise NotImplementedError("Subclasses should implement this method.")


class StatisticsLogParser(LogParser):
    """Parses the informational messages captured during one query run."""

    @property
    def messages_file(self) -> Path:
        return self.log_path / MESSAGES_FILE

    def read_messages(self) -> str:
        if not self.messages_file.exists():
            raise FileNotFoundError(f"Log file {self.messages_file} does not exist.")
        return self.messages_file.read_text(encoding="utf-8")

    def parse_log(self) -> Optional[ParseResult]:
        """Parse messages.log; returns None when the capture is blank."""
        content = self.read_messages()
        if not content.strip():
            logger.warning(f"No statistics messages captured in {self.messages_file}")
            return None
        return parse(content)


if __name__ == "__main__":

    # python3 -m statsparser.service.profile_parser.log_parser <capture_dir>

    import sys

    parser = StatisticsLogParser(log_path=Path(sys.argv[1] if len(sys.argv) > 1 else "."))
    logger.info(f"Parsed statistics: {parser.parse_log()}")
