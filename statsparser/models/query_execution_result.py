"""Result of running one query under one database configuration."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from statsparser.config.database_configuration import DatabaseConfiguration
from statsparser.models.statistics_result import ParseResult
from statsparser.service.report.serializer import serialize


@dataclass
class QueryExecutionResult:
    configuration: DatabaseConfiguration = field(default_factory=DatabaseConfiguration)
    execution_time_ms: float = 0.0  # wall clock, measured by the execution service
    raw_statistics_output: str = ""
    parsed_statistics: Optional[ParseResult] = None
    connection_statistics: Dict[str, int] = field(default_factory=dict)
    error: Optional[Exception] = None

    @property
    def success(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return {
            "configuration": self.configuration.name,
            "success": self.success,
            "error": str(self.error) if self.error is not None else None,
            "execution_time_ms": self.execution_time_ms,
            "connection_statistics": dict(sorted(self.connection_statistics.items())),
            "statistics": serialize(self.parsed_statistics) if self.parsed_statistics is not None else None,
        }
