"""
Database configuration data class.

A DatabaseConfiguration is one named variant of an A/B test: the session and
database settings a query is run under, plus an optional query hint.
"""
import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass
class DatabaseConfiguration:

    name: str = ""
    compatibility_level: Optional[int] = None
    statistics_io: Optional[bool] = True
    statistics_time: Optional[bool] = True
    max_dop: Optional[int] = None
    query_hint: Optional[str] = None
    # ordered (setting, value) pairs applied as "SET <setting> <value>"
    custom_settings: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def slug(self) -> str:
        """Directory-safe form of the name, e.g. 'MAXDOP 4' -> 'maxdop_4'."""
        return re.sub(r"[^a-z0-9]+", "_", self.name.lower()).strip("_") or "default"

    def final_query(self, query: str) -> str:
        return f"{query} {self.query_hint}" if self.query_hint else query

    def to_set_commands(self, database: str) -> List[str]:
        """Commands that put a session into this configuration, in apply order."""
        commands = []

        if self.compatibility_level is not None:
            commands.append(f"ALTER DATABASE [{database}] SET COMPATIBILITY_LEVEL = {self.compatibility_level}")

        if self.max_dop is not None:
            commands.append(f"ALTER DATABASE SCOPED CONFIGURATION SET MAXDOP = {self.max_dop}")

        if self.statistics_io is not None:
            commands.append(f"SET STATISTICS IO {'ON' if self.statistics_io else 'OFF'}")

        if self.statistics_time is not None:
            commands.append(f"SET STATISTICS TIME {'ON' if self.statistics_time else 'OFF'}")

        for key, value in self.custom_settings:
            commands.append(f"SET {key} {value}")

        return commands


def default_ab_configurations() -> List[DatabaseConfiguration]:
    """The stock A/B set: engine defaults, MAXDOP 1, MAXDOP 4 and a forced index scan."""
    return [
        DatabaseConfiguration(name="Default"),
        DatabaseConfiguration(name="MAXDOP 1", max_dop=1),
        DatabaseConfiguration(name="MAXDOP 4", max_dop=4),
        DatabaseConfiguration(
            name="Force Index Scan",
            query_hint="OPTION (TABLE HINT([TableName], INDEX(1)))",
        ),
    ]


# SQL Server 2016, 2017, 2019, 2022
COMPATIBILITY_LEVELS = (130, 140, 150, 160)


def compatibility_configurations() -> List[DatabaseConfiguration]:
    return [
        DatabaseConfiguration(name=f"Compatibility {level}", compatibility_level=level)
        for level in COMPATIBILITY_LEVELS
    ]
