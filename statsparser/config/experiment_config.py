from typing import List

from statsparser.config.database_configuration import DatabaseConfiguration


class ExperimentConfig:
    query: str
    iterations: int
    database: str
    captures_dir: str
    configurations: List[DatabaseConfiguration]
