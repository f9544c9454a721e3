from enum import Enum


class OutputFormat(Enum):
    TEXT = "text"
    JSON = "json"
    BOTH = "both"
