from enum import Enum


class QuoteStyle(Enum):
    SINGLE = "'"
    DOUBLE = '"'
