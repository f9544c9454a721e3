from typing import Iterable

from statsparser.models.statistics_result import COUNTER_FIELDS, TableIoRecord, Totals


def calculate_totals(records: Iterable[TableIoRecord]) -> Totals:
    """Sum every IO counter over the records, accumulating in input order."""
    sums = dict.fromkeys(COUNTER_FIELDS, 0)
    for record in records:
        for name in COUNTER_FIELDS:
            sums[name] += getattr(record, name)
    return Totals(**{f"total_{name}": value for name, value in sums.items()})
