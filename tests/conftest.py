"""Shared test fixtures and configuration."""
import pytest

ORDERS_MESSAGES = """\
SQL Server parse and compile time:
   CPU time = 15 ms, elapsed time = 18 ms.

(120 rows affected)
Table 'Orders'. Scan count 1, logical reads 3, physical reads 0, read-ahead reads 0, lob logical reads 0, lob physical reads 0, lob read-ahead reads 0.
Table 'OrderDetails'. Scan count 5, logical reads 150, physical reads 10, read-ahead reads 5, lob logical reads 2, lob physical reads 0, lob read-ahead reads 0.

 SQL Server Execution Times:
   CPU time = 125 ms,  elapsed time = 1205 ms.
"""


@pytest.fixture
def orders_messages():
    """Two tables plus parse/compile and execution timing."""
    return ORDERS_MESSAGES


@pytest.fixture
def single_table_messages():
    return "Table 'Customers'. Scan count 1, logical reads 12, physical reads 1, read-ahead reads 4.\n"


@pytest.fixture
def write_capture():
    """Write messages.log (and optionally execution.json) under a run directory."""
    import json

    def _write(run_dir, messages, execution=None):
        run_dir.mkdir(parents=True, exist_ok=True)
        (run_dir / "messages.log").write_text(messages, encoding="utf-8")
        if execution is not None:
            (run_dir / "execution.json").write_text(json.dumps(execution), encoding="utf-8")
        return run_dir

    return _write
