"""Tests for parse() and the totals it derives."""
import dataclasses
import subprocess
import sys
from pathlib import Path

import pytest

from statsparser import InputError, Totals, calculate_totals, parse
from statsparser.models.statistics_result import COUNTER_FIELDS, TableIoRecord
from statsparser.service.profile_parser.log_parser import StatisticsLogParser
from statsparser.service.profile_parser.totals import calculate_totals as core_calculate_totals


class TestParse:
    @pytest.mark.parametrize("text", ["", "   ", "\n\t ", None])
    def test_blank_input_raises(self, text):
        with pytest.raises(InputError):
            parse(text)

    def test_input_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse("")

    def test_orders_scenario(self, orders_messages):
        result = parse(orders_messages)

        assert len(result.io_statistics) == 2
        assert result.totals == Totals(
            total_scan_count=6,
            total_logical_reads=153,
            total_physical_reads=10,
            total_read_ahead_reads=5,
            total_lob_logical_reads=2,
        )
        assert result.time_statistics.cpu_time == 140
        assert result.time_statistics.elapsed_time == 1223

    def test_timing_only(self):
        result = parse("SQL Server Execution Times:\n   CPU time = 3 ms,  elapsed time = 4 ms.")
        assert result.io_statistics == ()
        assert result.totals == Totals()
        assert result.time_statistics is not None

    def test_io_only(self, single_table_messages):
        result = parse(single_table_messages)
        assert len(result.io_statistics) == 1
        assert result.time_statistics is None

    def test_nothing_recognized_is_not_an_error(self):
        result = parse("Commands completed successfully.")
        assert result.io_statistics == ()
        assert result.time_statistics is None
        assert result.totals == Totals()

    def test_deterministic(self, orders_messages):
        assert parse(orders_messages) == parse(orders_messages)

    def test_totals_match_records(self, orders_messages):
        result = parse(orders_messages)
        for name in COUNTER_FIELDS:
            assert result.totals.counter(name) == sum(getattr(r, name) for r in result.io_statistics)

    def test_result_is_immutable(self, orders_messages):
        result = parse(orders_messages)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.totals = Totals()
        assert isinstance(result.io_statistics, tuple)


class TestCalculateTotals:
    def test_empty(self):
        assert calculate_totals([]) == Totals()

    def test_sums_every_counter(self):
        records = [
            TableIoRecord("A", **{name: i + 1 for i, name in enumerate(COUNTER_FIELDS)}),
            TableIoRecord("B", **{name: 100 for name in COUNTER_FIELDS}),
        ]
        totals = calculate_totals(records)
        for i, name in enumerate(COUNTER_FIELDS):
            assert totals.counter(name) == i + 1 + 100

    def test_accepts_generator(self):
        totals = calculate_totals(TableIoRecord("T", logical_reads=n) for n in (1, 2, 3))
        assert totals.total_logical_reads == 6

    def test_lives_beside_the_parser(self):
        assert calculate_totals is core_calculate_totals

    def test_parser_import_leaves_orchestration_unloaded(self):
        code = (
            "import sys\n"
            "from statsparser import parse\n"
            "parse(\"Table 'T'. Scan count 1, logical reads 2, physical reads 0.\")\n"
            "loaded = [m for m in ('numpy', 'statsparser.util.cal_utils', 'statsparser.config') if m in sys.modules]\n"
            "assert not loaded, loaded\n"
        )
        completed = subprocess.run(
            [sys.executable, "-c", code], cwd=Path(__file__).resolve().parents[1], capture_output=True, text=True
        )
        assert completed.returncode == 0, completed.stderr


class TestStatisticsLogParser:
    def test_parse_log(self, tmp_path, orders_messages, write_capture):
        write_capture(tmp_path, orders_messages)
        result = StatisticsLogParser(log_path=tmp_path).parse_log()
        assert [r.table_name for r in result.io_statistics] == ["Orders", "OrderDetails"]

    def test_blank_log(self, tmp_path, write_capture):
        write_capture(tmp_path, "\n\n")
        assert StatisticsLogParser(log_path=tmp_path).parse_log() is None

    def test_missing_log(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            StatisticsLogParser(log_path=tmp_path).read_messages()
