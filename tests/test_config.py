"""Tests for database configurations and the YAML config loader."""
import pytest

from statsparser.config.config_loader import ConfigLoader, parse_configuration, parse_custom_settings
from statsparser.config.database_configuration import (
    DatabaseConfiguration,
    compatibility_configurations,
    default_ab_configurations,
)


class TestDatabaseConfiguration:
    def test_set_commands_order(self):
        config = DatabaseConfiguration(
            name="Tuned",
            compatibility_level=150,
            max_dop=2,
            statistics_time=False,
            custom_settings=[("ARITHABORT", "ON"), ("NOCOUNT", "ON")],
        )
        assert config.to_set_commands("Sales") == [
            "ALTER DATABASE [Sales] SET COMPATIBILITY_LEVEL = 150",
            "ALTER DATABASE SCOPED CONFIGURATION SET MAXDOP = 2",
            "SET STATISTICS IO ON",
            "SET STATISTICS TIME OFF",
            "SET ARITHABORT ON",
            "SET NOCOUNT ON",
        ]

    def test_unset_statistics_flags_are_skipped(self):
        config = DatabaseConfiguration(name="Bare", statistics_io=None, statistics_time=None)
        assert config.to_set_commands("db") == []

    def test_final_query(self):
        assert DatabaseConfiguration().final_query("SELECT 1") == "SELECT 1"
        hinted = DatabaseConfiguration(query_hint="OPTION (MAXDOP 1)")
        assert hinted.final_query("SELECT 1") == "SELECT 1 OPTION (MAXDOP 1)"

    def test_slug(self):
        assert DatabaseConfiguration(name="MAXDOP 4").slug == "maxdop_4"
        assert DatabaseConfiguration(name="Force Index Scan").slug == "force_index_scan"
        assert DatabaseConfiguration(name="").slug == "default"

    def test_presets(self):
        assert [c.name for c in default_ab_configurations()] == ["Default", "MAXDOP 1", "MAXDOP 4", "Force Index Scan"]
        assert [c.compatibility_level for c in compatibility_configurations()] == [130, 140, 150, 160]


class TestParseConfiguration:
    def test_custom_settings_mapping_with_yaml_booleans(self):
        assert parse_custom_settings({"NOCOUNT": True, "LOCK_TIMEOUT": 500}) == [
            ("NOCOUNT", "ON"),
            ("LOCK_TIMEOUT", "500"),
        ]

    def test_custom_settings_pairs(self):
        assert parse_custom_settings([["ANSI_NULLS", False]]) == [("ANSI_NULLS", "OFF")]

    def test_bad_custom_settings(self):
        with pytest.raises(ValueError):
            parse_custom_settings([["only-one"]])
        with pytest.raises(ValueError):
            parse_custom_settings("NOCOUNT ON")

    def test_unknown_key(self):
        with pytest.raises(ValueError, match="maxdop"):
            parse_configuration({"name": "x", "maxdop": 1})

    def test_name_required(self):
        with pytest.raises(ValueError):
            parse_configuration({"max_dop": 1})

    def test_quoted_off_switches_statistics_off(self):
        config = parse_configuration({"name": "x", "statistics_io": "OFF", "statistics_time": "on"})
        assert config.statistics_io is False
        assert config.statistics_time is True
        assert config.to_set_commands("db") == ["SET STATISTICS IO OFF", "SET STATISTICS TIME ON"]

    def test_null_switch_is_left_unset(self):
        config = parse_configuration({"name": "x", "statistics_time": None})
        assert config.to_set_commands("db") == ["SET STATISTICS IO ON"]

    @pytest.mark.parametrize("value", ["yes", 1, "maybe"])
    def test_bad_switch(self, value):
        with pytest.raises(ValueError, match="statistics_io"):
            parse_configuration({"name": "x", "statistics_io": value})

    def test_numbers_are_coerced(self):
        config = parse_configuration({"name": "x", "max_dop": "4", "compatibility_level": 150})
        assert config.max_dop == 4
        assert config.compatibility_level == 150

    @pytest.mark.parametrize("key", ["max_dop", "compatibility_level"])
    @pytest.mark.parametrize("value", ["abc; DROP TABLE t", 2.5, True, "-1"])
    def test_bad_numbers(self, key, value):
        with pytest.raises(ValueError, match=key):
            parse_configuration({"name": "x", key: value})


class TestConfigLoader:
    def test_load_with_env_override(self, tmp_path):
        (tmp_path / "config.yaml").write_text(
            "query: SELECT * FROM Orders\n"
            "iterations: 3\n"
            "database: Sales\n"
            "configurations:\n"
            "  - name: Default\n"
            "  - name: MAXDOP 1\n"
            "    max_dop: 1\n"
            "    custom_settings:\n"
            "      NOCOUNT: ON\n",
            encoding="utf-8",
        )
        (tmp_path / "config_dev.yaml").write_text("iterations: 1\ncaptures_dir: dev_captures\n", encoding="utf-8")

        config = ConfigLoader(tmp_path, env="dev").config_data

        assert config.query == "SELECT * FROM Orders"
        assert config.iterations == 1
        assert config.database == "Sales"
        assert config.captures_dir == str(tmp_path / "dev_captures")
        assert [c.name for c in config.configurations] == ["Default", "MAXDOP 1"]
        assert config.configurations[1].custom_settings == [("NOCOUNT", "ON")]

    def test_defaults(self, tmp_path):
        (tmp_path / "config.yaml").write_text("query: SELECT 1\n", encoding="utf-8")
        config = ConfigLoader(tmp_path).config_data
        assert config.iterations == 1
        assert config.database == "master"
        assert config.configurations == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ConfigLoader(tmp_path)

    def test_missing_query(self, tmp_path):
        (tmp_path / "config.yaml").write_text("iterations: 2\n", encoding="utf-8")
        with pytest.raises(ValueError, match="query"):
            ConfigLoader(tmp_path)

    def test_bad_iterations(self, tmp_path):
        (tmp_path / "config.yaml").write_text("query: SELECT 1\niterations: 0\n", encoding="utf-8")
        with pytest.raises(ValueError):
            ConfigLoader(tmp_path)
