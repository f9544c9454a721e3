"""
Configuration loader for A/B experiments.

Reads config.yaml from a configuration directory, optionally overlaid with
config_<env>.yaml, and builds an ExperimentConfig. Example:

    query: SELECT * FROM Orders o JOIN OrderDetails d ON d.OrderId = o.Id
    iterations: 3
    database: Sales
    captures_dir: captures
    configurations:
      - name: Default
      - name: MAXDOP 1
        max_dop: 1
      - name: No count
        custom_settings:
          NOCOUNT: ON
"""
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from statsparser.config.database_configuration import DatabaseConfiguration
from statsparser.config.experiment_config import ExperimentConfig

CONFIGURATION_KEYS = {
    "name",
    "compatibility_level",
    "statistics_io",
    "statistics_time",
    "max_dop",
    "query_hint",
    "custom_settings",
}


def _setting_value(value: Any) -> str:
    # YAML 1.1 reads a bare ON / OFF as a boolean
    if isinstance(value, bool):
        return "ON" if value else "OFF"
    return str(value)


def parse_custom_settings(raw: Any) -> List[Tuple[str, str]]:
    """
    Normalize custom settings to an ordered list of (setting, value) strings.

    Accepts a mapping or a list of two-item pairs.
    """
    if raw is None:
        return []
    if isinstance(raw, dict):
        items = list(raw.items())
    elif isinstance(raw, list):
        items = []
        for pair in raw:
            if not isinstance(pair, (list, tuple)) or len(pair) != 2:
                raise ValueError(f"Custom setting must be a [name, value] pair, got: {pair!r}")
            items.append((pair[0], pair[1]))
    else:
        raise ValueError(f"custom_settings must be a mapping or a list of pairs, got: {type(raw).__name__}")
    return [(str(key), _setting_value(value)) for key, value in items]


def _optional_int(key: str, value: Any) -> Optional[int]:
    # the value ends up in SQL text, so only plain integers get through
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an integer, got: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    raise ValueError(f"{key} must be an integer, got: {value!r}")


def _optional_switch(key: str, value: Any) -> Optional[bool]:
    """true/false, or the strings ON / OFF in any case."""
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().upper() in ("ON", "OFF"):
        return value.strip().upper() == "ON"
    raise ValueError(f"{key} must be ON or OFF, got: {value!r}")


def parse_configuration(data: Dict[str, Any]) -> DatabaseConfiguration:
    if not isinstance(data, dict):
        raise ValueError(f"Configuration entry must be a mapping, got: {data!r}")

    unknown = set(data) - CONFIGURATION_KEYS
    if unknown:
        raise ValueError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")
    if not data.get("name"):
        raise ValueError("Every configuration needs a non-empty 'name'")

    query_hint = data.get("query_hint")
    return DatabaseConfiguration(
        name=str(data["name"]),
        compatibility_level=_optional_int("compatibility_level", data.get("compatibility_level")),
        statistics_io=_optional_switch("statistics_io", data.get("statistics_io", True)),
        statistics_time=_optional_switch("statistics_time", data.get("statistics_time", True)),
        max_dop=_optional_int("max_dop", data.get("max_dop")),
        query_hint=str(query_hint) if query_hint is not None else None,
        custom_settings=parse_custom_settings(data.get("custom_settings")),
    )


class ConfigLoader:

    def __init__(self, config_path: Path, env: Optional[str] = None):
        self.config_path = config_path
        self.env = env
        self.config_data = self._load_config()

    def _read_yaml(self, file_path: Path) -> Dict[str, Any]:
        if not file_path.exists():
            raise FileNotFoundError(f"Config file {file_path} does not exist.")
        with open(file_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {file_path} must contain a mapping")
        return data

    def _load_config(self) -> ExperimentConfig:
        """
        Load and parse experiment configuration from YAML file.
        Supports environment-specific overrides via config_<env>.yaml

        Returns:
            ExperimentConfig: Configured experiment configuration instance
        """
        data = self._read_yaml(self.config_path / "config.yaml")

        if self.env:
            # Top-level keys of the env file replace those of the base file
            data.update(self._read_yaml(self.config_path / f"config_{self.env}.yaml"))

        if not data.get("query"):
            raise ValueError("Config is missing required key 'query'")

        config = ExperimentConfig()
        config.query = str(data["query"]).strip()
        config.iterations = int(data.get("iterations", 1))
        if config.iterations < 1:
            raise ValueError(f"iterations must be at least 1, got {config.iterations}")
        config.database = str(data.get("database", "master"))

        # Relative capture directories are resolved against the config directory
        captures_dir = Path(data.get("captures_dir", "captures"))
        if not captures_dir.is_absolute():
            captures_dir = self.config_path / captures_dir
        config.captures_dir = str(captures_dir)

        config.configurations = [parse_configuration(item) for item in data.get("configurations") or []]

        return config
