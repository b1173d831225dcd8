"""Configuration loading from files and environment variables."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

CONFIG_DIR_NAME = ".xmltest"
DEFAULT_LOG_LEVEL = "WARNING"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass(slots=True)
class Settings:
    """Resolved settings for the command line tools."""

    index_path: Path | None = None
    log_level: str = DEFAULT_LOG_LEVEL
    visible_control_chars: bool = True

    @classmethod
    def load(cls) -> Settings:
        """Load settings from files and environment variables.

        Priority (highest to lowest):
        1. Environment variables (XMLTEST_*)
        2. Project config (.xmltest/config.toml or .xmltest/config.yaml)
        3. Global config (~/.xmltest/config.toml or ~/.xmltest/config.yaml)
        4. Defaults
        """
        data: dict[str, Any] = {}
        data = cls._merge_config(data, cls._load_config_file(Path.home() / CONFIG_DIR_NAME))
        data = cls._merge_config(data, cls._load_config_file(Path.cwd() / CONFIG_DIR_NAME))
        data = cls._apply_env_vars(data)
        return cls._from_dict(data)

    @classmethod
    def _load_config_file(cls, config_dir: Path) -> dict[str, Any]:
        """Load config from a directory (TOML or YAML)."""
        toml_path = config_dir / "config.toml"
        yaml_path = config_dir / "config.yaml"
        yml_path = config_dir / "config.yml"

        if toml_path.exists():
            with open(toml_path, "rb") as f:
                return tomllib.load(f)
        for path in (yaml_path, yml_path):
            if path.exists():
                with open(path) as f:
                    return yaml.safe_load(f) or {}

        return {}

    @classmethod
    def _merge_config(cls, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two config dictionaries."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = cls._merge_config(result[key], value)
            else:
                result[key] = value
        return result

    @classmethod
    def _apply_env_vars(cls, data: dict[str, Any]) -> dict[str, Any]:
        """Apply XMLTEST_* environment variables."""
        env_mappings = {
            "XMLTEST_INDEX": "index_path",
            "XMLTEST_LOG_LEVEL": "log_level",
            "XMLTEST_VISIBLE_CONTROL_CHARS": "visible_control_chars",
        }
        for env_var, key in env_mappings.items():
            if value := os.environ.get(env_var):
                if key == "visible_control_chars":
                    data[key] = value.strip().lower() in _TRUE_VALUES
                else:
                    data[key] = value
        return data

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> Settings:
        """Create Settings from dictionary."""
        index_path = data.get("index_path")
        log_level = str(data.get("log_level", DEFAULT_LOG_LEVEL)).upper()
        if log_level not in _LOG_LEVELS:
            log_level = DEFAULT_LOG_LEVEL

        return cls(
            index_path=Path(index_path).expanduser() if index_path else None,
            log_level=log_level,
            visible_control_chars=bool(data.get("visible_control_chars", True)),
        )
