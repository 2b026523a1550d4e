"""YAML-backed configuration store with environment overrides."""

from __future__ import annotations

import logging
import os
from datetime import date, datetime
from typing import Any, Dict, Optional

import yaml

DEFAULT_CONFIG_PATH = os.path.join(os.path.expanduser("~"), ".hovercli.yaml")


class ConfigError(Exception):
    """Raised when the configuration file cannot be read or written."""


class ConfigStore:
    """Key/value settings read from a YAML file.

    Lookups check, in order: values assigned with :meth:`set`, an environment
    variable named after the upper-cased key, then the file contents. Only the
    file contents and :meth:`set` values are written back by
    :meth:`write_config`.
    """

    def __init__(self, path: str, data: Optional[Dict[str, Any]] = None) -> None:
        self.path = path
        self._data: Dict[str, Any] = dict(data or {})
        self._overrides: Dict[str, Any] = {}

    def get(self, key: str) -> Any:
        if key in self._overrides:
            return self._overrides[key]
        env_value = os.getenv(key.upper())
        if env_value:
            return env_value
        return self._data.get(key)

    def get_string(self, key: str) -> str:
        value = self.get(key)
        if value is None:
            return ""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (datetime, date)):
            return value.isoformat()
        return str(value)

    def get_time(self, key: str) -> Optional[datetime]:
        value = self.get(key)
        if value is None or value == "":
            return None
        if isinstance(value, datetime):
            parsed = value
        elif isinstance(value, date):
            parsed = datetime(value.year, value.month, value.day)
        else:
            try:
                parsed = datetime.fromisoformat(str(value).strip())
            except ValueError:
                logging.warning("Ignoring unparseable timestamp for %s: %r", key, value)
                return None
        # naive timestamps are read as local time
        return parsed if parsed.tzinfo else parsed.astimezone()

    def get_float(self, key: str) -> Optional[float]:
        value = self.get(key)
        if value is None or value == "":
            return None
        try:
            return float(value)
        except (TypeError, ValueError):
            logging.warning("Ignoring non-numeric value for %s: %r", key, value)
            return None

    def set(self, key: str, value: Any) -> None:
        if isinstance(value, datetime):
            value = value.isoformat()
        self._overrides[key] = value

    def settings(self) -> Dict[str, Any]:
        """File values merged with in-memory assignments."""

        merged = dict(self._data)
        merged.update(self._overrides)
        return merged

    def write_config(self) -> None:
        merged = self.settings()
        try:
            with open(self.path, "w", encoding="utf-8") as handle:
                yaml.safe_dump(merged, handle, default_flow_style=False, sort_keys=True)
        except OSError as exc:
            raise ConfigError(f"Unable to write config file {self.path}: {exc}") from exc
        # assigned values keep outranking the environment after a save
        self._data = merged
        logging.debug("Saved configuration to %s", self.path)


def load_config(path: Optional[str] = None) -> ConfigStore:
    """Read the config file at ``path`` (or the per-user default)."""

    config_path = os.path.expanduser(path) if path else DEFAULT_CONFIG_PATH
    try:
        with open(config_path, "r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except FileNotFoundError as exc:
        raise ConfigError(f"Config file not found: {config_path}") from exc
    except OSError as exc:
        raise ConfigError(f"Unable to read config file {config_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config file {config_path}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping of settings")

    logging.debug("Using config file %s", config_path)
    return ConfigStore(config_path, data)
