"""Utility helpers for HTTP access and configuration storage."""

from .config_store import DEFAULT_CONFIG_PATH, ConfigError, ConfigStore, load_config
from .http_client import AuthenticationError, HoverAPIError, HttpClient

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ConfigError",
    "ConfigStore",
    "load_config",
    "AuthenticationError",
    "HoverAPIError",
    "HttpClient",
]
