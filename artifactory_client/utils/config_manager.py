"""
Configuration management utilities.

This module provides centralized loading of the TOML configuration file
and conversion of its client section into validated settings.
"""

import base64
import logging
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional

from pydantic import ValidationError

from .constants import CONFIG_SECTION, DEFAULT_CONFIG_PATH

if TYPE_CHECKING:
    from ..models.context import ClientSettings


def encode_credential(username: str, password: str) -> str:
    """
    Encode a username and password into a basic-auth credential token.

    Example:
        >>> encode_credential("admin", "password")
        'YWRtaW46cGFzc3dvcmQ='
    """
    return base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")


class ConfigManager:
    """
    Manages configuration loading and access.

    Values are read lazily on first access and cached until reload() is called.
    """

    def __init__(self, config_path: Optional[str] = None) -> None:
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to configuration file. If None, uses default path.
        """
        self.config_path = Path(config_path or DEFAULT_CONFIG_PATH).expanduser()
        self._config: Optional[Dict[str, Any]] = None

    def load(self) -> Dict[str, Any]:
        """
        Load configuration from file.

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config file is invalid
        """
        if self._config is not None:
            return self._config

        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        try:
            with open(self.config_path, "rb") as f:
                self._config = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in configuration file {self.config_path}: {e}") from e
        logging.debug("Loaded configuration from %s", self.config_path)
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by key.

        Supports nested keys using dot notation (e.g., "cli.base_url").
        """
        value: Any = self.load()
        for part in key.split("."):
            if not isinstance(value, dict) or part not in value:
                return default
            value = value[part]
        return default if value is None else value

    def get_section(self, section: str) -> Dict[str, Any]:
        """Get an entire configuration section, or an empty dict if it is missing."""
        section_data = self.load().get(section, {})
        return section_data if isinstance(section_data, dict) else {}

    def has_key(self, key: str) -> bool:
        """Check if a configuration key exists (supports dot notation)."""
        try:
            self.load()
        except (FileNotFoundError, ValueError):
            return False
        missing = object()
        return self.get(key, missing) is not missing

    def reload(self) -> None:
        """Force reload configuration from file."""
        self._config = None
        self.load()

    def client_settings(self, section: str = CONFIG_SECTION) -> "ClientSettings":
        """
        Build validated client settings from a configuration section.

        A ``credential`` key is used as-is; otherwise ``username`` and
        ``password`` are encoded into one.

        Raises:
            ValueError: If the section is missing required values
        """
        from ..models.context import ClientSettings  # pylint: disable=import-outside-toplevel

        data = dict(self.get_section(section))
        username = data.pop("username", None)
        password = data.pop("password", None)
        if not data.get("credential") and username is not None and password is not None:
            data["credential"] = encode_credential(str(username), str(password))

        try:
            return ClientSettings(**data)
        except ValidationError as e:
            raise ValueError(f"Invalid [{section}] section in {self.config_path}: {e}") from e


__all__ = ["ConfigManager", "encode_credential"]
