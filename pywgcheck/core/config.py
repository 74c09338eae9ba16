"""Manages settings for pywgcheck.

This module loads, manages, and saves the application's settings. It
aggregates values from defaults, TOML files, and environment variables,
providing a unified interface for accessing them. Settings only shape how
results are presented and how the CLI exits; they never change what counts
as a valid configuration.
"""

import os
import sys
from pathlib import Path
from typing import Dict, Any, Optional

try:
    import tomllib  # Available in Python 3.11+
except ImportError:
    import tomli as tomllib  # Fallback for Python versions < 3.11

import tomli_w

# The default path for the user-specific settings file.
USER_CONFIG_PATH = Path.home() / ".config" / "wgcheck" / "config.toml"

# Project-level settings file looked up in the working directory.
PROJECT_CONFIG_NAME = "wgcheck.toml"

OUTPUT_FORMATS = ("table", "json", "md")

BOOL_KEYS = ("fail_on_invalid", "colors", "verbose")


class Config:
    """Handles the settings for the pywgcheck application.

    Settings are loaded from multiple sources with a defined precedence:
    1.  Default values (lowest precedence).
    2.  Project-specific `wgcheck.toml` file.
    3.  User-level `~/.config/wgcheck/config.toml` file.
    4.  A custom settings file specified at runtime, which replaces 2 and 3.
    5.  Environment variables (highest precedence).

    Attributes:
        DEFAULT_CONFIG (Dict[str, Any]): The default settings.
    """

    DEFAULT_CONFIG = {
        "fail_on_invalid": True,  # Exit non-zero when any input is invalid.
        "output": "table",  # One of OUTPUT_FORMATS.
        "colors": True,
        "verbose": False,
    }

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """Initializes the settings manager.

        Args:
            config_path (Optional[Path]): An optional path to a specific
                settings file to load instead of the default locations.
        """
        self.config: Dict[str, Any] = dict(self.DEFAULT_CONFIG)
        self._load_config(config_path)

    def _load_config(self, config_path: Optional[Path] = None) -> None:
        if config_path:
            self._load_file_config(Path(config_path))
        else:
            self._load_default_configs()

        self._load_env_config()

    def _load_default_configs(self) -> None:
        """Loads settings from standard locations if they exist."""
        project_config = Path.cwd() / PROJECT_CONFIG_NAME
        if project_config.exists():
            self._load_file_config(project_config)

        if USER_CONFIG_PATH.exists():
            self._load_file_config(USER_CONFIG_PATH)

    def _load_file_config(self, config_path: Path) -> None:
        """Loads and merges settings from a TOML file.

        Unknown keys are kept so that a newer settings file still loads.

        Args:
            config_path (Path): The path to the TOML settings file.
        """
        try:
            with open(config_path, "rb") as f:
                self.config.update(tomllib.load(f))
        except (OSError, tomllib.TOMLDecodeError) as e:
            print(f"Warning: Could not load config from {config_path}: {e}", file=sys.stderr)

    def _load_env_config(self) -> None:
        """Loads and merges settings from environment variables."""
        env_mapping = {
            "WGCHECK_FAIL_ON_INVALID": "fail_on_invalid",
            "WGCHECK_OUTPUT": "output",
            "WGCHECK_COLORS": "colors",
            "WGCHECK_VERBOSE": "verbose",
        }

        for env_var, config_key in env_mapping.items():
            value = os.getenv(env_var)
            if value is not None:
                self.config[config_key] = self.coerce(config_key, value)

    @staticmethod
    def coerce(key: str, value: str) -> Any:
        """Casts a string value, as found in the environment, to the key's type.

        Args:
            key (str): The settings key.
            value (str): The raw string value.

        Returns:
            Any: A bool for boolean keys, otherwise the string unchanged.
        """
        if key in BOOL_KEYS:
            return value.strip().lower() in ("true", "1", "yes", "on")
        return value

    def get(self, key: str, default: Any = None) -> Any:
        return self.config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.config[key] = value

    def output_format(self) -> str:
        """Returns the configured output format, falling back to "table".

        Returns:
            str: One of OUTPUT_FORMATS.
        """
        output = str(self.get("output", "table")).lower()
        if output not in OUTPUT_FORMATS:
            print(f"Warning: Unknown output format '{output}', using 'table'", file=sys.stderr)
            return "table"
        return output

    def should_fail(self) -> bool:
        """Determines if invalid input should produce a non-zero exit code."""
        return bool(self.get("fail_on_invalid"))

    def _get_user_config(self) -> Dict[str, Any]:
        if not USER_CONFIG_PATH.exists():
            return {}
        try:
            with open(USER_CONFIG_PATH, "rb") as f:
                return tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError):
            return {}

    def save_user_config(self) -> None:
        """Saves settings that differ from the defaults to the user file.

        Raises:
            IOError: If the settings file cannot be written.
        """
        user_config = self._get_user_config()

        for key, value in self.config.items():
            if key not in self.DEFAULT_CONFIG or value != self.DEFAULT_CONFIG[key]:
                user_config[key] = value

        try:
            USER_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
            with open(USER_CONFIG_PATH, "wb") as f:
                tomli_w.dump(user_config, f)
        except OSError as e:
            raise IOError(f"Failed to save configuration to {USER_CONFIG_PATH}: {e}")

    @staticmethod
    def reset_user_config() -> bool:
        """Deletes the user settings file.

        Returns:
            bool: True if a file was removed, False if there was none.
        """
        if USER_CONFIG_PATH.exists():
            USER_CONFIG_PATH.unlink()
            return True
        return False

    def __str__(self) -> str:
        return f"Config({self.config})"
