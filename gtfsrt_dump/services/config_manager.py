"""
Configuration Manager - Output constants and runtime switches
"""

from __future__ import annotations

import os
from typing import Any

# Rendered timestamps are always shown at this fixed UTC offset
TIME_ZONE_OFFSET_HOURS = 9
# Width of the source column in side-by-side diff output
SOURCE_COLUMN_WIDTH = 60
# Exit status for a malformed invocation
USAGE_EXIT_STATUS = 65
# Exit status when one or more inputs could not be processed
FAILURE_EXIT_STATUS = 1

VERBOSE_ENV_VAR = "GTFSRT_DUMP_VERBOSE"


class ConfigManager:
    """Runtime configuration, environment first, then defaults"""

    _instance = None

    def __init__(self, environ: dict[str, str] | None = None):
        self._environ = os.environ if environ is None else environ
        self._config = self._load_config()

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = ConfigManager()
        return cls._instance

    @classmethod
    def reset_instance(cls):
        cls._instance = None

    def _load_config(self) -> dict[str, Any]:
        config = self._default_config()

        # Environment overrides defaults
        verbose = self._environ.get(VERBOSE_ENV_VAR)
        if verbose is not None:
            config["verbose"] = verbose.strip().lower() in ("1", "true", "yes", "on")

        return config

    def _default_config(self) -> dict[str, Any]:
        """Get default configuration"""
        return {
            "verbose": False,
        }

    def get_config(self) -> dict[str, Any]:
        """Get current configuration"""
        return self._config.copy()

    def get(self, key: str, default=None):
        """Get specific config value"""
        return self._config.get(key, default)

    def set(self, key: str, value: Any):
        """Set specific config value for this process"""
        self._config[key] = value

    @property
    def verbose(self) -> bool:
        return bool(self._config.get("verbose", False))
