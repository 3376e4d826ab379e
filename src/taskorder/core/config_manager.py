from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Optional

from dotenv import load_dotenv

from taskorder.core.errors import ConfigurationError
from taskorder.logger import configure_logging, get_logger

logger = get_logger(__name__)

OUTPUT_FORMATS = ("table", "json", "plain")
DEFAULT_OUTPUT_FORMAT = "table"


@dataclass
class ConfigManager:
    """
    Runtime configuration for taskorder.

    Values resolve from explicit overrides first, then the environment
    (optionally populated from a .env file).

    Usage examples
    --------------
        from taskorder.core.config_manager import get_config_manager

        cm = get_config_manager()
        cm.load_env_files([Path.cwd()/".env"], override=False)
        cm.get_default_output_format()
    """

    _overrides: Dict[str, str] = field(default_factory=dict)
    loaded_env_file: Optional[Path] = None

    def load_env_files(self, paths: Iterable[Path], override: bool = False) -> Optional[Path]:
        """Load the first existing .env file from the provided paths."""
        for env_path in paths:
            if env_path.exists():
                load_dotenv(env_path, override=override)
                self.loaded_env_file = env_path
                logger.debug("Loaded .env file from %s", env_path)
                configure_logging(self.get_log_level())
                return env_path
        return None

    def set(self, key: str, value: Optional[str]) -> None:
        if value is None:
            self._overrides.pop(key, None)
        else:
            self._overrides[key] = value

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        if key in self._overrides:
            return self._overrides[key]
        return os.getenv(key, default)

    def get_log_level(self) -> str:
        return (self.get("TASKORDER_LOG_LEVEL") or "WARNING").upper()

    def get_default_output_format(self) -> str:
        """
        Output format used by `taskorder run` when --format is not given.

        Raises:
            ConfigurationError: If TASKORDER_OUTPUT_FORMAT names an unknown format
        """
        value = (self.get("TASKORDER_OUTPUT_FORMAT") or DEFAULT_OUTPUT_FORMAT).lower()
        if value not in OUTPUT_FORMATS:
            raise ConfigurationError(
                f"Unknown output format '{value}'",
                what=f"Unknown output format '{value}'",
                why="TASKORDER_OUTPUT_FORMAT must be one of: " + ", ".join(OUTPUT_FORMATS),
                how_to_fix="Set TASKORDER_OUTPUT_FORMAT to table, json or plain",
            )
        return value

    def clear(self) -> None:
        self._overrides.clear()
        self.loaded_env_file = None


_config_manager = ConfigManager()


def get_config_manager() -> ConfigManager:
    return _config_manager


__all__ = ["ConfigManager", "get_config_manager", "OUTPUT_FORMATS"]
