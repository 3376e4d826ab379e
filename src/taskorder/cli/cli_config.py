"""
Configuration persistence for the taskorder CLI.

Settings are stored as JSON in config.json.

Location Priority:
  1. TASKORDER_CONFIG_DIR environment variable (highest priority)
  2. Project-local: <project_root>/.data/ (if in project)
  3. User-global: ~/.taskorder/ (default fallback)

Known keys:
  output_format - default format for `taskorder run` (table, json, plain)
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Optional

from taskorder.logger import get_logger

logger = get_logger(__name__)

USER_CONFIG_DIR = Path.home() / ".taskorder"

CONFIG_FILE = "config.json"


def get_project_root() -> Optional[Path]:
    """
    Find project root by looking for pyproject.toml or .git directory.

    Returns:
        Project root path if found, None otherwise
    """
    current = Path.cwd()

    for parent in [current] + list(current.parents):
        if (parent / "pyproject.toml").exists() or (parent / ".git").exists():
            logger.debug(f"Found project root: {parent}")
            return parent

    return None


def get_project_config_dir() -> Optional[Path]:
    project_root = get_project_root()
    if project_root:
        return project_root / ".data"
    return None


def get_config_dir() -> Path:
    """
    Get the config directory based on context and environment.

    Priority order:
    1. TASKORDER_CONFIG_DIR environment variable
    2. Project-local <project_root>/.data (if in project)
    3. User-global ~/.taskorder (default)
    """
    env_config_dir = os.getenv("TASKORDER_CONFIG_DIR")
    if env_config_dir:
        return Path(env_config_dir)

    project_config_dir = get_project_config_dir()
    if project_config_dir:
        return project_config_dir

    return USER_CONFIG_DIR


def get_config_file_path(filename: str = CONFIG_FILE) -> Path:
    return get_config_dir() / filename


def ensure_config_dir() -> None:
    get_config_dir().mkdir(parents=True, exist_ok=True)


def load_cli_config() -> dict:
    """
    Load CLI configuration from config.json.

    Returns:
        Dictionary with config, empty dict if no config found
    """
    config_path = get_config_file_path()
    if not config_path.exists():
        logger.debug("No config found, using empty config")
        return {}

    try:
        with open(config_path, "r") as f:
            config = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Failed to load config from {config_path}: {e}")
        return {}

    if not isinstance(config, dict):
        logger.warning(f"Ignoring config at {config_path}: top level is not an object")
        return {}

    logger.debug(f"Loaded config from {config_path}")
    return config


def save_cli_config(config: dict) -> None:
    """
    Save CLI configuration to config.json with 644 permissions.

    Args:
        config: Configuration dictionary to save
    """
    ensure_config_dir()
    config_file = get_config_file_path()

    try:
        with open(config_file, "w") as f:
            json.dump(config, f, indent=2)
        config_file.chmod(0o644)
        logger.debug(f"Saved config to {config_file}")
    except OSError as e:
        logger.error(f"Failed to save config to {config_file}: {e}")
        raise


def get_config_value(key: str) -> Optional[str]:
    return load_cli_config().get(key)


def set_config_value(key: str, value: Optional[str]) -> None:
    """
    Set a configuration value.

    Args:
        key: Configuration key
        value: Configuration value (None to delete)
    """
    config = load_cli_config()
    if value is None:
        config.pop(key, None)
    else:
        config[key] = value
    save_cli_config(config)


def list_config_values() -> dict:
    return dict(load_cli_config())
