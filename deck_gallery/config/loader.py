"""
Configuration loader for YAML files.

This module handles loading and parsing the YAML configuration file.
"""

import os
from pathlib import Path
from typing import Any

import yaml

from deck_gallery.utils.error_handling import ConfigurationError

CONFIG_PATH_ENV = "DECK_GALLERY_CONFIG"
REQUIRED_SECTIONS = ["api", "logging", "upload"]


def get_config_path(filename: str = "config.yaml") -> Path:
    """
    Get the path to the configuration file.

    DECK_GALLERY_CONFIG, when set, points directly at the file to use.
    Otherwise the file is looked up in the project's config/ directory.

    Args:
        filename: Name of the config file

    Returns:
        Path to the configuration file

    Raises:
        ConfigurationError: If config file doesn't exist
    """
    if override := os.getenv(CONFIG_PATH_ENV):
        config_path = Path(override)
    else:
        project_root = Path(__file__).parent.parent.parent
        config_path = project_root / "config" / filename

    if not config_path.exists():
        raise ConfigurationError(f"Configuration file not found: {config_path}")

    return config_path


def load_yaml_file(file_path: Path) -> dict[str, Any]:
    """
    Load and parse a YAML file.

    Args:
        file_path: Path to the YAML file

    Returns:
        Parsed YAML content as a dictionary

    Raises:
        ConfigurationError: If file cannot be loaded or parsed
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            content = yaml.safe_load(f)

        if content is None:
            raise ConfigurationError(f"YAML file is empty: {file_path}")

        if not isinstance(content, dict):
            raise ConfigurationError(
                f"YAML file must contain a dictionary at root level: {file_path}"
            )

        return content

    except yaml.YAMLError as e:
        raise ConfigurationError(f"Failed to parse YAML file {file_path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Failed to read file {file_path}: {e}") from e


def load_config() -> dict[str, Any]:
    """
    Load the main configuration file.

    Returns:
        Configuration dictionary

    Raises:
        ConfigurationError: If config cannot be loaded or misses a section
    """
    config = load_yaml_file(get_config_path())

    missing_keys = [key for key in REQUIRED_SECTIONS if key not in config]
    if missing_keys:
        raise ConfigurationError(
            f"Missing required configuration sections: {', '.join(missing_keys)}"
        )

    return config


def merge_with_env(config: dict[str, Any]) -> dict[str, Any]:
    """
    Merge configuration with environment variable overrides.

    - API_PORT -> api.port
    - LOG_LEVEL -> logging.level
    - ENVIRONMENT -> environment

    Args:
        config: Base configuration dictionary

    Returns:
        Configuration with environment overrides applied
    """
    merged = {key: dict(value) if isinstance(value, dict) else value for key, value in config.items()}

    if port := os.getenv("API_PORT"):
        try:
            merged["api"]["port"] = int(port)
        except (ValueError, KeyError):
            pass

    if log_level := os.getenv("LOG_LEVEL"):
        if "logging" in merged:
            merged["logging"]["level"] = log_level.upper()

    if environment := os.getenv("ENVIRONMENT"):
        merged["environment"] = environment

    return merged
