"""
Application settings management using Pydantic.

This module combines YAML configuration with environment variables to create
a unified settings object.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from deck_gallery.config.loader import load_config, merge_with_env
from deck_gallery.utils.error_handling import ConfigurationError


class APISettings(BaseSettings):
    """API configuration settings."""

    host: str = "0.0.0.0"
    port: int = 8000
    cors_enabled: bool = True
    cors_origins: list[str] = Field(default_factory=list)

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if not 1 <= v <= 65535:
            raise ValueError("Port must be between 1 and 65535")
        return v


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: str = "INFO"
    format: str = "text"

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
        return v_upper

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        valid_formats = ["json", "text"]
        if v not in valid_formats:
            raise ValueError(f"Log format must be one of: {', '.join(valid_formats)}")
        return v


class UploadSettings(BaseSettings):
    """Upload and publishing settings."""

    max_files: int = 50
    default_author_id: str = "u1"
    default_author_name: str = "Demo User"
    fit_slides: bool = True

    @field_validator("max_files")
    @classmethod
    def validate_max_files(cls, v: int) -> int:
        if v < 1:
            raise ValueError("max_files must be at least 1")
        return v


class AppSettings(BaseSettings):
    """
    Main application settings.

    Combines environment variables with YAML configuration.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
    )

    api: APISettings = Field(default_factory=APISettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    upload: UploadSettings = Field(default_factory=UploadSettings)

    environment: str = "development"


def create_settings() -> AppSettings:
    """
    Create application settings by combining YAML config and environment variables.

    Returns:
        AppSettings instance with all configuration loaded

    Raises:
        ConfigurationError: If configuration cannot be loaded or is invalid
    """
    try:
        config = merge_with_env(load_config())

        return AppSettings(
            api=APISettings(**config["api"]),
            logging=LoggingSettings(**config["logging"]),
            upload=UploadSettings(**config["upload"]),
            environment=config.get("environment", "development"),
        )

    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Failed to create settings: {e}") from e


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """
    Get the application settings singleton.

    Use reload_settings() to force a reload.
    """
    return create_settings()


def reload_settings() -> AppSettings:
    """Reload settings by clearing the cache and recreating."""
    get_settings.cache_clear()
    return get_settings()
