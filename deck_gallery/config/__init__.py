"""Configuration loading and settings."""

from deck_gallery.config.settings import AppSettings, get_settings, reload_settings

__all__ = ["AppSettings", "get_settings", "reload_settings"]
