"""Configuration loading and derived settings."""

from .config import Config
from .settings import Settings, load_settings, settings_from_config

__all__ = ["Config", "Settings", "load_settings", "settings_from_config"]
