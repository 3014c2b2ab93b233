"""Core configuration."""

from .settings import CoreSettings, load_settings_from_env

__all__ = ["CoreSettings", "load_settings_from_env"]
