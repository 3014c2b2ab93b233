"""Settings for a PureMVC core.

Settings come from three places:
1. Defaults on ``CoreSettings``
2. A YAML file (``CoreSettings.load``)
3. ``PUREMVC_*`` environment variables (``CoreSettings.from_env``)
"""
from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from . import loaders

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_KEY = "default"

_TRUTHY = ("1", "true", "yes", "on")
_FALSY = ("0", "false", "no", "off", "")


class CoreSettings(BaseModel):
    """Configuration for one Facade and its Model, View and Controller."""

    model_config = ConfigDict(validate_assignment=True)

    key: str = Field(DEFAULT_KEY, description="Name under which the Facade claims its core")
    log_level: str = Field("INFO", description="Level for the puremvc logger")
    json_logs: bool = Field(
        False,
        description="Install the JSON stream handler when the Facade is built",
    )
    trace_notifications: bool = Field(
        False,
        description="Log every dispatch at DEBUG level",
    )

    @field_validator("key")
    @classmethod
    def validate_key(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("key must be a non-empty string")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = str(v).upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @classmethod
    def load(cls, path: str | Path) -> "CoreSettings":
        """Load settings from a YAML file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the file is empty or not a mapping
        """
        if not Path(path).exists():
            raise FileNotFoundError(f"Settings file not found: {path}")
        data = loaders.read_yaml(path)
        if not data or not isinstance(data, dict):
            raise ValueError(f"Empty or invalid YAML in {path}")
        return cls(**data)

    def save(self, path: str | Path) -> None:
        loaders.write_yaml(path, self.model_dump())

    @classmethod
    def from_env(cls) -> "CoreSettings":
        defaults = cls()
        return cls(
            key=os.environ.get("PUREMVC_KEY", defaults.key),
            log_level=os.environ.get("PUREMVC_LOG_LEVEL", defaults.log_level),
            json_logs=_env_flag("PUREMVC_JSON_LOGS", defaults.json_logs),
            trace_notifications=_env_flag("PUREMVC_TRACE_NOTIFICATIONS", defaults.trace_notifications),
        )


def _env_flag(name: str, fallback: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return fallback
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ValueError(f"{name} must be one of {', '.join(_TRUTHY + _FALSY[:-1])}, got {raw!r}")


def load_settings_from_env(env_var: str = "PUREMVC_CONFIG") -> CoreSettings:
    """Load settings from the YAML file named by ``env_var``.

    Raises:
        ValueError: If the environment variable is not set
        FileNotFoundError: If the settings file doesn't exist
    """
    config_path = os.getenv(env_var)
    if not config_path:
        raise ValueError(f"Environment variable {env_var} not set")
    return CoreSettings.load(config_path)
