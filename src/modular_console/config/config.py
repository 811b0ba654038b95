"""
Configuration management for modular-console.

Settings are read from a JSON file. Every field is optional; unset values
fall back to DEFAULTS.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, ValidationError

from modular_console.exceptions import ConfigError

# Environment variable naming the config file used by the console script
CONFIG_ENV_VAR = "MODULAR_CONSOLE_CONFIG"

# Default values - single source of truth
DEFAULTS = {
    "app_name": "console",
    "app_version": "UNKNOWN",
    "collision_policy": "override",
    "log_level": "WARNING",
    "modules": [],
}


class ConsoleConfig(BaseModel):
    """Configuration settings for a modular console application.

    All settings are optional. Use DEFAULTS for default values.
    """

    model_config = {"extra": "ignore"}  # Ignore unknown fields like _comment

    # Application settings
    app_name: Optional[str] = Field(
        default=None,
        description="Name shown by the console application"
    )
    app_version: Optional[str] = Field(
        default=None,
        description="Version shown by the console application"
    )

    # Registration settings
    collision_policy: Optional[Literal["override", "error"]] = Field(
        default=None,
        description="What to do when two modules declare the same command name"
    )

    # Runtime settings
    log_level: Optional[str] = Field(
        default=None,
        description="Logging level for the modular_console logger"
    )
    modules: Optional[list[str]] = Field(
        default=None,
        description="Module classes to load, as 'package.module:ClassName'"
    )

    def get(self, key: str, default: Any = None) -> Any:
        """Get a config value with fallback to DEFAULTS, then to provided default."""
        value = getattr(self, key, None)
        if value is not None:
            return value
        return DEFAULTS.get(key, default)


def load_config(path: Path | str | None = None) -> ConsoleConfig:
    """Load configuration from a JSON file.

    Args:
        path: Config file path. Falls back to $MODULAR_CONSOLE_CONFIG.

    Returns:
        ConsoleConfig with loaded settings, or defaults if no file is given
        or the file doesn't exist.

    Raises:
        ConfigError: If the file is not valid JSON or fails validation.
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return ConsoleConfig()

    config_file = Path(path)
    if not config_file.exists():
        return ConsoleConfig()

    try:
        data = json.loads(config_file.read_text())
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {config_file}: {e}") from e

    try:
        return ConsoleConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {config_file}: {e}") from e
