"""Configuration management for modular-console."""

from modular_console.config.config import (
    CONFIG_ENV_VAR,
    DEFAULTS,
    ConsoleConfig,
    load_config,
)

__all__ = [
    "CONFIG_ENV_VAR",
    "DEFAULTS",
    "ConsoleConfig",
    "load_config",
]
