"""
Exception classes for modular-console.
"""

from __future__ import annotations

from cleo.exceptions import CleoCommandNotFoundError


class ConsoleError(Exception):
    """Base exception for modular-console errors."""


class UnknownCommandError(ConsoleError, CleoCommandNotFoundError):
    """No command is registered under the requested name."""

    def __init__(self, name: str, commands: list[str] | None = None) -> None:
        self.command_name = name
        CleoCommandNotFoundError.__init__(self, name, commands)


class InvalidCommandError(ConsoleError):
    """A class was declared as a command but cannot be one."""


class CommandNameCollisionError(ConsoleError):
    """Two different command classes claim the same name."""


class RegistryFrozenError(ConsoleError):
    """Commands were recorded after the registry was finalized."""


class ContainerError(ConsoleError):
    """Base exception for container errors."""


class ServiceNotFoundError(ContainerError):
    """Requested key is not registered in the container."""


class ContainerResolutionError(ContainerError):
    """A registered definition could not be built."""


class ConfigError(ConsoleError):
    """Configuration file could not be loaded."""


class ModuleImportError(ConsoleError):
    """A module import string could not be resolved."""


class InvalidModuleError(ConsoleError):
    """A class passed as a module does not implement the module contract."""
