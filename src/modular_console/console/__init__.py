"""
Console command registration for modular applications.

Modules export cleo command classes decorated with as_command; the
ConsoleCommandsSetup participant collects them and installs a lazy loader
into the shared console Application.
"""

from modular_console.console.attribute import (
    CommandDescriptor,
    as_command,
    get_command_descriptor,
    is_command_type,
)
from modular_console.console.loader import ContainerCommandLoader
from modular_console.console.registry import CommandRegistryBuilder
from modular_console.console.setup import ConsoleCommandsSetup

__all__ = [
    "CommandDescriptor",
    "CommandRegistryBuilder",
    "ConsoleCommandsSetup",
    "ContainerCommandLoader",
    "as_command",
    "get_command_descriptor",
    "is_command_type",
]
