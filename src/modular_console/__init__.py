"""
modular_console - console commands contributed by independent modules

Modules export cleo command classes; a setup participant collects them
from every module and installs a lazy loader into one shared console
Application. Commands are only constructed, with their dependencies
resolved by the container, when they are invoked.

Example usage:
    from cleo.application import Application
    from cleo.commands.command import Command
    from modular_console import ConsoleCommandsSetup, ModularAppBuilder, as_command

    @as_command(name="a-command", description="A test command")
    class ACommand(Command):
        def handle(self) -> int:
            self.line("ACommand executed")
            return 0

    class ModuleWithCommands:
        @staticmethod
        def exports():
            return [ACommand]

        def register(self, container):
            container.set(ACommand)

    app = (
        ModularAppBuilder()
        .with_power_setup(ConsoleCommandsSetup())
        .with_modules(ModuleWithCommands)
        .build()
    )
    app.get(Application).run()
"""

__version__ = "0.1.0"

from modular_console.config import ConsoleConfig, load_config
from modular_console.console import (
    CommandDescriptor,
    CommandRegistryBuilder,
    ConsoleCommandsSetup,
    ContainerCommandLoader,
    as_command,
    get_command_descriptor,
    is_command_type,
)
from modular_console.exceptions import (
    CommandNameCollisionError,
    ConfigError,
    ConsoleError,
    ContainerError,
    ContainerResolutionError,
    InvalidCommandError,
    InvalidModuleError,
    ModuleImportError,
    RegistryFrozenError,
    ServiceNotFoundError,
    UnknownCommandError,
)
from modular_console.framework import (
    Container,
    ExportsComponents,
    ModularApp,
    ModularAppBuilder,
    PowerModule,
    PowerModuleSetup,
    PowerModuleSetupDto,
    Reference,
    SetupPhase,
)

__all__ = [
    # Version
    "__version__",
    # Console commands
    "CommandDescriptor",
    "CommandRegistryBuilder",
    "ConsoleCommandsSetup",
    "ContainerCommandLoader",
    "as_command",
    "get_command_descriptor",
    "is_command_type",
    # Framework
    "Container",
    "ExportsComponents",
    "ModularApp",
    "ModularAppBuilder",
    "PowerModule",
    "PowerModuleSetup",
    "PowerModuleSetupDto",
    "Reference",
    "SetupPhase",
    # Config
    "ConsoleConfig",
    "load_config",
    # Exceptions
    "CommandNameCollisionError",
    "ConfigError",
    "ConsoleError",
    "ContainerError",
    "ContainerResolutionError",
    "InvalidCommandError",
    "InvalidModuleError",
    "ModuleImportError",
    "RegistryFrozenError",
    "ServiceNotFoundError",
    "UnknownCommandError",
]
