"""
Setup participant that registers exported commands into the console application.

During the PRE phase every module's exports are scanned for command
classes. During the first POST call the collected commands are installed,
through a lazy loader, into the Application held by the root container.
"""

from __future__ import annotations

import logging
from typing import Optional

from cleo.application import Application

from modular_console.config import ConsoleConfig
from modular_console.console.loader import ContainerCommandLoader
from modular_console.console.registry import CommandRegistryBuilder
from modular_console.framework.contracts import PowerModuleSetupDto, SetupPhase, exports_components

logger = logging.getLogger(__name__)


class ConsoleCommandsSetup:
    """Collects commands from exporting modules and installs them once."""

    def __init__(self, config: Optional[ConsoleConfig] = None):
        config = config or ConsoleConfig()
        self._console = Application(config.get("app_name"), config.get("app_version"))
        self._registry = CommandRegistryBuilder(config.get("collision_policy"))
        self._command_loader: Optional[ContainerCommandLoader] = None

    @property
    def registry(self) -> CommandRegistryBuilder:
        return self._registry

    @property
    def command_loader(self) -> Optional[ContainerCommandLoader]:
        return self._command_loader

    @property
    def is_installed(self) -> bool:
        return self._command_loader is not None

    def setup(self, dto: PowerModuleSetupDto) -> None:
        module = dto.power_module
        if not exports_components(module):
            return

        if dto.setup_phase is SetupPhase.PRE:
            if self._registry.frozen:
                logger.warning(
                    f"Ignoring commands of {type(module).__name__}: console commands already installed"
                )
                return
            # Only collect here; installation waits until every module was seen
            recorded = self._registry.record(module.exports())
            if recorded:
                logger.debug(
                    f"{type(module).__name__} exports commands: "
                    + ", ".join(d.name for d in recorded)
                )
            return

        if self._command_loader is not None:
            return

        self._registry.freeze()
        loader = ContainerCommandLoader(dto.root_container, self._registry.snapshot())

        container = dto.root_container
        if container.has(Application):
            # Someone else already provided the application
            console = container.get(Application)
        else:
            console = self._console
            container.set(Application, console)

        console.set_command_loader(loader)
        self._command_loader = loader
        logger.info(f"Installed {len(loader.names)} console command(s)")
