"""
Command loader that builds commands through the container on first use.
"""

from __future__ import annotations

import logging
from typing import Mapping

from cleo.commands.command import Command
from cleo.loaders.command_loader import CommandLoader

from modular_console.exceptions import UnknownCommandError
from modular_console.framework.container import Container

logger = logging.getLogger(__name__)


class ContainerCommandLoader(CommandLoader):
    """Maps command names to classes and asks the container for instances.

    Nothing is constructed until get() is called. Instances are not cached
    here; the container decides whether repeated gets share one instance.
    """

    def __init__(self, container: Container, command_map: Mapping[str, type[Command]]):
        self._container = container
        self._command_map = dict(command_map)

    @property
    def names(self) -> list[str]:
        return sorted(self._command_map)

    def has(self, name: str) -> bool:
        return name in self._command_map

    def get(self, name: str) -> Command:
        """Build the command registered under name.

        Raises:
            UnknownCommandError: If name is not registered.
        """
        if name not in self._command_map:
            raise UnknownCommandError(name, self.names)

        type_ref = self._command_map[name]
        logger.debug(f"Loading command '{name}' ({type_ref.__qualname__})")
        return self._container.get(type_ref)
