"""
Command registry built from the components modules export.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from cleo.commands.command import Command

from modular_console.console.attribute import CommandDescriptor, get_command_descriptor
from modular_console.exceptions import CommandNameCollisionError, RegistryFrozenError

logger = logging.getLogger(__name__)

COLLISION_POLICIES = ("override", "error")


class CommandRegistryBuilder:
    """Accumulates command name -> class mappings across modules."""

    def __init__(self, collision_policy: str = "override"):
        if collision_policy not in COLLISION_POLICIES:
            raise ValueError(f"Unknown collision policy: {collision_policy}")
        self.collision_policy = collision_policy
        self._commands: dict[str, type[Command]] = {}
        self._descriptors: dict[str, CommandDescriptor] = {}
        self._frozen = False

    def record(self, candidates: Iterable[Any]) -> list[CommandDescriptor]:
        """Record every candidate that is a named command class.

        Candidates that are not command classes, or that declare no name,
        are skipped. With the "override" policy a name seen before is
        remapped to the newer class.

        Returns:
            Descriptors recorded by this call.

        Raises:
            RegistryFrozenError: If the registry was frozen.
            CommandNameCollisionError: With the "error" policy, if a name is
                already mapped to a different class. Nothing from the call
                is recorded in that case.
        """
        if self._frozen:
            raise RegistryFrozenError("Cannot record commands after the registry was frozen")

        recorded = []
        for candidate in candidates:
            descriptor = get_command_descriptor(candidate)
            if descriptor is None:
                logger.debug(f"Skipping {candidate!r}: not a named command")
                continue
            recorded.append(descriptor)

        if self.collision_policy == "error":
            self._check_collisions(recorded)

        for descriptor in recorded:
            for name in descriptor.names:
                self._insert(name, descriptor.type_ref)
            self._descriptors[descriptor.name] = descriptor

        return recorded

    def _check_collisions(self, descriptors: list[CommandDescriptor]) -> None:
        pending = dict(self._commands)
        for descriptor in descriptors:
            for name in descriptor.names:
                self._check_collision(pending, name, descriptor.type_ref)
                pending[name] = descriptor.type_ref

    @staticmethod
    def _check_collision(commands: Mapping[str, type[Command]], name: str, type_ref: type[Command]) -> None:
        previous = commands.get(name)
        if previous is not None and previous is not type_ref:
            raise CommandNameCollisionError(
                f"Command '{name}' is declared by both "
                f"{previous.__qualname__} and {type_ref.__qualname__}"
            )

    def _insert(self, name: str, type_ref: type[Command]) -> None:
        previous = self._commands.get(name)
        if previous is not None and previous is not type_ref:
            logger.debug(f"Command '{name}': {previous.__qualname__} replaced by {type_ref.__qualname__}")
        self._commands[name] = type_ref
        logger.debug(f"Recorded command '{name}' -> {type_ref.__qualname__}")

    def freeze(self) -> None:
        """Stop accepting new commands."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def has(self, name: str) -> bool:
        return name in self._commands

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __len__(self) -> int:
        return len(self._commands)

    @property
    def names(self) -> list[str]:
        """All registered names (including aliases), sorted."""
        return sorted(self._commands)

    @property
    def descriptors(self) -> list[CommandDescriptor]:
        """Descriptors of commands that still own at least one name, sorted by name."""
        current = [self._descriptors[name] for name in sorted(self._descriptors)]
        return [d for d in current if any(self._commands.get(n) is d.type_ref for n in d.names)]

    def snapshot(self) -> Mapping[str, type[Command]]:
        """Read-only copy of the current name -> class mapping."""
        return MappingProxyType(dict(self._commands))
