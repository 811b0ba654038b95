"""
Command metadata declared on command classes.

A command class opts into registration with the as_command decorator:

    @as_command(name="a-command", description="A test command")
    class ACommand(Command):
        def handle(self) -> int:
            self.line("ACommand executed")
            return 0

The name is read from the class without instantiating it.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

from cleo.commands.command import Command
from pydantic import BaseModel, Field, ValidationError

from modular_console.exceptions import InvalidCommandError

# Class attribute holding the CommandDescriptor
DESCRIPTOR_ATTR = "__console_command__"


class CommandDescriptor(BaseModel):
    """Name and implementing class of one command."""

    name: str = Field(min_length=1)
    type_ref: type[Command]
    description: str = ""
    aliases: tuple[str, ...] = ()
    hidden: bool = False

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @property
    def names(self) -> tuple[str, ...]:
        """Invocation name followed by aliases."""
        return (self.name, *self.aliases)


def is_command_type(candidate: Any) -> bool:
    """Check whether candidate is a class implementing a console command."""
    return isinstance(candidate, type) and issubclass(candidate, Command)


def as_command(
    name: str,
    description: str = "",
    aliases: Sequence[str] = (),
    hidden: bool = False,
) -> Callable[[type[Command]], type[Command]]:
    """
    Class decorator that declares a command's invocation name.

    Also sets the cleo class attributes (name, description, aliases, hidden)
    so the console application displays the same values.

    Raises:
        InvalidCommandError: If the class is not a cleo Command or the name is empty.
    """
    def decorator(cls: type[Command]) -> type[Command]:
        if not is_command_type(cls):
            raise InvalidCommandError(f"{cls!r} is not a console command class")

        try:
            descriptor = CommandDescriptor(
                name=name,
                type_ref=cls,
                description=description,
                aliases=tuple(aliases),
                hidden=hidden,
            )
        except ValidationError as e:
            raise InvalidCommandError(str(e)) from e

        setattr(cls, DESCRIPTOR_ATTR, descriptor)
        cls.name = descriptor.name
        cls.description = descriptor.description
        cls.aliases = list(descriptor.aliases)
        cls.hidden = descriptor.hidden
        return cls

    return decorator


def get_command_descriptor(candidate: Any) -> Optional[CommandDescriptor]:
    """Get the descriptor a command class declares, or None.

    Only metadata declared on the class itself counts; subclasses of a
    decorated command must declare their own.
    """
    if not is_command_type(candidate):
        return None
    descriptor = vars(candidate).get(DESCRIPTOR_ATTR)
    if not isinstance(descriptor, CommandDescriptor):
        return None
    return descriptor
