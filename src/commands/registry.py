"""
Command Registry Module.

Central registry for all available commands, keyed by canonical name.
"""

from typing import Iterator

from loguru import logger

from src.commands.base import BaseCommand
from src.core.errors import DuplicateCommand, InvalidCommand, NameTooLong

registry_log = logger.bind(module="Registry")


def canonical_name(name: str) -> str:
    """Registry key for a command name (upper-cased)."""
    return name.upper()


class CommandRegistry:
    """Case-insensitive command lookup, enumerable in registration order."""

    def __init__(self, max_name_length: int = 32):
        """
        Initialize registry.

        Args:
            max_name_length: Longest command name accepted by register and lookup
        """
        self.max_name_length = max_name_length
        self._commands: dict[str, BaseCommand] = {}

    def register(self, command: BaseCommand) -> None:
        """
        Register a command instance.

        Raises:
            NameTooLong: If the name exceeds max_name_length
            DuplicateCommand: If the canonical name is already taken
        """
        if len(command.name) > self.max_name_length:
            raise NameTooLong(command.name, self.max_name_length)

        key = canonical_name(command.name)
        if key in self._commands:
            raise DuplicateCommand(key)

        self._commands[key] = command
        registry_log.debug(f"Registered command: {key}")

    def lookup(self, token: str) -> BaseCommand:
        """
        Get command by name.

        Args:
            token: Command name as typed (any case)

        Returns:
            Registered command

        Raises:
            InvalidCommand: If the name is unknown or too long
        """
        if len(token) > self.max_name_length:
            raise NameTooLong(token, self.max_name_length)

        command = self._commands.get(canonical_name(token))
        if command is None:
            raise InvalidCommand(token)
        return command

    def enumerate(self) -> Iterator[BaseCommand]:
        """Yield registered commands in registration order."""
        yield from list(self._commands.values())

    def __contains__(self, name: str) -> bool:
        return canonical_name(name) in self._commands

    def __len__(self) -> int:
        return len(self._commands)
