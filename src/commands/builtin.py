"""
Built-in Commands Module.

Commands every CLI session starts with, in help listing order.
"""

from src.commands.base import BaseCommand
from src.commands.exit import ExitCommand
from src.commands.file import FileCommand
from src.commands.help import HelpCommand
from src.commands.registry import CommandRegistry
from src.commands.variables import GetCommand, SetCommand, VariablesCommand
from src.commands.version import VersionCommand

BUILTIN_COMMANDS: tuple[type[BaseCommand], ...] = (
    HelpCommand,
    VersionCommand,
    SetCommand,
    GetCommand,
    VariablesCommand,
    FileCommand,
    ExitCommand,
)


def register_builtin_commands(registry: CommandRegistry) -> None:
    """Register an instance of every built-in command."""
    for command_class in BUILTIN_COMMANDS:
        registry.register(command_class())
