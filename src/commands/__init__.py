"""
Commands Module.

Command descriptors, the command registry and the built-in commands.
"""

from src.commands.base import BaseCommand, CommandResult, Parameter
from src.commands.builtin import BUILTIN_COMMANDS, register_builtin_commands
from src.commands.registry import CommandRegistry, canonical_name

__all__ = [
    "BaseCommand",
    "CommandResult",
    "Parameter",
    "CommandRegistry",
    "canonical_name",
    "BUILTIN_COMMANDS",
    "register_builtin_commands",
]
