"""
Exit Command Module.

Handles the EXIT command - terminates the CLI.
"""

from typing import TYPE_CHECKING

from loguru import logger

from config.settings import get_settings
from src.commands.base import BaseCommand, CommandResult

if TYPE_CHECKING:
    from src.core.context import CommandContext

cmd_log = logger.bind(module="Command")


class ExitCommand(BaseCommand):
    """Exit command - requests process termination."""

    name = "EXIT"
    short_description = "Exit the MCS command line utility."
    long_description = (
        "Gracefully terminate the PMF Motion Control Software command line\n"
        "utility, cleaning up resources and closing connections."
    )

    def execute(self, params: list[str], context: "CommandContext") -> CommandResult:
        exit_code = get_settings().shell.exit_code
        cmd_log.info("Exiting")
        context.exit(exit_code)
        return CommandResult.ok(title="exit", exit_code=exit_code)
