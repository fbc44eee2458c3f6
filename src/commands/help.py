"""
Help Command Module.

Handles the HELP command - describes one command or lists all of them.
"""

from typing import TYPE_CHECKING

from loguru import logger

from src.commands.base import BaseCommand, CommandResult, Parameter

if TYPE_CHECKING:
    from src.core.context import CommandContext

cmd_log = logger.bind(module="Command")

SEPARATOR = "=" * 72


def format_detail(command: BaseCommand) -> str:
    """Usage line framed above the long description."""
    return f"{command.usage}:\n{SEPARATOR}\n{command.long_description}\n{SEPARATOR}"


def format_summary(command: BaseCommand) -> str:
    """Usage line followed by the indented short description."""
    return f"{command.usage}:\n\t{command.short_description}"


class HelpCommand(BaseCommand):
    """Help command - shows command usage and descriptions."""

    name = "HELP"
    parameters = (Parameter("command", optional=True, resolve=False),)
    short_description = "Display detailed information about a command."
    long_description = (
        "Print a detailed description of a command's purpose, use, and other\n"
        "such aspects of consideration. A valid command name must be provided.\n"
        "If no command is provided, a list of all commands will be shown."
    )

    def execute(self, params: list[str], context: "CommandContext") -> CommandResult:
        """
        Execute HELP command.

        Args:
            params: [command name or ""]
            context: Command context

        Returns:
            Detail of one command, or the summary of every command

        Raises:
            InvalidCommand: Unknown command name
            CommandStopped: Interrupted while listing
        """
        if params[0]:
            command = context.registry.lookup(params[0])
            detail = format_detail(command)
            cmd_log.info(f"\n\n{detail}\n")
            return CommandResult.ok(message=detail, title="help_detail", command=command.name)

        summaries = []
        for command in context.registry.enumerate():
            context.check_interrupt()
            summary = format_summary(command)
            cmd_log.info(summary)
            summaries.append(summary)

        return CommandResult.ok(
            message="\n".join(summaries),
            title="help_list",
            commands=[command.name for command in context.registry.enumerate()],
        )
