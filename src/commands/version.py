"""
Version Command Module.

Handles the VERSION command - shows the running CLI version.
"""

from typing import TYPE_CHECKING

from loguru import logger

from src.commands.base import BaseCommand, CommandResult

if TYPE_CHECKING:
    from src.core.context import CommandContext

cmd_log = logger.bind(module="Command")


class VersionCommand(BaseCommand):
    """Version command - shows semantic version."""

    name = "VERSION"
    short_description = "Display the version of the MCS CLI."
    long_description = (
        "Print the currently running version of the Motion Control Software\n"
        "command line utility in Semantic Version format."
    )

    def execute(self, params: list[str], context: "CommandContext") -> CommandResult:
        cmd_log.info(f"CLI Version: {context.version}")
        return CommandResult.ok(
            message=f"CLI Version: {context.version}",
            title="version",
            version=context.version,
        )
