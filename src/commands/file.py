"""
File Command Module.

Handles the FILE command - queues the commands listed in a text file.
"""

from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

from src.commands.base import BaseCommand, CommandResult, Parameter
from src.core.errors import FileDecodeError

if TYPE_CHECKING:
    from src.core.context import CommandContext

cmd_log = logger.bind(module="Command")


class FileCommand(BaseCommand):
    """File command - queues commands ahead of anything already pending."""

    name = "FILE"
    parameters = (Parameter("path"),)
    short_description = "Queue commands listed in the provided file."
    long_description = (
        "Add commands listed in the provided file to the front of the command\n"
        "queue. All queued commands will run first before the user is prompted\n"
        "to enter a new manual command. The queue of commands will be cleared\n"
        "if interrupted with the `Ctrl-C` hotkey. The file path provided for\n"
        "this command must be either an absolute file path or relative to the\n"
        "working directory. If the path contains spaces, it should be\n"
        'enclosed in double quotes (e.g. "my file path").'
    )

    def execute(self, params: list[str], context: "CommandContext") -> CommandResult:
        """
        Execute FILE command.

        One line of the file is one command. A trailing carriage return is
        dropped; there is no comment or continuation syntax.

        Args:
            params: [file path]
            context: Command context

        Returns:
            Number of queued commands

        Raises:
            OSError: If the file cannot be opened or read
            FileDecodeError: If the file is not valid UTF-8
            CommandStopped: Interrupted while reading
        """
        path = Path(params[0])
        lines = []
        try:
            with path.open("r", encoding="utf-8", newline="\n") as f:
                for raw in f:
                    context.check_interrupt()
                    line = raw.rstrip("\n").rstrip("\r")
                    cmd_log.info(f"Queueing command: {line}")
                    lines.append(line)
        except UnicodeDecodeError as e:
            raise FileDecodeError(str(path), str(e)) from e

        context.queue.enqueue_batch(lines)

        return CommandResult.ok(
            message=f"Queued {len(lines)} commands from {path}",
            title="file",
            path=str(path),
            count=len(lines),
        )
