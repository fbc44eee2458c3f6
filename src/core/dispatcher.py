"""
Command Dispatcher Module.

Pops queued command lines, parses them and runs the matching handler.
"""

from typing import Iterable, Optional

from loguru import logger

from src.commands.base import BaseCommand, CommandResult
from src.commands.builtin import register_builtin_commands
from src.core.context import CommandContext
from src.core.parser import parse_line

dispatch_log = logger.bind(module="Dispatcher")


class Dispatcher:
    """
    Entry point used by the read loop.

    All state lives in the CommandContext; the dispatcher only sequences
    queue access, parsing and handler calls.
    """

    def __init__(self, context: Optional[CommandContext] = None, builtins: bool = True):
        """
        Initialize dispatcher.

        Args:
            context: Shared context (a fresh one is created if not provided)
            builtins: Register HELP, VERSION, SET, GET, VARIABLES, FILE and EXIT
        """
        self.context = context or CommandContext()
        if builtins:
            register_builtin_commands(self.context.registry)

    def register(self, command: BaseCommand) -> None:
        """Register a domain command."""
        self.context.registry.register(command)

    def enqueue(self, line: str) -> None:
        self.context.queue.enqueue(line)

    def enqueue_batch(self, lines: Iterable[str]) -> None:
        self.context.queue.enqueue_batch(lines)

    def is_empty(self) -> bool:
        return self.context.queue.is_empty()

    def clear(self) -> None:
        self.context.queue.clear()

    def run(self, line: str) -> CommandResult:
        """
        Parse and run one command line.

        Args:
            line: Raw command line

        Returns:
            Handler result (an empty successful result for blank lines)

        Raises:
            CommandError: Parse, binding or handler failure
        """
        parsed = parse_line(line, self.context)
        if parsed is None:
            return CommandResult.ok()

        return parsed.command.execute(parsed.params, self.context)

    def pop_and_run(self) -> CommandResult:
        """
        Pop the next queued line and run it.

        Raises:
            QueueEmpty: If nothing is queued
            CommandError: Parse, binding or handler failure
        """
        line = self.context.queue.pop()
        dispatch_log.info(f"Running command: {line}")
        return self.run(line)
