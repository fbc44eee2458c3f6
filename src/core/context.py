"""
Command Context Module.

Owns the state shared by the dispatcher and every command handler.
"""

import sys
from dataclasses import dataclass, field
from typing import Callable

from loguru import logger

from config.settings import get_settings
from src.commands.registry import CommandRegistry
from src.core.cancellation import CancellationFlag
from src.core.errors import CommandStopped
from src.core.queue import CommandQueue
from src.core.variables import VariableStore

context_log = logger.bind(module="Context")


def _default_registry() -> CommandRegistry:
    return CommandRegistry(max_name_length=get_settings().commands.max_name_length)


def _default_queue() -> CommandQueue:
    return CommandQueue(max_line_length=get_settings().commands.max_line_length)


@dataclass
class CommandContext:
    """
    Registry, variables, queue and stop flag for one CLI session.

    Attributes:
        registry: Registered commands
        variables: User variables
        queue: Pending command lines
        stop: Cancellation flag set by the interrupt handler
        version: Version reported by VERSION
        exit: Called with an exit code when EXIT runs
    """
    registry: CommandRegistry = field(default_factory=_default_registry)
    variables: VariableStore = field(default_factory=VariableStore)
    queue: CommandQueue = field(default_factory=_default_queue)
    stop: CancellationFlag = field(default_factory=CancellationFlag)
    version: str = field(default_factory=lambda: get_settings().version)
    exit: Callable[[int], None] = sys.exit

    def check_interrupt(self) -> None:
        """
        Poll the stop flag.

        When set, the flag is reset and all pending commands are discarded.

        Raises:
            CommandStopped: If a stop was requested
        """
        if self.stop.consume():
            dropped = len(self.queue)
            self.queue.clear()
            context_log.warning(f"Command stopped, discarded {dropped} queued commands")
            raise CommandStopped()
