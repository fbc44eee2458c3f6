"""
Interactive Shell Module.

Read loop feeding typed lines into the command queue and running queued
commands one at a time.
"""

import signal
from typing import Callable, Optional

from loguru import logger

from config.settings import get_settings
from src.core.dispatcher import Dispatcher
from src.core.errors import CommandError, CommandStopped

shell_log = logger.bind(module="Shell")


class Shell:
    """Drives a Dispatcher from user input."""

    def __init__(
        self,
        dispatcher: Optional[Dispatcher] = None,
        input_fn: Callable[[str], str] = input,
        prompt: Optional[str] = None,
    ):
        """
        Initialize shell.

        Args:
            dispatcher: Dispatcher to drive (created with built-ins if not provided)
            input_fn: Reads one line, raising EOFError when input ends
            prompt: Prompt passed to input_fn
        """
        self.dispatcher = dispatcher or Dispatcher()
        self._input = input_fn
        self.prompt = prompt if prompt is not None else get_settings().shell.prompt

    def install_interrupt_handler(self) -> None:
        """Route Ctrl-C to the context's stop flag."""
        stop = self.dispatcher.context.stop

        def _on_interrupt(signum, frame):
            stop.set()

        signal.signal(signal.SIGINT, _on_interrupt)

    def step(self) -> bool:
        """
        Run one queued command, or read one line when the queue is empty.

        Returns:
            False when input is exhausted
        """
        if self.dispatcher.is_empty():
            try:
                line = self._input(self.prompt)
            except EOFError:
                return False
            # A stop requested while idle must not cancel the next command
            self.dispatcher.context.stop.reset()
            try:
                self.dispatcher.enqueue(line)
            except CommandError as e:
                shell_log.error(str(e))
            return True

        try:
            # Driver loop polls too, so a stop between queued commands drops the rest
            self.dispatcher.context.check_interrupt()
            self.dispatcher.pop_and_run()
        except CommandStopped as e:
            shell_log.warning(str(e))
        except CommandError as e:
            shell_log.error(str(e))
        except OSError as e:
            shell_log.error(f"{type(e).__name__}: {e}")
        return True

    def run(self) -> None:
        """Loop until input ends or EXIT terminates the process."""
        shell_log.info("MCS CLI ready, type HELP for a list of commands")
        while self.step():
            pass
        shell_log.info("Input closed, shutting down")
