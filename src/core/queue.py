"""
Command Queue Module.

Pending raw command lines waiting to be parsed and run.

Ordering:
- Single enqueues run first-in first-out.
- A batch (e.g. lines read by FILE) runs before everything queued before
  it, keeping the order of the batch itself.
"""

from collections import deque
from typing import Iterable

from loguru import logger

from src.core.errors import LineTooLong, QueueEmpty

queue_log = logger.bind(module="Queue")


class CommandQueue:
    """Deque of command lines; the left end is the next line to run."""

    def __init__(self, max_line_length: int = 1024):
        """
        Initialize queue.

        Args:
            max_line_length: Longest line accepted by enqueue operations
        """
        self.max_line_length = max_line_length
        self._lines: deque[str] = deque()

    def _check_length(self, line: str) -> None:
        if len(line) > self.max_line_length:
            raise LineTooLong(len(line), self.max_line_length)

    def enqueue(self, line: str) -> None:
        """Queue one line behind all lines already queued."""
        self._check_length(line)
        self._lines.append(line)

    def enqueue_batch(self, lines: Iterable[str]) -> None:
        """
        Queue lines ahead of all lines already queued.

        The whole batch is validated before anything is inserted.

        Args:
            lines: Command lines in the order they should run
        """
        batch = list(lines)
        for line in batch:
            self._check_length(line)

        # extendleft reverses its input
        self._lines.extendleft(reversed(batch))
        queue_log.debug(f"Queued batch of {len(batch)} commands ({len(self._lines)} pending)")

    def pop(self) -> str:
        """
        Remove and return the next line to run.

        Raises:
            QueueEmpty: If nothing is queued
        """
        try:
            return self._lines.popleft()
        except IndexError:
            raise QueueEmpty() from None

    def is_empty(self) -> bool:
        return not self._lines

    def clear(self) -> None:
        self._lines.clear()

    def __len__(self) -> int:
        return len(self._lines)
