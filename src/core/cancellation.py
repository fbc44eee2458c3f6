"""
Cancellation Flag Module.

Process-wide stop request, written from a signal handler and polled by
long-running command loops.
"""

import threading


class CancellationFlag:
    """Thread-safe boolean flag backed by threading.Event."""

    def __init__(self):
        self._event = threading.Event()

    def set(self) -> None:
        """Request the running command to stop."""
        self._event.set()

    def is_set(self) -> bool:
        return self._event.is_set()

    def reset(self) -> None:
        self._event.clear()

    def consume(self) -> bool:
        """
        Read and reset the flag.

        Returns:
            True if a stop was requested since the last reset
        """
        if not self._event.is_set():
            return False
        self._event.clear()
        return True
