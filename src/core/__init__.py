"""
Command Core Module.

Queue, variable store, cancellation flag and error types shared by the
parser and the commands. The context and dispatcher are imported from
their own modules.
"""

from src.core.cancellation import CancellationFlag
from src.core.errors import (
    CommandError,
    CommandStopped,
    DuplicateCommand,
    FileDecodeError,
    InvalidCommand,
    LineTooLong,
    MissingParameter,
    NameTooLong,
    QueueEmpty,
    UndefinedVariable,
    UnexpectedParameter,
)
from src.core.queue import CommandQueue
from src.core.variables import VariableStore

__all__ = [
    "CancellationFlag",
    "CommandQueue",
    "VariableStore",
    # Errors
    "CommandError",
    "CommandStopped",
    "DuplicateCommand",
    "InvalidCommand",
    "LineTooLong",
    "MissingParameter",
    "NameTooLong",
    "QueueEmpty",
    "UndefinedVariable",
    "UnexpectedParameter",
    "FileDecodeError",
]
