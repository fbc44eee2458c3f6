"""
Command Errors Module.

Exception types raised while queueing, parsing and running commands.
"""


class CommandError(Exception):
    """Base exception for all command core errors."""

    pass


class InvalidCommand(CommandError):
    """Command name is unknown."""

    def __init__(self, name: str, message: str | None = None):
        self.name = name
        super().__init__(message or f"Invalid command: {name}")


class NameTooLong(InvalidCommand):
    """Command name exceeds the accepted length."""

    def __init__(self, name: str, limit: int):
        self.limit = limit
        super().__init__(name, f"Command name longer than {limit} characters: {name}")


class DuplicateCommand(CommandError):
    """A command with the same canonical name is already registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Command already registered: {name}")


class MissingParameter(CommandError):
    """A required parameter was not supplied."""

    def __init__(self, command: str, parameter: str):
        self.command = command
        self.parameter = parameter
        super().__init__(f"Missing parameter ({parameter}) for {command}")


class UnexpectedParameter(CommandError):
    """Tokens remain after all declared parameters were bound."""

    def __init__(self, command: str, token: str):
        self.command = command
        self.token = token
        super().__init__(f"Unexpected parameter for {command}: {token}")


class UndefinedVariable(CommandError):
    """Variable lookup for a name that was never set."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Undefined variable: {key}")


class CommandStopped(CommandError):
    """Cancellation was observed while a command was running."""

    def __init__(self):
        super().__init__("Command stopped")


class LineTooLong(CommandError):
    """Command line exceeds the queue line bound."""

    def __init__(self, length: int, limit: int):
        self.length = length
        self.limit = limit
        super().__init__(f"Command line of {length} characters exceeds {limit}")


class QueueEmpty(CommandError):
    """Pop from an empty command queue."""

    def __init__(self):
        super().__init__("Command queue is empty")


class FileDecodeError(CommandError):
    """Command file is not valid UTF-8 text."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Cannot decode command file {path}: {reason}")
