"""
Base Command Module.

Defines the command descriptor interface and result structure.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from src.core.context import CommandContext


@dataclass(frozen=True)
class Parameter:
    """
    Declared parameter of a command.

    Attributes:
        name: Display name shown in help output
        optional: Bind an empty string when the token is absent
        quotable: A value starting with a double quote spans until the closing quote
        resolve: Substitute the token with a stored variable of the same name
    """
    name: str
    optional: bool = False
    quotable: bool = True
    resolve: bool = True

    @property
    def usage(self) -> str:
        """Parameter name wrapped in () when required or [] when optional."""
        if self.optional:
            return f"[{self.name}]"
        return f"({self.name})"


@dataclass
class CommandResult:
    """
    Structured result from command execution.

    Attributes:
        success: Whether the command executed successfully
        message: Main message to display
        title: Optional title for the message
        data: Additional structured data for formatting
    """
    success: bool = True
    message: str = ""
    title: Optional[str] = None
    data: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls, message: str = "", title: Optional[str] = None, **data) -> "CommandResult":
        """Create a successful result."""
        return cls(success=True, message=message, title=title, data=data)


class BaseCommand(ABC):
    """
    Base class for all commands.

    A command declares its name and parameter shape as class attributes.
    The dispatcher binds parameters from the input line and calls execute
    with one string per declared parameter.
    """

    # Command metadata
    name: str = ""
    parameters: tuple[Parameter, ...] = ()
    short_description: str = ""
    long_description: str = ""

    @property
    def usage(self) -> str:
        """Command name followed by its parameter list, e.g. SET (variable) (value)."""
        return " ".join([self.name, *(param.usage for param in self.parameters)])

    @abstractmethod
    def execute(self, params: list[str], context: "CommandContext") -> CommandResult:
        """
        Execute the command.

        Args:
            params: Bound parameter values, one per declared parameter
            context: Shared command context (registry, variables, queue, stop flag)

        Returns:
            CommandResult with structured response data

        Raises:
            CommandError: On command specific failures
        """
        pass
