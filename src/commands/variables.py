"""
Variable Commands Module.

Handles the SET, GET and VARIABLES commands.
"""

from typing import TYPE_CHECKING

from loguru import logger

from src.commands.base import BaseCommand, CommandResult, Parameter

if TYPE_CHECKING:
    from src.core.context import CommandContext

cmd_log = logger.bind(module="Command")


class SetCommand(BaseCommand):
    """Set command - stores a variable."""

    name = "SET"
    parameters = (
        Parameter("variable", resolve=False),
        Parameter("value"),
    )
    short_description = "Set a variable equal to a value."
    long_description = (
        "Create a variable name that resolves to the provided value in all\n"
        "future commands. Variable names are case sensitive."
    )

    def execute(self, params: list[str], context: "CommandContext") -> CommandResult:
        key, value = params
        context.variables.set(key, value)
        cmd_log.debug(f"Set variable {key}")
        return CommandResult.ok(title="set", variable=key, value=value)


class GetCommand(BaseCommand):
    """Get command - shows the value of one variable."""

    name = "GET"
    parameters = (Parameter("variable", resolve=False),)
    short_description = "Retrieve the value of a variable."
    long_description = (
        "Retrieve the resolved value of a previously created variable name.\n"
        "Variable names are case sensitive."
    )

    def execute(self, params: list[str], context: "CommandContext") -> CommandResult:
        """
        Execute GET command.

        Raises:
            UndefinedVariable: If the variable was never set
        """
        key = params[0]
        value = context.variables.get(key)
        message = f'Variable "{key}": {value}'
        cmd_log.info(message)
        return CommandResult.ok(message=message, title="get", variable=key, value=value)


class VariablesCommand(BaseCommand):
    """Variables command - lists every stored variable."""

    name = "VARIABLES"
    short_description = "Display all variables with their values."
    long_description = "Print all currently set variable names along with their values."

    def execute(self, params: list[str], context: "CommandContext") -> CommandResult:
        """
        Execute VARIABLES command.

        Raises:
            CommandStopped: Interrupted while listing
        """
        lines = []
        variables = {}
        for key, value in context.variables.enumerate():
            context.check_interrupt()
            line = f"\t{key}: {value}"
            cmd_log.info(line)
            lines.append(line)
            variables[key] = value

        return CommandResult.ok(
            message="\n".join(lines),
            title="variables",
            variables=variables,
        )
