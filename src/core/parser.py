"""
Command Line Parser Module.

Splits a raw command line into tokens and binds them to the declared
parameters of the matching command.

Grammar:
- Tokens are runs of non-whitespace characters.
- The first token names the command (case-insensitive).
- Each declared parameter takes the next token. A quotable parameter whose
  value starts with '"' extends to the token ending with '"', keeping the
  original spacing between tokens and dropping the enclosing quotes.
"""

import re
from dataclasses import dataclass
from typing import NamedTuple

from src.commands.base import BaseCommand
from src.core.context import CommandContext
from src.core.errors import MissingParameter, UnexpectedParameter

TOKEN_PATTERN = re.compile(r"\S+")

QUOTE = '"'


class Token(NamedTuple):
    """Token text with its span in the original line."""

    text: str
    start: int
    end: int


@dataclass
class ParsedCommand:
    """Command matched from a line together with its bound parameters."""

    command: BaseCommand
    params: list[str]


def tokenize(line: str) -> list[Token]:
    """
    Split a line on runs of whitespace.

    Args:
        line: Raw command line

    Returns:
        Tokens in order of appearance
    """
    return [Token(m.group(), m.start(), m.end()) for m in TOKEN_PATTERN.finditer(line)]


def _is_closing(text: str) -> bool:
    return text.endswith(QUOTE)


def _consume_quoted(
    line: str,
    tokens: list[Token],
    index: int,
    value: str,
    context: CommandContext,
) -> tuple[str, int]:
    """
    Consume a quote span starting at tokens[index].

    Args:
        line: Original command line
        tokens: All tokens of the line
        index: Index of the token holding the opening quote
        value: Token text after variable resolution
        context: Context polled for cancellation on every consumed token

    Returns:
        Tuple of (unquoted value, index of the next unconsumed token)
    """
    context.check_interrupt()

    # Opening token also closes the span, e.g. "value"
    if len(value) > 1 and _is_closing(value):
        return value[1:-1], index + 1

    head = value[1:]
    span_start = tokens[index].end
    for pos in range(index + 1, len(tokens)):
        context.check_interrupt()
        token = tokens[pos]
        if _is_closing(token.text):
            return head + line[span_start:token.end - 1], pos + 1

    # Unterminated span takes the rest of the line
    return head + line[span_start:].rstrip(), len(tokens)


def parse_line(line: str, context: CommandContext) -> ParsedCommand | None:
    """
    Match a line to a registered command and bind its parameters.

    Args:
        line: Raw command line
        context: Context providing the registry, variables and stop flag

    Returns:
        ParsedCommand, or None if the line holds no tokens

    Raises:
        InvalidCommand: Unknown or over-long command name
        MissingParameter: Required parameter absent
        UnexpectedParameter: Tokens left after binding all parameters
        CommandStopped: Stop requested while scanning a quote span
    """
    tokens = tokenize(line)
    if not tokens:
        return None

    command = context.registry.lookup(tokens[0].text)

    params: list[str] = []
    index = 1
    for param in command.parameters:
        if index >= len(tokens):
            if param.optional:
                params.append("")
                continue
            raise MissingParameter(command.name, param.name)

        value = tokens[index].text
        if param.resolve:
            value = context.variables.resolve(value)

        if param.quotable and value.startswith(QUOTE):
            value, index = _consume_quoted(line, tokens, index, value, context)
        else:
            index += 1
        params.append(value)

    if index < len(tokens):
        raise UnexpectedParameter(command.name, tokens[index].text)

    return ParsedCommand(command=command, params=params)
