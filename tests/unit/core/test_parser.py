"""
Unit tests for src/core/parser.py
"""

import pytest

from src.core.errors import (
    CommandStopped,
    InvalidCommand,
    MissingParameter,
    NameTooLong,
    UnexpectedParameter,
)
from src.core.parser import parse_line, tokenize

# Import fixtures
pytest_plugins = ["tests.fixtures.commands"]


@pytest.fixture
def parse(domain_dispatcher):
    """Parse a line against the domain dispatcher's context."""
    def _parse(line):
        return parse_line(line, domain_dispatcher.context)
    return _parse


# ============================================================
# tokenize tests
# ============================================================


class TestTokenize:
    """Tests for tokenize function."""

    def test_splits_on_whitespace_runs(self):
        tokens = tokenize("SET  foo\tbar")
        assert [t.text for t in tokens] == ["SET", "foo", "bar"]

    def test_keeps_spans(self):
        line = "  GET   foo"
        tokens = tokenize(line)
        assert [line[t.start:t.end] for t in tokens] == ["GET", "foo"]
        assert tokens[0].start == 2

    def test_empty_and_blank(self):
        assert tokenize("") == []
        assert tokenize("   \t ") == []


# ============================================================
# command lookup tests
# ============================================================


class TestCommandLookup:
    """Tests for matching the first token to a command."""

    def test_blank_line_returns_none(self, parse):
        assert parse("") is None
        assert parse("    ") is None

    def test_lookup_is_case_insensitive(self, parse):
        parsed = parse("set foo bar")
        assert parsed.command.name == "SET"
        assert parsed.params == ["foo", "bar"]

    def test_unknown_command(self, parse):
        with pytest.raises(InvalidCommand):
            parse("NOSUCHCOMMAND")

    def test_over_long_name_is_invalid(self, parse):
        """Names over the bound fail instead of being truncated."""
        with pytest.raises(InvalidCommand) as exc_info:
            parse("VERSION" + "X" * 40)
        assert isinstance(exc_info.value, NameTooLong)


# ============================================================
# parameter binding tests
# ============================================================


class TestParameterBinding:
    """Tests for binding tokens to declared parameters."""

    def test_missing_required_parameter(self, parse):
        with pytest.raises(MissingParameter) as exc_info:
            parse("SET onlyone")
        assert exc_info.value.parameter == "value"

    def test_unexpected_parameter(self, parse):
        with pytest.raises(UnexpectedParameter) as exc_info:
            parse("VERSION extra")
        assert exc_info.value.token == "extra"

    def test_optional_parameter_binds_empty_string(self, parse):
        parsed = parse("MOVE X 10")
        assert parsed.params == ["X", "10", ""]

    def test_optional_parameter_supplied(self, parse):
        parsed = parse("MOVE X 10 fast")
        assert parsed.params == ["X", "10", "fast"]

    def test_resolves_variables(self, parse, domain_dispatcher):
        domain_dispatcher.context.variables.set("dist", "25")
        parsed = parse("MOVE X dist")
        assert parsed.params == ["X", "25", ""]

    def test_unresolved_parameter_stays_literal(self, parse, domain_dispatcher):
        """SET's variable name is never substituted."""
        domain_dispatcher.context.variables.set("foo", "other")
        parsed = parse("SET foo 1")
        assert parsed.params == ["foo", "1"]

    def test_resolution_is_case_sensitive(self, parse, domain_dispatcher):
        domain_dispatcher.context.variables.set("dist", "25")
        parsed = parse("MOVE X DIST")
        assert parsed.params == ["X", "DIST", ""]


# ============================================================
# quote span tests
# ============================================================


class TestQuoteSpan:
    """Tests for quoted parameter values."""

    def test_quoted_value_keeps_inner_space(self, parse):
        parsed = parse('SET foo "bar baz"')
        assert parsed.params == ["foo", "bar baz"]

    def test_quoted_value_keeps_original_spacing(self, parse):
        parsed = parse('SET foo "bar   \t baz  qux"')
        assert parsed.params == ["foo", "bar   \t baz  qux"]

    def test_single_token_quote(self, parse):
        parsed = parse('SET foo "bar"')
        assert parsed.params == ["foo", "bar"]

    def test_quote_then_more_parameters(self, parse):
        parsed = parse('MOVE "axis one" 10 "very fast"')
        assert parsed.params == ["axis one", "10", "very fast"]

    def test_tokens_after_quote_are_unexpected(self, parse):
        with pytest.raises(UnexpectedParameter):
            parse('SET foo "bar baz" extra')

    def test_unterminated_quote_takes_rest_of_line(self, parse):
        parsed = parse('SET foo "bar baz')
        assert parsed.params == ["foo", "bar baz"]

    def test_non_quotable_parameter_keeps_quote(self, parse):
        parsed = parse('RAW "abc')
        assert parsed.params == ['"abc']

    def test_resolved_value_starting_with_quote(self, parse, domain_dispatcher):
        """Quote handling applies to the value after resolution."""
        domain_dispatcher.context.variables.set("name", '"spindle')
        parsed = parse('MOVE name motor" 5')
        assert parsed.params == ["spindle motor", "5", ""]

    def test_stop_during_quote_span(self, parse, domain_dispatcher):
        """A stop while scanning a quote aborts the line and clears the queue."""
        context = domain_dispatcher.context
        context.queue.enqueue("VERSION")
        context.stop.set()

        with pytest.raises(CommandStopped):
            parse('SET foo "bar baz"')

        assert context.queue.is_empty()
        assert context.stop.is_set() is False

    def test_stop_not_polled_without_quotes(self, parse, domain_dispatcher):
        domain_dispatcher.context.stop.set()
        parsed = parse("SET foo bar")
        assert parsed.params == ["foo", "bar"]
