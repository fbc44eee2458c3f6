"""
Shared pytest fixtures for all tests.
"""

import pytest

from src.core.context import CommandContext
from src.core.dispatcher import Dispatcher


# ============================================================
# Context Fixtures
# ============================================================


@pytest.fixture
def exit_calls() -> list[int]:
    """Exit codes passed to the context's exit hook."""
    return []


@pytest.fixture
def context(exit_calls) -> CommandContext:
    """Isolated command context that records EXIT instead of terminating."""
    return CommandContext(exit=exit_calls.append, version="0.0.5")


@pytest.fixture
def dispatcher(context) -> Dispatcher:
    """Dispatcher with the built-in commands registered."""
    return Dispatcher(context)


# ============================================================
# Variable Fixtures
# ============================================================


@pytest.fixture
def sample_variables() -> dict[str, str]:
    """Variables used to populate a context."""
    return {
        "speed": "100",
        "axis": "X",
        "Axis": "Y",
        "label": "home position",
    }


@pytest.fixture
def populated_context(context, sample_variables) -> CommandContext:
    """Context holding sample_variables."""
    for key, value in sample_variables.items():
        context.variables.set(key, value)
    return context
