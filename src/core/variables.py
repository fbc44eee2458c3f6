"""
Variable Store Module.

Case-sensitive user variables referenced from command parameters.
"""

from typing import Iterator

from src.core.errors import UndefinedVariable


class VariableStore:
    """String-to-string mapping with last-write-wins semantics."""

    def __init__(self):
        self._values: dict[str, str] = {}

    def set(self, key: str, value: str) -> None:
        """Insert or overwrite a variable."""
        self._values[key] = value

    def get(self, key: str) -> str:
        """
        Get the value of a variable.

        Args:
            key: Variable name (case sensitive)

        Returns:
            Stored value

        Raises:
            UndefinedVariable: If the variable was never set
        """
        try:
            return self._values[key]
        except KeyError:
            raise UndefinedVariable(key) from None

    def resolve(self, token: str) -> str:
        """Substitute token with its stored value, or return it unchanged."""
        return self._values.get(token, token)

    def enumerate(self) -> Iterator[tuple[str, str]]:
        """Yield (key, value) pairs in insertion order."""
        yield from list(self._values.items())

    def __contains__(self, key: str) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)
