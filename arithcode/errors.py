"""Exception types raised by the coder and the persisted-state layer.

All errors derive from `CodingError`, itself a `ValueError`, so callers that
already guard against bad input with ``except ValueError`` keep working.
"""

from __future__ import annotations


class CodingError(ValueError):
    """Base class for every error raised by arithcode."""


class InvalidInputError(CodingError):
    """Empty training text, malformed probability table or bad decode length."""


class UnknownSymbolError(CodingError):
    """The encoder met a symbol that is not part of the trained alphabet."""

    def __init__(self, symbol: str) -> None:
        super().__init__(f"Symbol {symbol!r} is not in the alphabet")
        self.symbol = symbol


class NoMatchingSymbolError(CodingError):
    """The decoder's running value fell outside every symbol range."""

    def __init__(self, value: float, position: int) -> None:
        super().__init__(
            f"No symbol range contains value {value!r} at position {position}"
        )
        self.value = value
        self.position = position


class MalformedPersistedStateError(CodingError):
    """The three-line persisted state could not be parsed."""
