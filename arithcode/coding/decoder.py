"""Inverse of interval narrowing.

The decoder locates the symbol whose range contains the running value,
emits it, and rescales the value into that range. It relies on the caller for
the sequence length and cannot detect truncated or corrupted input.
"""

from __future__ import annotations

from arithcode.errors import InvalidInputError, NoMatchingSymbolError
from arithcode.models.ranges import RangeTable


def decode_symbols(value: float, length: int, ranges: RangeTable) -> str:
    """Return exactly ``length`` symbols decoded from ``value``.

    Raises
    ------
    InvalidInputError
        If ``length`` is not positive.
    NoMatchingSymbolError
        If the running value falls outside every ``[low, high)`` range, for
        example after precision drift or when ``value`` equals 1.0.
    """

    if length <= 0:
        raise InvalidInputError(f"Decode length must be positive, got {length}")

    out: list[str] = []
    current = value
    for position in range(length):
        for symbol, low, high in ranges:
            if low <= current < high:
                out.append(symbol)
                current = (current - low) / (high - low)
                break
        else:
            raise NoMatchingSymbolError(current, position)
    return "".join(out)


__all__ = ["decode_symbols"]
