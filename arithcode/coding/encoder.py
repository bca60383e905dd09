"""Interval narrowing over a symbol sequence.

Each symbol rescales its ``[sym_low, sym_high)`` range into the current
interval. The width shrinks multiplicatively, so long inputs eventually
underflow ``float`` precision and collapse the interval; there is no
renormalization.
"""

from __future__ import annotations

from arithcode.coding.interval import Interval
from arithcode.errors import UnknownSymbolError
from arithcode.models.ranges import RangeTable


def encode_interval(text: str, ranges: RangeTable) -> Interval:
    """Return the interval identifying ``text`` under ``ranges``.

    Raises
    ------
    UnknownSymbolError
        If ``text`` contains a symbol absent from ``ranges``.
    """

    lookup = ranges.as_dict()
    low = 0.0
    high = 1.0
    for symbol in text:
        bounds = lookup.get(symbol)
        if bounds is None:
            raise UnknownSymbolError(symbol)
        sym_low, sym_high = bounds
        width = high - low
        low, high = low + width * sym_low, low + width * sym_high
    return Interval(low=low, high=high)


__all__ = ["encode_interval"]
