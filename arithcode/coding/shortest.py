"""Shortest fixed-precision decimal inside an interval.

The search escalates decimal precision from one digit up to
``Config.MAX_DECIMAL_PRECISION`` and, at each precision, scans the integer
grid between ``floor(low * 10**p)`` and ``ceil(high * 10**p)`` in ascending
order. The first grid value inside ``[low, high]`` wins, so ties go to the
lowest precision and then to the smallest candidate.

The upper bound is inclusive here while symbol ranges are half-open, so the
returned value can equal ``high``. The midpoint fallback used when no
precision succeeds can also round to ``high``.
"""

from __future__ import annotations

import logging
import math

from arithcode.config import Config


_LOGGER = logging.getLogger(__name__)


def find_shortest_in_interval(
    low: float,
    high: float,
    max_precision: int = Config.MAX_DECIMAL_PRECISION,
) -> float:
    """Return the decimal with the fewest fractional digits in ``[low, high]``.

    Parameters
    ----------
    low, high:
        Interval bounds, usually the encoder's final interval.
    max_precision:
        Largest number of fractional digits tried before falling back to the
        midpoint (default: 15).
    """

    for precision in range(1, max_precision + 1):
        factor = 10.0 ** precision
        lo = math.floor(low * factor)
        hi = math.ceil(high * factor)
        for num in range(lo, hi + 1):
            value = num / factor
            if low <= value <= high:
                return value

    midpoint = (low + high) / 2
    _LOGGER.warning(
        "No decimal with at most %s digits in [%r, %r]; using midpoint %r",
        max_precision,
        low,
        high,
        midpoint,
    )
    return midpoint


__all__ = ["find_shortest_in_interval"]
