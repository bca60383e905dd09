"""Bit-cost heuristics for an encoded value.

``estimate_bit_length`` charges four bits per fractional decimal digit of the
value rendered with 15 fixed digits. It is a display figure and does not
measure the information content of the probability table.
"""

from __future__ import annotations

from arithcode.config import Config


def estimate_bit_length(value: float) -> int:
    """Return ``4 * (number of significant fractional digits)`` of ``value``.

    Example
    -------
    >>> estimate_bit_length(0.3)
    4
    >>> estimate_bit_length(0.25)
    8
    >>> estimate_bit_length(0.0)
    0
    """

    rendered = f"{value:.{Config.MAX_DECIMAL_PRECISION}f}".rstrip("0")
    _, _, fraction = rendered.partition(".")
    if not fraction:
        return 0
    return len(fraction) * Config.BITS_PER_DECIMAL_DIGIT


def compression_ratio(text: str, bit_length: int) -> float:
    """Return original bits (8 per symbol) over ``bit_length``.

    Returns 0.0 for empty ``text`` or a zero ``bit_length``.
    """

    if not text or bit_length == 0:
        return 0.0
    return (len(text) * Config.BITS_PER_CHAR) / bit_length


__all__ = ["estimate_bit_length", "compression_ratio"]
