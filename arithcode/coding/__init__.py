"""Interval narrowing, decimal selection and decoding.

Public API:
- ArithmeticCoder
- Interval, EncodedResult
- encode_interval
- find_shortest_in_interval
- estimate_bit_length, compression_ratio
- decode_symbols
"""

from __future__ import annotations

from arithcode.coding.arithmetic import ArithmeticCoder
from arithcode.coding.bitlength import compression_ratio, estimate_bit_length
from arithcode.coding.decoder import decode_symbols
from arithcode.coding.encoder import encode_interval
from arithcode.coding.interval import EncodedResult, Interval
from arithcode.coding.shortest import find_shortest_in_interval

__all__ = [
    "ArithmeticCoder",
    "EncodedResult",
    "Interval",
    "encode_interval",
    "find_shortest_in_interval",
    "estimate_bit_length",
    "compression_ratio",
    "decode_symbols",
]
