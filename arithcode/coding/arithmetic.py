"""Static-probability arithmetic coder.

The coder owns a `ProbabilityModel` and the `RangeTable` derived from it,
both built once at construction. Encoding narrows ``[0, 1)`` symbol by
symbol, picks the shortest decimal inside the final interval and reports its
illustrative bit cost. Decoding walks the same table in reverse.

Arithmetic is plain ``float``: there is no renormalization, so inputs longer
than roughly fifteen significant digits of interval width cannot round-trip.

References
----------
- Witten, Neal, and Cleary (1987): Arithmetic coding for data compression.
"""

from __future__ import annotations

from typing import Mapping, Optional
import logging

from arithcode.coding.bitlength import compression_ratio, estimate_bit_length
from arithcode.coding.decoder import decode_symbols
from arithcode.coding.encoder import encode_interval
from arithcode.coding.interval import EncodedResult, Interval
from arithcode.coding.shortest import find_shortest_in_interval
from arithcode.errors import InvalidInputError
from arithcode.models.probability import ProbabilityModel
from arithcode.models.ranges import RangeTable, compute_ranges


_LOGGER = logging.getLogger(__name__)


class ArithmeticCoder:
    """Encode and decode strings against a fixed symbol distribution.

    Parameters
    ----------
    model:
        Probability table. Prefer the `from_text` and `from_map`
        constructors, which validate their input.

    Notes
    -----
    No state changes after construction, so one instance may serve
    concurrent encode/decode calls.
    """

    def __init__(self, model: ProbabilityModel) -> None:
        self._model: ProbabilityModel = model
        self._ranges: RangeTable = compute_ranges(model)
        _LOGGER.debug("Built range table for %d symbols", len(self._ranges))

    @classmethod
    def from_text(cls, text: str) -> "ArithmeticCoder":
        """Build a coder from the character frequencies of ``text``."""

        return cls(ProbabilityModel.from_text(text))

    @classmethod
    def from_map(cls, probabilities: Optional[Mapping[str, float]]) -> "ArithmeticCoder":
        """Build a coder from an explicit symbol -> probability table."""

        return cls(ProbabilityModel.from_map(probabilities))

    # Read accessors -----------------------------------------------------------
    @property
    def model(self) -> ProbabilityModel:
        return self._model

    @property
    def ranges(self) -> RangeTable:
        return self._ranges

    def get_probabilities(self) -> dict[str, float]:
        """Return a copy of the symbol -> probability table."""

        return self._model.as_dict()

    # Coding -------------------------------------------------------------------
    def encode_interval(self, text: str) -> Interval:
        """Return the final ``[low, high)`` interval for ``text``."""

        return encode_interval(text, self._ranges)

    def encode(self, text: str) -> EncodedResult:
        """Encode ``text`` and return its code value and bit cost.

        Raises
        ------
        InvalidInputError
            If ``text`` is empty.
        UnknownSymbolError
            If ``text`` contains a symbol outside the alphabet.
        """

        if not text:
            raise InvalidInputError("Text to encode must be non-empty.")
        interval = self.encode_interval(text)
        value = find_shortest_in_interval(interval.low, interval.high)
        bit_length = estimate_bit_length(value)
        _LOGGER.debug(
            "Encoded %d symbols into [%r, %r) -> %r (%d bits)",
            len(text),
            interval.low,
            interval.high,
            value,
            bit_length,
        )
        return EncodedResult(value=value, bit_length=bit_length)

    def decode(self, value: float, length: int) -> str:
        """Decode ``length`` symbols from ``value``."""

        text = decode_symbols(value, length, self._ranges)
        _LOGGER.debug("Decoded %d symbols from %r", length, value)
        return text

    def compute_ratio(self, text: str, bit_length: int) -> float:
        """Return the compression ratio of ``text`` against ``bit_length`` bits."""

        return compression_ratio(text, bit_length)


__all__ = ["ArithmeticCoder"]
