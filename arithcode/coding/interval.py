"""Value objects passed between the encoder and its callers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Interval:
    """Accumulated code space ``[low, high)`` after consuming some input."""

    low: float = 0.0
    high: float = 1.0

    @property
    def width(self) -> float:
        return self.high - self.low


@dataclass(frozen=True)
class EncodedResult:
    """Chosen code value and its illustrative bit cost."""

    value: float
    bit_length: int
