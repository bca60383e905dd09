"""Partition of the unit interval into one sub-interval per symbol.

The table is built by walking symbols in ascending code point order and
laying their probabilities end to end from 0.0. Encoder and decoder build the
same table independently, so the result must depend only on the probability
contents and never on how the input mapping happened to be ordered.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Mapping, Union

from arithcode.models.probability import ProbabilityModel


@dataclass(frozen=True)
class RangeTable:
    """Immutable symbol -> ``[low, high)`` table in canonical symbol order."""

    entries: tuple[tuple[str, float, float], ...]

    @property
    def symbols(self) -> tuple[str, ...]:
        return tuple(sym for sym, _, _ in self.entries)

    def __getitem__(self, symbol: str) -> tuple[float, float]:
        for sym, low, high in self.entries:
            if sym == symbol:
                return low, high
        raise KeyError(symbol)

    def __contains__(self, symbol: object) -> bool:
        return any(sym == symbol for sym, _, _ in self.entries)

    def __iter__(self) -> Iterator[tuple[str, float, float]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def as_dict(self) -> dict[str, tuple[float, float]]:
        return {sym: (low, high) for sym, low, high in self.entries}


def compute_ranges(
    probabilities: Union[ProbabilityModel, Mapping[str, float]],
) -> RangeTable:
    """Assign each symbol the half-open interval ``[low, low + p)``.

    Symbols are sorted by code point and ``low`` starts at 0.0, advancing by
    each symbol's probability.
    """

    if isinstance(probabilities, ProbabilityModel):
        items = probabilities.as_dict()
    else:
        items = dict(probabilities)

    entries: list[tuple[str, float, float]] = []
    low = 0.0
    for sym in sorted(items):
        prob = items[sym]
        entries.append((sym, low, low + prob))
        low += prob
    return RangeTable(entries=tuple(entries))


__all__ = ["RangeTable", "compute_ranges"]
