"""Static symbol distribution used to drive the arithmetic coder.

A `ProbabilityModel` is built exactly once, either from training text
(empirical character frequencies) or from an externally supplied table, and
is immutable afterwards.

Example
-------
>>> from arithcode.models.probability import ProbabilityModel
>>> model = ProbabilityModel.from_text("AAB")
>>> model.symbols
('A', 'B')
>>> round(model["A"], 3)
0.667
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterator, Mapping, Optional
import math

import numpy as np

from arithcode.config import Config
from arithcode.errors import InvalidInputError


@dataclass(frozen=True)
class ProbabilityModel:
    """Immutable symbol -> probability table.

    Parameters
    ----------
    entries:
        ``(symbol, probability)`` pairs with unique single-character symbols
        in ascending code point order. `from_text` and `from_map` build
        them for you.

    Notes
    -----
    Every probability lies in (0, 1] and the values sum to 1.0 within
    ``Config.PROBABILITY_TOLERANCE``. Construction raises
    `InvalidInputError` otherwise, whichever constructor is used.
    """

    entries: tuple[tuple[str, float], ...]

    def __post_init__(self) -> None:
        if not self.entries:
            raise InvalidInputError("Probability table must be non-empty.")
        previous: Optional[str] = None
        for sym, prob in self.entries:
            if not isinstance(sym, str) or len(sym) != 1:
                raise InvalidInputError(
                    f"Probability table keys must be single characters, got {sym!r}"
                )
            if previous is not None and sym <= previous:
                raise InvalidInputError(
                    f"Entries must be unique and in code point order, got {sym!r} after {previous!r}"
                )
            if not (0.0 < prob <= 1.0):
                raise InvalidInputError(
                    f"Probability of {sym!r} must be in (0, 1], got {prob!r}"
                )
            previous = sym

        total = math.fsum(p for _, p in self.entries)
        if abs(total - 1.0) > Config.PROBABILITY_TOLERANCE:
            raise InvalidInputError(
                f"Probabilities must sum to 1.0 (got {total:.9f})"
            )

    # Construction -------------------------------------------------------------
    @classmethod
    def from_text(cls, text: str) -> "ProbabilityModel":
        """Return empirical character frequencies of ``text``.

        Raises
        ------
        InvalidInputError
            If ``text`` is empty.
        """

        if not text:
            raise InvalidInputError("Training text must be non-empty.")
        counts = Counter(text)
        total = len(text)
        entries = tuple((sym, counts[sym] / total) for sym in sorted(counts))
        return cls(entries=entries)

    @classmethod
    def from_map(cls, mapping: Optional[Mapping[str, float]]) -> "ProbabilityModel":
        """Validate ``mapping`` and return a model holding a copy of it.

        Raises
        ------
        InvalidInputError
            If the mapping is missing or empty, a key is not a single
            character, a probability is outside (0, 1], or the values do not
            sum to 1.0 within tolerance.
        """

        if not mapping:
            raise InvalidInputError("Probability table must be non-empty.")
        for sym in mapping:
            if not isinstance(sym, str):
                raise InvalidInputError(
                    f"Probability table keys must be single characters, got {sym!r}"
                )
        return cls(entries=tuple((sym, float(mapping[sym])) for sym in sorted(mapping)))

    # Read accessors -----------------------------------------------------------
    @property
    def symbols(self) -> tuple[str, ...]:
        """Alphabet in canonical (code point) order."""

        return tuple(sym for sym, _ in self.entries)

    def as_dict(self) -> dict[str, float]:
        """Return a fresh ``dict`` copy of the table."""

        return dict(self.entries)

    def __getitem__(self, symbol: str) -> float:
        for sym, prob in self.entries:
            if sym == symbol:
                return prob
        raise KeyError(symbol)

    def __contains__(self, symbol: object) -> bool:
        return any(sym == symbol for sym, _ in self.entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.symbols)

    def __len__(self) -> int:
        return len(self.entries)

    # Diagnostics --------------------------------------------------------------
    def entropy(self) -> float:
        """Return the Shannon entropy of the distribution in bits/symbol."""

        probs = np.array([p for _, p in self.entries], dtype=np.float64)
        return float(-np.sum(probs * np.log2(probs)))


__all__ = ["ProbabilityModel"]
