"""Centralized configuration for the coder and its command-line layer.

Defines immutable defaults for decimal precision, probability tolerance,
bit-cost heuristics and the default file locations used by the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class Config:
    """Immutable configuration defaults for the project."""

    # Random seed for reproducible test sweeps
    RANDOM_SEED: int = 42

    # Interval representation search
    MAX_DECIMAL_PRECISION: int = 15

    # Allowed deviation of a probability table's sum from 1.0
    PROBABILITY_TOLERANCE: float = 1e-6

    # Bit-cost heuristics
    BITS_PER_DECIMAL_DIGIT: int = 4
    BITS_PER_CHAR: int = 8

    # Files read and written by the CLI
    DEFAULT_CODING_FILE: Path = Path("coding.txt")
    DEFAULT_DECODING_FILE: Path = Path("decoding.txt")
    STATE_ENCODING: str = "utf-8"


# Convenience re-exports
RANDOM_SEED: int = Config.RANDOM_SEED
MAX_DECIMAL_PRECISION: int = Config.MAX_DECIMAL_PRECISION
PROBABILITY_TOLERANCE: float = Config.PROBABILITY_TOLERANCE


_CONFIG_SINGLETON: Optional[Config] = None


def get_config() -> Config:
    """Return a singleton `Config` instance."""

    global _CONFIG_SINGLETON
    if _CONFIG_SINGLETON is None:
        _CONFIG_SINGLETON = Config()
    return _CONFIG_SINGLETON
