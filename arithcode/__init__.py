"""
arithcode: Static-probability arithmetic coding over the unit interval.

Maps a symbol sequence to a single real number in [0, 1) using a fixed
probability table, and reconstructs the sequence from that number plus its
length.
"""

__all__ = [
    "Config",
    "RANDOM_SEED",
    "__version__",
    # Errors
    "CodingError",
    "InvalidInputError",
    "UnknownSymbolError",
    "NoMatchingSymbolError",
    "MalformedPersistedStateError",
    # Models (lazy-imported via __getattr__)
    "ProbabilityModel",
    "RangeTable",
    "compute_ranges",
    # Coding (lazy-imported via __getattr__)
    "ArithmeticCoder",
    "EncodedResult",
    "Interval",
    # Persistence (lazy-imported via __getattr__)
    "PersistedState",
    "load_state",
    "save_state",
]

__version__ = "0.1.0"

from typing import Any

from arithcode.config import Config, RANDOM_SEED
from arithcode.errors import (
    CodingError,
    InvalidInputError,
    UnknownSymbolError,
    NoMatchingSymbolError,
    MalformedPersistedStateError,
)


def __getattr__(name: str) -> Any:  # lazy attribute access keeps numpy off the import path
    if name == "ProbabilityModel":
        from arithcode.models.probability import ProbabilityModel as _PM

        return _PM
    if name == "RangeTable":
        from arithcode.models.ranges import RangeTable as _RT

        return _RT
    if name == "compute_ranges":
        from arithcode.models.ranges import compute_ranges as _cr

        return _cr
    if name == "ArithmeticCoder":
        from arithcode.coding.arithmetic import ArithmeticCoder as _AC

        return _AC
    if name == "EncodedResult":
        from arithcode.coding.interval import EncodedResult as _ER

        return _ER
    if name == "Interval":
        from arithcode.coding.interval import Interval as _IV

        return _IV
    if name == "PersistedState":
        from arithcode.persistence import PersistedState as _PS

        return _PS
    if name == "load_state":
        from arithcode.persistence import load_state as _ls

        return _ls
    if name == "save_state":
        from arithcode.persistence import save_state as _ss

        return _ss
    raise AttributeError(f"module 'arithcode' has no attribute {name!r}")
