"""Probability and range models: symbol distributions and their [0, 1) partition."""

from __future__ import annotations

from typing import Any

__all__ = [
    "ProbabilityModel",
    "RangeTable",
    "compute_ranges",
]


def __getattr__(name: str) -> Any:  # lazy imports to keep numpy off the package import path
    if name == "ProbabilityModel":
        from arithcode.models.probability import ProbabilityModel as _PM

        return _PM
    if name == "RangeTable":
        from arithcode.models.ranges import RangeTable as _RT

        return _RT
    if name == "compute_ranges":
        from arithcode.models.ranges import compute_ranges as _cr

        return _cr
    raise AttributeError(f"module 'arithcode.models' has no attribute {name!r}")
