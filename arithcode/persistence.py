"""Three-line text format for an encoded message and its probability table.

Layout::

    0.3
    3
    A:0.6666666666666666;B:0.3333333333333333

Line 1 is the encoded value, line 2 the original symbol count and line 3 the
probability table as ``symbol:probability`` pairs joined by ``;`` in
canonical symbol order. The symbol is always the single character in front of
its ``:``, so ``:`` and ``;`` are valid symbols. Newline, carriage return and
backslash symbols are written as ``\\n``, ``\\r`` and ``\\\\``.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping
import logging

from arithcode.errors import MalformedPersistedStateError
from arithcode.utils import read_text_file, write_text_file


_LOGGER = logging.getLogger(__name__)

_ESCAPES: dict[str, str] = {"\\": "\\\\", "\n": "\\n", "\r": "\\r"}
_UNESCAPES: dict[str, str] = {"\\": "\\", "n": "\n", "r": "\r"}


@dataclass(frozen=True)
class PersistedState:
    """Everything needed to decode a message: value, length and table."""

    value: float
    length: int
    probabilities: Mapping[str, float]


def format_table(probabilities: Mapping[str, float]) -> str:
    """Serialize a probability table as ``sym:p;sym:p;...``."""

    return ";".join(
        f"{_ESCAPES.get(sym, sym)}:{float(probabilities[sym])!r}"
        for sym in sorted(probabilities)
    )


def parse_table(line: str) -> dict[str, float]:
    """Inverse of `format_table`.

    Raises
    ------
    MalformedPersistedStateError
        On a missing ``:``, an unknown escape, an unparsable probability, a
        duplicate symbol or an empty table.
    """

    table: dict[str, float] = {}
    i = 0
    n = len(line)
    while i < n:
        if line[i] == "\\":
            escaped = line[i + 1 : i + 2]
            if escaped not in _UNESCAPES:
                raise MalformedPersistedStateError(
                    f"Unknown escape '\\{escaped}' at column {i + 1} of the probability table"
                )
            symbol = _UNESCAPES[escaped]
            i += 2
        else:
            symbol = line[i]
            i += 1

        if line[i : i + 1] != ":":
            raise MalformedPersistedStateError(
                f"Expected ':' after symbol {symbol!r} at column {i + 1} of the probability table"
            )
        end = line.find(";", i + 1)
        if end == -1:
            end = n
        raw = line[i + 1 : end]
        try:
            prob = float(raw)
        except ValueError as exc:
            raise MalformedPersistedStateError(
                f"Invalid probability {raw!r} for symbol {symbol!r}"
            ) from exc
        if symbol in table:
            raise MalformedPersistedStateError(f"Duplicate symbol {symbol!r} in probability table")
        table[symbol] = prob
        i = end + 1

    if not table:
        raise MalformedPersistedStateError("Probability table is empty")
    return table


def format_state(state: PersistedState) -> str:
    """Render ``state`` as the three-line text form."""

    return f"{state.value!r}\n{state.length}\n{format_table(state.probabilities)}"


def parse_state(text: str) -> PersistedState:
    """Parse the three-line text form.

    Trailing blank lines and ``\\r`` line endings are tolerated.

    Raises
    ------
    MalformedPersistedStateError
        If there are fewer than three lines, extra non-blank lines, or any
        line fails to parse.
    """

    lines = [ln[:-1] if ln.endswith("\r") else ln for ln in text.split("\n")]
    while len(lines) > 3 and not lines[-1]:
        lines.pop()
    if len(lines) != 3:
        raise MalformedPersistedStateError(
            f"Expected 3 lines (value, length, probability table), got {len(lines)}"
        )

    value_line, length_line, table_line = lines
    try:
        value = float(value_line)
    except ValueError as exc:
        raise MalformedPersistedStateError(f"Invalid encoded value: {value_line!r}") from exc
    try:
        length = int(length_line)
    except ValueError as exc:
        raise MalformedPersistedStateError(f"Invalid length: {length_line!r}") from exc

    return PersistedState(value=value, length=length, probabilities=parse_table(table_line))


def save_state(path: Path, state: PersistedState) -> None:
    """Write ``state`` to ``path``."""

    write_text_file(path, format_state(state))
    _LOGGER.info("Saved encoded state (%d symbols) to %s", state.length, path)


def load_state(path: Path) -> PersistedState:
    """Read and parse the state stored at ``path``."""

    state = parse_state(read_text_file(path))
    _LOGGER.info("Loaded encoded state (%d symbols) from %s", state.length, path)
    return state


__all__ = [
    "PersistedState",
    "format_table",
    "parse_table",
    "format_state",
    "parse_state",
    "save_state",
    "load_state",
]
