"""Shared filesystem helpers for the persistence and CLI layers.

Text is read and written with ``newline=""`` so ``\\r\\n`` line endings reach
the coder untouched and come back out byte for byte.
"""

from __future__ import annotations

from pathlib import Path

from arithcode.config import Config
from arithcode.errors import InvalidInputError


def ensure_dir(path: Path) -> None:
    """Create directory ``path`` and parents if they don't exist."""

    path.mkdir(parents=True, exist_ok=True)


def read_text_file(path: Path) -> str:
    """Return the contents of ``path`` decoded with the configured encoding.

    Raises
    ------
    InvalidInputError
        If the file is not valid text in ``Config.STATE_ENCODING``.
    """

    try:
        with path.open("r", encoding=Config.STATE_ENCODING, newline="") as f:
            return f.read()
    except UnicodeDecodeError as exc:
        raise InvalidInputError(
            f"{path} is not valid {Config.STATE_ENCODING} text: {exc.reason} at byte {exc.start}"
        ) from exc


def write_text_file(path: Path, text: str) -> None:
    """Write ``text`` to ``path``, creating parent directories as needed."""

    ensure_dir(path.parent)
    path.write_text(text, encoding=Config.STATE_ENCODING, newline="")
