"""CLI commands reporting probabilities and bit costs for a text file.

Examples
--------
  arithcode probabilities --input message.txt
  arithcode probabilities --input message.txt --format json
  arithcode ratio --input message.txt
  arithcode bits --input message.txt
"""

from __future__ import annotations

from pathlib import Path
import json

import click

from arithcode.coding import ArithmeticCoder
from arithcode.config import Config
from arithcode.errors import CodingError
from arithcode.utils import read_text_file


_INPUT_OPTION = click.option(
    "input_path",
    "--input",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=Config.DEFAULT_CODING_FILE,
    show_default=True,
    help="Text file to analyse",
)


def _load(input_path: Path) -> tuple[str, ArithmeticCoder]:
    text = read_text_file(input_path)
    return text, ArithmeticCoder.from_text(text)


@click.command(name="probabilities")
@_INPUT_OPTION
@click.option(
    "fmt",
    "--format",
    type=click.Choice(["table", "json"], case_sensitive=False),
    default="table",
    show_default=True,
    help="Output format",
)
def probabilities(input_path: Path, fmt: str) -> None:
    """Show the per-symbol probability table trained on a file."""

    try:
        _, coder = _load(input_path)
        if fmt.lower() == "json":
            click.echo(json.dumps(coder.get_probabilities(), indent=2, ensure_ascii=False))
            return
        click.echo("Probability table:")
        for symbol in coder.model.symbols:
            click.echo(f"Symbol {symbol!r}: {coder.model[symbol]:.6f}")
        click.echo(f"Entropy: {coder.model.entropy():.4f} bits/symbol")
    except click.ClickException:
        raise
    except (CodingError, OSError) as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        raise SystemExit(1)


@click.command(name="ratio")
@_INPUT_OPTION
def ratio(input_path: Path) -> None:
    """Show the compression ratio of a file under its own probabilities."""

    try:
        text, coder = _load(input_path)
        result = coder.encode(text)
        value = coder.compute_ratio(text, result.bit_length)
        click.echo(f"Compression ratio: {value:.2f}")
        click.echo(f"(Encoded length: {result.bit_length} bits, 4 bits per fractional digit)")
    except click.ClickException:
        raise
    except (CodingError, OSError) as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        raise SystemExit(1)


@click.command(name="bits")
@_INPUT_OPTION
def bits(input_path: Path) -> None:
    """Show bit counts of the original and encoded forms of a file."""

    try:
        text, coder = _load(input_path)
        result = coder.encode(text)
        click.echo(f"Original bits: {len(text) * Config.BITS_PER_CHAR}")
        click.echo(f"Encoded bits (4 per fractional digit): {result.bit_length}")
    except click.ClickException:
        raise
    except (CodingError, OSError) as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        raise SystemExit(1)
