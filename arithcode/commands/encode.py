"""CLI command that encodes a text file and saves the decoding state.

The probability table is trained on the file itself, so the saved state
carries everything ``arithcode decode`` needs.

Examples
--------
  arithcode encode
  arithcode encode --input message.txt --output message.state
"""

from __future__ import annotations

from pathlib import Path

import click

from arithcode.coding import ArithmeticCoder
from arithcode.config import Config
from arithcode.errors import CodingError, NoMatchingSymbolError
from arithcode.persistence import PersistedState, save_state
from arithcode.utils import read_text_file


@click.command(name="encode")
@click.option(
    "input_path",
    "--input",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=Config.DEFAULT_CODING_FILE,
    show_default=True,
    help="Text file to encode",
)
@click.option(
    "output_path",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=Config.DEFAULT_DECODING_FILE,
    show_default=True,
    help="Where to write the value, length and probability table",
)
@click.option(
    "verify",
    "--verify/--no-verify",
    default=True,
    show_default=True,
    help="Decode the result and warn if it does not reproduce the input",
)
def encode(input_path: Path, output_path: Path, verify: bool) -> None:
    """Encode a text file with probabilities trained on its own contents."""

    try:
        text = read_text_file(input_path)
        coder = ArithmeticCoder.from_text(text)
        result = coder.encode(text)

        click.echo(f"Encoded value: {result.value!r}")
        click.echo(f"Bit length: {result.bit_length} bits (4 bits per fractional digit)")

        if verify:
            try:
                roundtrip_ok = coder.decode(result.value, len(text)) == text
            except NoMatchingSymbolError:
                roundtrip_ok = False
            if not roundtrip_ok:
                click.secho(
                    "Warning: input is too long for float precision; decoding will not reproduce it.",
                    fg="yellow",
                )

        state = PersistedState(
            value=result.value,
            length=len(text),
            probabilities=coder.get_probabilities(),
        )
        save_state(output_path, state)
        click.secho(f"Saved to {output_path}", fg="green")
    except click.ClickException:
        raise
    except (CodingError, OSError) as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        raise SystemExit(1)
