"""CLI command that restores text from a saved decoding state.

Examples
--------
  arithcode decode
  arithcode decode --input message.state --output message.txt
"""

from __future__ import annotations

from pathlib import Path

import click

from arithcode.coding import ArithmeticCoder
from arithcode.config import Config
from arithcode.errors import CodingError
from arithcode.persistence import load_state
from arithcode.utils import write_text_file


@click.command(name="decode")
@click.option(
    "input_path",
    "--input",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=Config.DEFAULT_DECODING_FILE,
    show_default=True,
    help="State file written by 'arithcode encode'",
)
@click.option(
    "output_path",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=Config.DEFAULT_CODING_FILE,
    show_default=True,
    help="Where to write the decoded text",
)
def decode(input_path: Path, output_path: Path) -> None:
    """Decode a saved value back into text."""

    try:
        state = load_state(input_path)
        coder = ArithmeticCoder.from_map(state.probabilities)
        text = coder.decode(state.value, state.length)

        click.echo(f"Decoded text: {text}")
        write_text_file(output_path, text)
        click.secho(f"Saved to {output_path}", fg="green")
    except click.ClickException:
        raise
    except (CodingError, OSError) as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        raise SystemExit(1)
