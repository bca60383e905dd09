"""Command-line interface for arithcode using Click command groups."""

from __future__ import annotations

from typing import NoReturn
import logging

import click

from arithcode import __version__


@click.group()
@click.version_option(version=__version__)
@click.option("verbose", "--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """arithcode: static-probability arithmetic coding of text files."""

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Register subcommands
from arithcode.commands.encode import encode  # noqa: E402
from arithcode.commands.decode import decode  # noqa: E402
from arithcode.commands.stats import bits, probabilities, ratio  # noqa: E402

cli.add_command(encode)
cli.add_command(decode)
cli.add_command(probabilities)
cli.add_command(ratio)
cli.add_command(bits)


def main() -> NoReturn:
    """Entry point for the CLI."""
    cli()
