"""Scriptful CLI package - developer tooling around the codec and the machine."""

import logging

import click

from scriptful.cli.encode import encode_command
from scriptful.cli.decode import decode_command
from scriptful.cli.run import run_command


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Log debug traces to stderr')
def main(verbose):
    """Scriptful - a minimalist stack machine for domain-specific scripts."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


main.add_command(encode_command, "encode")
main.add_command(decode_command, "decode")
main.add_command(run_command, "run")

__all__ = [
    "main",
    "encode_command",
    "decode_command",
    "run_command",
]
