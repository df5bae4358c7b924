"""Decode command for Scriptful CLI."""

import json
import sys

import click

from scriptful.codecs import decode
from scriptful.codecs.schema import script_to_json
from scriptful.core.errors import ScriptfulError
from scriptful.op_systems.simple_math import MathOperator


def parse_hex(text: str) -> bytes:
    """Parse hex that may contain whitespace."""
    return bytes.fromhex("".join(text.split()))


@click.command()
@click.argument('data')
def decode_command(data):
    """Decode a hex-encoded script and print it as JSON."""
    try:
        script = decode(parse_hex(data), MathOperator)
    except ValueError as e:
        print(f"Error: Invalid hex input: {e}", file=sys.stderr)
        sys.exit(1)
    except ScriptfulError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    click.echo(json.dumps(script_to_json(script), indent=2))
