"""Encode command for Scriptful CLI."""

import json
import sys

import click
from pydantic import ValidationError

from scriptful.codecs import encode
from scriptful.codecs.schema import script_from_json
from scriptful.core.errors import ScriptfulError
from scriptful.op_systems.simple_math import MathOperator


@click.command()
@click.argument('script', type=click.Path(exists=True))
def encode_command(script):
    """Print the hex encoding of a JSON script file."""
    try:
        with open(script) as f:
            document = json.load(f)
        items = script_from_json(document, MathOperator)
        click.echo(encode(items).hex())
    except (json.JSONDecodeError, ValidationError, ScriptfulError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
