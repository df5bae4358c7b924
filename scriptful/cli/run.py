"""Run command for Scriptful CLI."""

import json
import sys

import click
from pydantic import ValidationError

from scriptful.cli.decode import parse_hex
from scriptful.codecs import decode
from scriptful.codecs.schema import item_to_json, script_from_json
from scriptful.core.errors import ScriptfulError
from scriptful.core.item import Item
from scriptful.core.machine import Machine, MachineConfig
from scriptful.op_systems.simple_math import MathOperator, simple_math_op_sys


@click.command()
@click.argument('script')
@click.option('--hex', 'is_hex', is_flag=True, help='Treat SCRIPT as hex-encoded bytes instead of a JSON file path')
@click.option('--max-stack-size', type=int, default=None, help='Cap on the main stack length')
@click.option('--max-steps', type=int, default=None, help='Cap on evaluated items')
@click.option('--json-output', '-j', 'json_output', is_flag=True, help='Output as JSON')
def run_command(script, is_hex, max_stack_size, max_steps, json_output):
    """Run a script on the simple math machine."""
    try:
        if is_hex:
            items = decode(parse_hex(script), MathOperator)
        else:
            with open(script) as f:
                items = script_from_json(json.load(f), MathOperator)
    except (OSError, ValueError, ScriptfulError) as e:
        # pydantic's ValidationError and JSONDecodeError are ValueErrors
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    machine = Machine(simple_math_op_sys, MachineConfig(max_stack_size=max_stack_size, max_steps=max_steps))
    try:
        top = machine.run_script(items)
    except ScriptfulError as e:
        output = {"success": False, "error": f"{type(e).__name__}: {e}", "steps": machine.steps}
        if json_output:
            print(json.dumps(output, indent=2))
        else:
            print(f"Error: {output['error']} (after {machine.steps} steps)", file=sys.stderr)
        sys.exit(1)

    output = {
        "success": True,
        "top": item_to_json(Item.value(top)) if top is not None else None,
        "stack_length": machine.stack_length(),
        "steps": machine.steps,
    }

    if json_output:
        click.echo(json.dumps(output, indent=2))
    else:
        click.echo("✓ Execution successful")
        click.echo(f"  Top: {top!r}")
        click.echo(f"  Stack length: {output['stack_length']}")
