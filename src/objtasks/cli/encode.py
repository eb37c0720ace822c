"""CLI command: objtasks encode -- re-encode a JSON document canonically."""

from __future__ import annotations

import json
import sys

import click

from objtasks.codec import CodecConfig
from objtasks.codec import encode as encode_json


@click.command()
@click.argument("json_text")
@click.option("--indent", type=int, default=None, help="Indent nested values by N spaces")
@click.option("--sort-keys", is_flag=True, help="Sort object keys")
def encode(json_text: str, indent: int | None, sort_keys: bool) -> None:
    """Parse JSON_TEXT and print it in canonical form."""
    try:
        value = json.loads(json_text)
        text = encode_json(value, CodecConfig(indent=indent, sort_keys=sort_keys))
    except ValueError as exc:
        # JSONDecodeError, or a NaN/Infinity literal that cannot be re-encoded
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(text)
