"""CLI commands: objtasks area / objtasks decode -- work with shape objects."""

from __future__ import annotations

import dataclasses
import json
import sys

import click

from objtasks.codec import decode as decode_json
from objtasks.codec import encode as encode_json
from objtasks.model import Circle, Rectangle, make_rectangle

SHAPES = {
    "rectangle": Rectangle,
    "circle": Circle,
}


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
def area(width: float, height: float) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    click.echo(f"{make_rectangle(width, height).area():g}")


@click.command()
@click.argument("shape", type=click.Choice(sorted(SHAPES)))
@click.argument("json_text")
def decode(shape: str, json_text: str) -> None:
    """Decode JSON_TEXT onto SHAPE and print its fields and area."""
    try:
        obj = decode_json(SHAPES[shape], json_text)
    except (json.JSONDecodeError, TypeError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"{type(obj).__name__} {encode_json(obj)}")
    missing = [f.name for f in dataclasses.fields(obj) if not hasattr(obj, f.name)]
    if missing:
        click.echo(f"Error: cannot compute area: missing field(s) {', '.join(missing)}", err=True)
        sys.exit(1)
    click.echo(f"area: {obj.area():g}")
