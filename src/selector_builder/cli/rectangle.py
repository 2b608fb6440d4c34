"""CLI command: selector-builder rectangle -- print a rectangle as JSON."""

from __future__ import annotations

import click

from selector_builder.config import BuilderConfig
from selector_builder.objects import Rectangle, get_json


def _number(value: float) -> int | float:
    """Drop the fractional part of whole numbers so 10.0 prints as 10."""
    return int(value) if value.is_integer() else value


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.pass_obj
def rectangle(config: BuilderConfig | None, width: float, height: float) -> None:
    """Print the JSON form of a WIDTH x HEIGHT rectangle with its area."""
    config = config or BuilderConfig()
    rect = Rectangle(width=_number(width), height=_number(height))
    payload = {
        "width": rect.width,
        "height": rect.height,
        "area": _number(float(rect.get_area())),
    }
    click.echo(get_json(payload, indent=config.json_indent))
