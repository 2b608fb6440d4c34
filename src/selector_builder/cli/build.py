"""CLI command: selector-builder build -- assemble and print a selector."""

from __future__ import annotations

import sys

import click

from selector_builder.config import BuilderConfig
from selector_builder.errors import SelectorError
from selector_builder.parts import build_from_parts


@click.command()
@click.argument("parts", nargs=-1, required=True)
@click.pass_obj
def build(config: BuilderConfig | None, parts: tuple[str, ...]) -> None:
    """Build a selector from PARTS and print it.

    Each part is KIND=VALUE, where KIND is one of element, id, class, attr,
    pseudo-class or pseudo-element, or a combinator: +, ~, > or descendant.

    \b
    Example:
        selector-builder build element=a 'attr=href$=".png"' pseudo-class=focus
    """
    try:
        selector = build_from_parts(parts, config)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(selector.stringify())
