"""selector-builder CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging

import click

from selector_builder import __version__
from selector_builder.config import BuilderConfig


@click.group()
@click.version_option(version=__version__, prog_name="selector-builder")
@click.option(
    "--log-level",
    default=BuilderConfig.log_level,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level",
)
@click.option(
    "--indent",
    default=BuilderConfig.json_indent,
    type=click.IntRange(min=0),
    help="Indent JSON output (compact when omitted)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str, indent: int | None) -> None:
    """selector-builder - compose CSS selectors from ordered parts."""
    level = log_level.upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(level)
    ctx.obj = BuilderConfig(json_indent=indent)


# Import and register subcommands
from selector_builder.cli.build import build  # noqa: E402
from selector_builder.cli.rectangle import rectangle  # noqa: E402

cli.add_command(build)
cli.add_command(rectangle)
