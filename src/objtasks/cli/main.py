"""objtasks CLI entry point: Click group with subcommands."""

import logging

import click

from objtasks import __version__


@click.group()
@click.version_option(version=__version__, prog_name="objtasks")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """objtasks - shapes, JSON helpers and a CSS selector builder."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from objtasks.cli.shapes import area, decode  # noqa: E402
from objtasks.cli.encode import encode  # noqa: E402
from objtasks.cli.selector import selector  # noqa: E402

cli.add_command(area)
cli.add_command(decode)
cli.add_command(encode)
cli.add_command(selector)
