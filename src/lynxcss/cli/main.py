"""lynxcss CLI entry point: Click group with subcommands."""

import logging

import click

from lynxcss import __version__


@click.group()
@click.version_option(version=__version__, prog_name="lynxcss")
def cli() -> None:
    """lynxcss - resolve CSS custom properties ahead of time."""
    logging.basicConfig(level=logging.WARNING, format="%(name)s: %(message)s")


# Import and register subcommands
from lynxcss.cli.process import process  # noqa: E402
from lynxcss.cli.check import check  # noqa: E402
from lynxcss.cli.inspect import inspect  # noqa: E402

cli.add_command(process)
cli.add_command(check)
cli.add_command(inspect)
