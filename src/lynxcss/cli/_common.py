"""Options and helpers shared by the CLI commands."""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

import click

from lynxcss.config import DEFAULT_MAX_ITERATIONS
from lynxcss.model.stylesheet import Stylesheet
from lynxcss.parser import ParseError, parse_css

max_iterations_option = click.option(
    "--max-iterations",
    type=click.IntRange(min=1),
    default=DEFAULT_MAX_ITERATIONS,
    show_default=True,
    help="Cap on resolution passes before assuming a circular reference",
)


@contextmanager
def parse_errors_exit() -> Iterator[None]:
    """Report a ParseError raised in the block on stderr and exit with code 1."""
    try:
        yield
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)


def read_stylesheet(cssfile: str) -> Stylesheet:
    """Parse *cssfile*, exiting with code 1 on a parse error."""
    with parse_errors_exit():
        stylesheet = parse_css(Path(cssfile).read_text(encoding="utf-8"))
    return stylesheet


def silent_logger() -> logging.Logger:
    """Logger for commands that print diagnostics themselves."""
    logger = logging.getLogger("lynxcss.cli")
    logger.propagate = False
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    return logger
