"""CLI command: lynxcss process -- transform a stylesheet."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from lynxcss.cli._common import max_iterations_option, parse_errors_exit
from lynxcss.config import ResolverOptions
from lynxcss.processor import process_css
from lynxcss.transforms import DEFAULT_REMOVED_PROPERTIES


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the result to this file instead of stdout",
)
@max_iterations_option
@click.option("--quiet", is_flag=True, help="Suppress all warnings")
@click.option("--strict", is_flag=True, help="Exit with code 1 if any warning was produced")
@click.option(
    "--keep-property",
    "keep",
    multiple=True,
    help="Do not strip this property (repeatable)",
)
def process(
    cssfile: str,
    output: str | None,
    max_iterations: int,
    quiet: bool,
    strict: bool,
    keep: tuple[str, ...],
) -> None:
    """Resolve custom properties in CSSFILE and print the result.

    Disallowed properties are stripped and attribute selectors become class
    selectors.  Warnings are logged to stderr.
    """
    source = Path(cssfile).read_text(encoding="utf-8")
    options = ResolverOptions(max_iterations=max_iterations, log_warnings=not quiet)
    with parse_errors_exit():
        result = process_css(
            source,
            options=options,
            removed_properties=DEFAULT_REMOVED_PROPERTIES - set(keep),
        )

    if output:
        Path(output).write_text(result.css, encoding="utf-8")
    else:
        click.echo(result.css, nl=False)

    if strict and result.diagnostics:
        click.echo(f"Failed: {len(result.diagnostics)} warning(s)", err=True)
        sys.exit(1)
