"""CLI command: lynxcss check -- report variable problems without writing output."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from lynxcss.cli._common import max_iterations_option, read_stylesheet, silent_logger
from lynxcss.config import ResolverOptions
from lynxcss.transforms import apply_transforms


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@max_iterations_option
def check(cssfile: str, max_iterations: int) -> None:
    """Check CSSFILE for undefined variables and circular references.

    Prints each diagnostic and exits with code 0 if none are found, or code
    1 otherwise.
    """
    name = Path(cssfile).name
    stylesheet = read_stylesheet(cssfile)

    report = apply_transforms(
        stylesheet,
        options=ResolverOptions(max_iterations=max_iterations),
        logger=silent_logger(),
    )

    if not report.diagnostics:
        click.echo(f"OK: {name} has no variable problems (0 diagnostics)")
        sys.exit(0)

    for diag in report.diagnostics:
        click.echo(str(diag))

    click.echo()
    click.echo(f"Summary: {len(report.diagnostics)} warning(s)")
    sys.exit(1)
