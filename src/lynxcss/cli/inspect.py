"""CLI command: lynxcss inspect -- display the resolved variable scopes."""

from __future__ import annotations

import click

from lynxcss.cli._common import max_iterations_option, read_stylesheet, silent_logger
from lynxcss.config import ResolverOptions
from lynxcss.transforms import apply_transforms


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@max_iterations_option
def inspect(cssfile: str, max_iterations: int) -> None:
    """Resolve CSSFILE and display every scope with its custom properties."""
    stylesheet = read_stylesheet(cssfile)
    report = apply_transforms(
        stylesheet,
        options=ResolverOptions(max_iterations=max_iterations, log_warnings=False),
        logger=silent_logger(),
    )
    resolution = report.resolution

    click.echo(f"Scopes: {len(resolution.table)}")
    click.echo(f"Passes: {resolution.iterations}")
    if resolution.reached_limit:
        click.echo("Limit:  reached (possible circular reference)")
    click.echo()

    for selector, values in resolution.table.items():
        click.echo(f"{selector}:")
        for name, value in values.items():
            click.echo(f"  {name}: {value}")
