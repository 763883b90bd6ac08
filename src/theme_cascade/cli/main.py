"""theme-cascade CLI entry point: Click group with subcommands."""

import logging

import click

from theme_cascade import __version__


@click.group()
@click.version_option(version=__version__, prog_name="theme-cascade")
@click.option("-v", "--verbose", is_flag=True, help="Log compiler and resolver activity.")
def cli(verbose: bool) -> None:
    """theme-cascade - selector-based component overrides for UI themes."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from theme_cascade.cli.inspect import inspect  # noqa: E402
from theme_cascade.cli.resolve import resolve  # noqa: E402
from theme_cascade.cli.validate import validate  # noqa: E402

cli.add_command(validate)
cli.add_command(inspect)
cli.add_command(resolve)
