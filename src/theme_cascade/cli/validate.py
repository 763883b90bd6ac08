"""CLI command: theme-cascade validate -- check a theme file's overrides."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from theme_cascade.cli.loader import ThemeFileError, load_definition
from theme_cascade.config import CascadeConfig
from theme_cascade.model.diagnostic import Severity
from theme_cascade.validation import validate as run_validate


@click.command()
@click.argument("themefile", type=click.Path(exists=True))
@click.option(
    "--context",
    "contexts",
    multiple=True,
    help="Extra known context name for '.context' shorthand (repeatable).",
)
def validate(themefile: str, contexts: tuple[str, ...]) -> None:
    """Validate the overrides in a JSON theme file.

    Prints diagnostics (errors, warnings, info) and exits with code 0 if
    no errors are found, or code 1 if there are errors.
    """
    theme_path = Path(themefile)

    try:
        definition = load_definition(theme_path)
    except ThemeFileError as exc:
        click.echo(f"Load error: {exc}", err=True)
        sys.exit(1)

    diagnostics = run_validate(definition, CascadeConfig().with_contexts(contexts))

    if not diagnostics:
        click.echo(f"OK: {theme_path.name} is valid (0 diagnostics)")
        sys.exit(0)

    errors = [d for d in diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in diagnostics if d.severity is Severity.WARNING]
    infos = [d for d in diagnostics if d.severity is Severity.INFO]

    for diag in diagnostics:
        click.echo(str(diag))
        if diag.fix:
            click.echo(f"  fix: {diag.fix}")

    click.echo()
    click.echo(
        f"Summary: {len(errors)} error(s), {len(warnings)} warning(s), {len(infos)} info"
    )

    if errors:
        sys.exit(1)
    sys.exit(0)
