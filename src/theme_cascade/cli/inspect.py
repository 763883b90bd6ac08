"""CLI command: theme-cascade inspect -- display compiled override rules."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from theme_cascade.cli.loader import ThemeFileError, load_definition
from theme_cascade.compiler import compile_overrides
from theme_cascade.config import CascadeConfig


@click.command()
@click.argument("themefile", type=click.Path(exists=True))
@click.option("--context", "contexts", multiple=True, help="Extra known context name.")
def inspect(themefile: str, contexts: tuple[str, ...]) -> None:
    """Compile a theme file and display its rules in resolution order.

    Shows each rule's specificity, parsed target and props, most specific first.
    """
    try:
        definition = load_definition(Path(themefile))
    except ThemeFileError as exc:
        click.echo(f"Load error: {exc}", err=True)
        sys.exit(1)

    config = CascadeConfig().with_contexts(contexts)
    rules = compile_overrides(
        definition.overrides, config.known_contexts, config.default_component
    )

    click.echo(f"Theme: {definition.name or '(unnamed)'}")
    if definition.display_name:
        click.echo(f"Name:  {definition.display_name}")
    click.echo(f"Rules: {len(rules)}")
    click.echo()

    for rule in rules:
        parts = [f"  {rule.specificity:>3}  {rule.selector}", f"component={rule.component}"]
        if rule.context:
            parts.append(f"context={rule.context}")
        if rule.identifier:
            parts.append(f"id={rule.identifier}")
        if rule.state:
            parts.append(f"state={rule.state}")
        if rule.attributes:
            parts.append("attrs=" + "".join(str(m) for m in rule.attributes))
        click.echo("  ".join(parts))
        click.echo(f"       props={json.dumps(rule.props, sort_keys=True)}")
