"""CLI command: theme-cascade resolve -- resolve one query against a theme file."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from theme_cascade.cli.loader import ThemeFileError, load_definition
from theme_cascade.config import CascadeConfig
from theme_cascade.model.override import ResolveQuery, StaticElement
from theme_cascade.runtime import ThemeRuntime
from theme_cascade.validation import ValidationError


def _parse_attrs(pairs: tuple[str, ...]) -> dict[str, str]:
    attrs: dict[str, str] = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not name or not sep:
            raise click.BadParameter(f"expected NAME=VALUE, got {pair!r}", param_hint="--attr")
        attrs[name] = value
    return attrs


@click.command()
@click.argument("themefile", type=click.Path(exists=True))
@click.option("--component", required=True, help="Component tag, e.g. button.")
@click.option("--context", default=None, help="Context of the instance, e.g. chat.")
@click.option("--id", "identifier", default=None, help="Identifier, e.g. chat.send.")
@click.option("--state", default=None, help="Pseudo-state, e.g. hover.")
@click.option("--attr", "attrs", multiple=True, help="Element attribute NAME=VALUE (repeatable).")
@click.option(
    "--known-context",
    "known_contexts",
    multiple=True,
    help="Extra known context name for '.context' shorthand (repeatable).",
)
@click.option("--managed/--unmanaged", default=False, help="Managed components keep variant/size/color.")
@click.option("--debug", is_flag=True, help="Include data-theme-target/matches in the output.")
def resolve(
    themefile: str,
    component: str,
    context: str | None,
    identifier: str | None,
    state: str | None,
    attrs: tuple[str, ...],
    known_contexts: tuple[str, ...],
    managed: bool,
    debug: bool,
) -> None:
    """Resolve the merged props for one component instance.

    Prints the resolved props as JSON. Exits with code 1 if the theme does
    not validate.
    """
    try:
        definition = load_definition(Path(themefile))
    except ThemeFileError as exc:
        click.echo(f"Load error: {exc}", err=True)
        sys.exit(1)

    runtime = ThemeRuntime(CascadeConfig(debug=debug).with_contexts(known_contexts))
    try:
        runtime.load(definition)
    except ValidationError as exc:
        for diag in exc.diagnostics:
            click.echo(str(diag), err=True)
        sys.exit(1)

    element = StaticElement(_parse_attrs(attrs)) if attrs else None
    query = ResolveQuery(
        component=component,
        context=context,
        identifier=identifier,
        state=state,
        element=element,
        is_managed=managed,
    )
    result = runtime.resolve(query)
    click.echo(json.dumps(result.props, indent=2, sort_keys=True))
