"""Validation rules for theme definitions.

Each rule is a function taking a ThemeDefinition and a CascadeConfig and
returning a list of Diagnostic objects describing any issues found. Rules
never raise: compilation stays best-effort and these findings are the only
report of degraded selectors.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from theme_cascade.compiler import compile_override
from theme_cascade.config import CascadeConfig
from theme_cascade.model.diagnostic import Diagnostic, Severity
from theme_cascade.model.theme import PROP_MAP_KEYS, ThemeDefinition
from theme_cascade.selector.errors import SelectorSyntaxError
from theme_cascade.selector.normalize import BRACKET_RE, normalize_selector
from theme_cascade.selector.parser import strip_brackets
from theme_cascade.selector.syntax import parse_strict


_THEME_NAME_RE = re.compile(r"^[a-z][a-z0-9-]*$")
_TAG_RE = re.compile(r"^\s*\w")
_COMBINATOR_RE = re.compile(r">>>?|[>+~]|\S\s+\S")
_SHORTHAND_CONTEXT_RE = re.compile(r"(?<![\w.#-])\w+((?:\.[\w-]+)+)")


def _selectors(definition: ThemeDefinition) -> list[str]:
    return [s for s in definition.overrides if s and s.strip()]


# ---------------------------------------------------------------------------
# Structural rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_theme_name(definition: ThemeDefinition, config: CascadeConfig) -> list[Diagnostic]:
    """Theme name is required and must be kebab-case."""
    if not definition.name:
        return [
            Diagnostic(
                rule="check_theme_name",
                severity=Severity.ERROR,
                message="Theme name is required.",
                fix='Add a kebab-case "name" (e.g. "nature", "cyberpunk").',
            )
        ]
    if not _THEME_NAME_RE.match(definition.name):
        return [
            Diagnostic(
                rule="check_theme_name",
                severity=Severity.ERROR,
                message=f"Theme name '{definition.name}' must be kebab-case.",
                fix='Use lowercase letters, digits and hyphens: "my-theme-name".',
            )
        ]
    return []


def check_empty_selector(definition: ThemeDefinition, config: CascadeConfig) -> list[Diagnostic]:
    """Blank selectors are not allowed."""
    diagnostics: list[Diagnostic] = []
    for selector in definition.overrides:
        if not selector or not selector.strip():
            diagnostics.append(
                Diagnostic(
                    rule="check_empty_selector",
                    severity=Severity.ERROR,
                    message="Empty selector found in overrides.",
                    selector=selector,
                    fix="Remove the entry or give it a selector such as 'button'.",
                )
            )
    return diagnostics


def check_override_props(definition: ThemeDefinition, config: CascadeConfig) -> list[Diagnostic]:
    """Every override must map to a property mapping."""
    diagnostics: list[Diagnostic] = []
    for selector, props in definition.overrides.items():
        if not isinstance(props, Mapping):
            diagnostics.append(
                Diagnostic(
                    rule="check_override_props",
                    severity=Severity.ERROR,
                    message=f"Invalid props for selector '{selector}': expected a mapping, "
                    f"got {type(props).__name__}.",
                    selector=selector,
                    fix="Props must be an object such as {\"variant\": \"solid\"}.",
                )
            )
    return diagnostics


# ---------------------------------------------------------------------------
# Selector rules (WARNING severity)
# ---------------------------------------------------------------------------


def check_unsupported_combinators(
    definition: ThemeDefinition, config: CascadeConfig
) -> list[Diagnostic]:
    """Descendant, child and sibling combinators are not supported."""
    diagnostics: list[Diagnostic] = []
    for selector in _selectors(definition):
        # brackets become a placeholder so "[a] [b]" still shows its space
        if _COMBINATOR_RE.search(BRACKET_RE.sub("_", selector.strip())):
            diagnostics.append(
                Diagnostic(
                    rule="check_unsupported_combinators",
                    severity=Severity.WARNING,
                    message=f"Selector '{selector}' uses a combinator; only compound "
                    "selectors on a single element are supported.",
                    selector=selector,
                    fix="Target the element directly, e.g. 'button.chat' or 'button[data-id=\"x\"]'.",
                )
            )
    return diagnostics


def check_selector_syntax(definition: ThemeDefinition, config: CascadeConfig) -> list[Diagnostic]:
    """Selectors should conform to the override grammar."""
    diagnostics: list[Diagnostic] = []
    for selector in _selectors(definition):
        try:
            parse_strict(selector, config.known_contexts)
        except SelectorSyntaxError as exc:
            where = f" at column {exc.column}" if exc.column else ""
            diagnostics.append(
                Diagnostic(
                    rule="check_selector_syntax",
                    severity=Severity.WARNING,
                    message=f"Selector '{selector}' is not valid override syntax{where}; "
                    "it was parsed on a best-effort basis.",
                    selector=selector,
                    fix='Use tag, .context, #id, [attr op "value"] and one :state.',
                )
            )
    return diagnostics


def check_component_tag(definition: ThemeDefinition, config: CascadeConfig) -> list[Diagnostic]:
    """Selectors without a leading tag fall back to the default component."""
    diagnostics: list[Diagnostic] = []
    for selector in _selectors(definition):
        if not _TAG_RE.match(selector):
            diagnostics.append(
                Diagnostic(
                    rule="check_component_tag",
                    severity=Severity.WARNING,
                    message=f"Selector '{selector}' has no component tag; it will target "
                    f"'{config.default_component}'.",
                    selector=selector,
                    fix=f"Prefix the selector with a tag, e.g. '{config.default_component}{selector.strip()}'.",
                )
            )
    return diagnostics


def check_unknown_context(definition: ThemeDefinition, config: CascadeConfig) -> list[Diagnostic]:
    """``.name`` shorthand outside the known contexts is never expanded."""
    diagnostics: list[Diagnostic] = []
    for selector in _selectors(definition):
        normalized = normalize_selector(selector, config.known_contexts)
        for match in _SHORTHAND_CONTEXT_RE.finditer(strip_brackets(normalized)):
            names = [n for n in match.group(1).split(".") if n]
            for name in names:
                diagnostics.append(
                    Diagnostic(
                        rule="check_unknown_context",
                        severity=Severity.WARNING,
                        message=f"'.{name}' in selector '{selector}' is not a known context "
                        "and will be ignored.",
                        selector=selector,
                        fix="Known contexts: " + ", ".join(sorted(config.known_contexts)) + ".",
                    )
                )
    return diagnostics


def check_duplicate_targets(
    definition: ThemeDefinition, config: CascadeConfig
) -> list[Diagnostic]:
    """Several selectors aimed at the same component/context/identifier/state."""
    targets: dict[str, list[str]] = {}
    for selector in _selectors(definition):
        compiled = compile_override(
            selector, {}, config.known_contexts, config.default_component
        )
        if compiled.attributes:
            continue
        targets.setdefault(compiled.target_key, []).append(selector)

    diagnostics: list[Diagnostic] = []
    for key, selectors in targets.items():
        if len(selectors) > 1:
            diagnostics.append(
                Diagnostic(
                    rule="check_duplicate_targets",
                    severity=Severity.WARNING,
                    message=f"Multiple overrides target '{key}': {', '.join(selectors)}.",
                    selector=selectors[-1],
                    fix="Consolidate them; the later declaration wins.",
                )
            )
    return diagnostics


# ---------------------------------------------------------------------------
# Property rules (WARNING severity)
# ---------------------------------------------------------------------------


def check_ui_prop(definition: ThemeDefinition, config: CascadeConfig) -> list[Diagnostic]:
    """``ui`` is merged key-by-key and must be a mapping."""
    diagnostics: list[Diagnostic] = []
    for selector, props in definition.overrides.items():
        if isinstance(props, Mapping) and "ui" in props and not isinstance(props["ui"], Mapping):
            diagnostics.append(
                Diagnostic(
                    rule="check_ui_prop",
                    severity=Severity.WARNING,
                    message=f"'ui' for selector '{selector}' is not an object; it will "
                    "replace rather than merge.",
                    selector=selector,
                )
            )
    return diagnostics


def check_prop_maps(definition: ThemeDefinition, config: CascadeConfig) -> list[Diagnostic]:
    """propMaps tables must map strings to class strings."""
    if definition.prop_maps is None:
        return []
    if not isinstance(definition.prop_maps, Mapping):
        return [
            Diagnostic(
                rule="check_prop_maps",
                severity=Severity.WARNING,
                message="propMaps must be an object keyed by variant, size or color.",
            )
        ]
    diagnostics: list[Diagnostic] = []
    for prop_type, table in definition.prop_maps.items():
        if prop_type not in PROP_MAP_KEYS:
            diagnostics.append(
                Diagnostic(
                    rule="check_prop_maps",
                    severity=Severity.WARNING,
                    message=f"Unknown propMaps entry '{prop_type}'; only "
                    f"{', '.join(PROP_MAP_KEYS)} are projected.",
                )
            )
        elif not isinstance(table, Mapping) or not all(
            isinstance(v, str) for v in table.values()
        ):
            diagnostics.append(
                Diagnostic(
                    rule="check_prop_maps",
                    severity=Severity.WARNING,
                    message=f"Invalid propMaps for '{prop_type}'.",
                    fix="PropMaps must be objects mapping values to class strings.",
                )
            )
    return diagnostics


# ---------------------------------------------------------------------------
# Rule registry
# ---------------------------------------------------------------------------

ALL_RULES = [
    check_theme_name,
    check_empty_selector,
    check_override_props,
    check_unsupported_combinators,
    check_selector_syntax,
    check_component_tag,
    check_unknown_context,
    check_duplicate_targets,
    check_ui_prop,
    check_prop_maps,
]
